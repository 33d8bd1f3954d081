"""Execution context handed to a node by the host.

The context is the node's only view of the host: the batch of input items,
per-item parameter access, the node's own identity, and the
continue-on-fail policy.
"""

import logging
from typing import TYPE_CHECKING, Any

from schemas.description import NodeIdentity
from schemas.item import NodeExecutionData

from .exceptions import ParameterResolutionError
from .expressions import resolve_value

if TYPE_CHECKING:
    from htmltopdf.nodes.node import Node

logger = logging.getLogger(__name__)

_MISSING = object()


class ExecutionContext:
    """Host-provided context for one node execution.

    Attributes:
        node: Identity of the executing node instance
        items: Input items for this execution
        parameters: Raw parameter values configured on the node
    """

    def __init__(
        self,
        node: NodeIdentity,
        items: list[NodeExecutionData],
        parameters: dict[str, Any] | None = None,
        continue_on_fail: bool = False,
    ):
        self.node = node
        self.items = items
        self.parameters = dict(parameters or {})
        self._continue_on_fail = continue_on_fail

    def __repr__(self) -> str:
        return f"ExecutionContext({self.node.name}, items={len(self.items)})"

    @classmethod
    def for_node(
        cls,
        node_type: "type[Node]",
        items: list[NodeExecutionData],
        parameters: dict[str, Any] | None = None,
        continue_on_fail: bool = False,
        name: str | None = None,
    ) -> "ExecutionContext":
        """Build a context the way a host would for a freshly placed node.

        Property defaults from the node description are applied first and
        then overridden by ``parameters``.

        Args:
            node_type: Node class being executed
            items: Input items
            parameters: Parameter values set on the node
            continue_on_fail: Host continue-on-fail policy
            name: Instance name (default: the description's default name)

        Returns:
            A ready-to-use ExecutionContext
        """
        description = node_type.description
        merged = description.property_defaults()
        merged.update(parameters or {})
        identity = NodeIdentity(
            name=name or description.defaults.name,
            type=description.name,
            type_version=description.version,
        )
        return cls(identity, items, merged, continue_on_fail)

    def get_input_data(self) -> list[NodeExecutionData]:
        return self.items

    def get_node(self) -> NodeIdentity:
        return self.node

    def continue_on_fail(self) -> bool:
        return self._continue_on_fail

    def get_node_parameter(self, name: str, item_index: int, default: Any = _MISSING) -> Any:
        """Read a parameter for one item.

        Expressions are evaluated against the item at ``item_index``.

        Args:
            name: Parameter name
            item_index: Index of the item being processed
            default: Returned when the parameter is not set

        Returns:
            The resolved parameter value

        Raises:
            ParameterResolutionError: If the parameter is unset with no
                default, or its expression cannot be resolved
        """
        value = self.parameters.get(name)
        if value is None:
            if default is _MISSING:
                raise ParameterResolutionError(
                    f"Could not get parameter '{name}'", parameter=name
                )
            return default

        if not 0 <= item_index < len(self.items):
            raise ParameterResolutionError(
                f"Item index {item_index} out of range for parameter '{name}'",
                parameter=name,
            )

        return resolve_value(value, self.items[item_index].json_data, item_index, name)
