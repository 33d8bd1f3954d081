"""Custom exceptions for node execution."""

from schemas.description import NodeIdentity


class NodeError(Exception):
    """Base exception for errors raised while a node executes.

    ``context`` carries structured details for the host, most importantly
    ``item_index`` once the failing item is known.
    """

    def __init__(self, message: str, *args, context: dict | None = None, **kwargs):
        self.message = message
        self.context = context if context is not None else {}
        super().__init__(message, *args, **kwargs)


class NodeOperationError(NodeError):
    """Wraps a foreign error with the identity of the node that hit it."""

    def __init__(
        self,
        node: NodeIdentity,
        error: Exception | str,
        item_index: int | None = None,
    ):
        self.node = node
        context = {}
        if item_index is not None:
            context["item_index"] = item_index
        super().__init__(str(error), context=context)

    @property
    def item_index(self) -> int | None:
        return self.context.get("item_index")


class ParameterResolutionError(NodeError):
    """Raised when a node parameter cannot be read or its expression fails."""

    def __init__(self, message: str, parameter: str | None = None):
        self.parameter = parameter
        context = {"parameter": parameter} if parameter else {}
        super().__init__(message, context=context)


class ConversionError(Exception):
    """Raised when the converter fails to render a document."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)
