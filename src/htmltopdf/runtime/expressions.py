"""Per-item parameter expressions.

A parameter value starting with ``=`` is an expression. The remainder is a
Jinja2 template rendered once per item with these variables:

- ``json``: the item's structured payload
- ``item_index``: the item's position in the batch

Examples:
    ``={{ json.body }}`` -> the item's ``body`` field
    ``={{ json.items }}`` -> the item's ``items`` field, not ``dict.items``
    ``=report-{{ item_index }}.pdf`` -> ``report-0.pdf``, ``report-1.pdf``, ...

Attribute lookups on mappings check keys before attributes, so payload
fields named like dict methods resolve to the field.
"""

import logging
from collections.abc import Mapping
from typing import Any

from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from .exceptions import ParameterResolutionError

logger = logging.getLogger(__name__)

EXPRESSION_PREFIX = "="


class ItemEnvironment(SandboxedEnvironment):
    """Sandboxed environment where ``obj.name`` prefers mapping keys."""

    def getattr(self, obj: Any, attribute: str) -> Any:
        if isinstance(obj, Mapping) and attribute in obj:
            return obj[attribute]
        return super().getattr(obj, attribute)


_env = ItemEnvironment(undefined=StrictUndefined, autoescape=False)


def is_expression(value: Any) -> bool:
    return isinstance(value, str) and value.startswith(EXPRESSION_PREFIX)


def resolve_expression(
    expression: str,
    item_json: dict[str, Any],
    item_index: int,
    parameter: str | None = None,
) -> str:
    """Render an expression against one item.

    Args:
        expression: Parameter value including the leading ``=``
        item_json: Structured payload of the current item
        item_index: Index of the current item
        parameter: Parameter name, for error reporting

    Returns:
        The rendered string

    Raises:
        ParameterResolutionError: If the template is invalid or references
            an undefined value
    """
    source = expression[len(EXPRESSION_PREFIX):]
    try:
        template = _env.from_string(source)
        return template.render(json=item_json, item_index=item_index)
    except TemplateError as e:
        logger.debug(f"Expression for {parameter!r} failed on item {item_index}: {e}")
        raise ParameterResolutionError(
            f"Could not resolve parameter '{parameter}': {e}", parameter=parameter
        ) from e


def resolve_value(
    value: Any,
    item_json: dict[str, Any],
    item_index: int,
    parameter: str | None = None,
) -> Any:
    """Resolve a raw parameter value, evaluating it if it is an expression."""
    if is_expression(value):
        return resolve_expression(value, item_json, item_index, parameter)
    return value
