"""Host contract: execution context, parameter expressions and errors."""

from .context import ExecutionContext
from .exceptions import (
    ConversionError,
    NodeError,
    NodeOperationError,
    ParameterResolutionError,
)
from .expressions import is_expression, resolve_expression

__all__ = [
    "ExecutionContext",
    "ConversionError",
    "NodeError",
    "NodeOperationError",
    "ParameterResolutionError",
    "is_expression",
    "resolve_expression",
]
