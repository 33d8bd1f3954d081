"""Node types and the node registry."""

from .html_to_pdf_node import PDF_OPTIONS, HtmlToPdfNode
from .node import Node
from .registry import NODE_TYPES, get_node_type, list_node_types, register_node

__all__ = [
    "Node",
    "HtmlToPdfNode",
    "PDF_OPTIONS",
    "NODE_TYPES",
    "get_node_type",
    "list_node_types",
    "register_node",
]
