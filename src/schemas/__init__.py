"""Schema definitions for the HTML to PDF node."""

from .description import NodeDefaults, NodeDescription, NodeIdentity, NodeProperty
from .item import BinaryData, NodeExecutionData
from .pdf_options import ConversionRequest, PageMargin, PdfOptions

__all__ = [
    "BinaryData",
    "ConversionRequest",
    "NodeDefaults",
    "NodeDescription",
    "NodeExecutionData",
    "NodeIdentity",
    "NodeProperty",
    "PageMargin",
    "PdfOptions",
]
