"""Converters rendering HTML to PDF."""

from .converter import PdfConverter
from .weasyprint_converter import WeasyPrintConverter

__all__ = ["PdfConverter", "WeasyPrintConverter"]
