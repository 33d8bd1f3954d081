"""Base class for PDF converters.

A converter is the conversion primitive a node delegates rendering to: it
takes HTML text plus layout options and resolves to the bytes of a PDF
document, or fails with a single error.
"""

from abc import ABC, abstractmethod

from schemas.pdf_options import PdfOptions


class PdfConverter(ABC):
    """Abstract base class for HTML-to-PDF converters."""

    @abstractmethod
    async def generate_pdf(self, content: str, options: PdfOptions) -> bytes:
        """Render HTML content to a PDF document.

        Args:
            content: HTML source text
            options: Page layout options

        Returns:
            The PDF document bytes

        Raises:
            ConversionError: If rendering fails
        """
        pass
