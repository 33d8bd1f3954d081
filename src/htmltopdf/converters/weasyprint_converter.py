"""WeasyPrint-backed PDF converter.

Renders HTML strings to PDF bytes. Layout options are applied through a
generated ``@page`` stylesheet. WeasyPrint gives extra stylesheets user
origin, which loses to the document's own rules, so the page size and
margins are declared ``!important``.
"""

import asyncio
import logging

from weasyprint import CSS, HTML

from htmltopdf.runtime.exceptions import ConversionError
from schemas.pdf_options import PageMargin, PdfOptions

from .converter import PdfConverter

logger = logging.getLogger(__name__)

NO_BACKGROUND_CSS = "*, *::before, *::after { background: none !important; }"


class WeasyPrintConverter(PdfConverter):
    """Convert HTML to PDF using WeasyPrint.

    Rendering is synchronous in WeasyPrint, so it runs in a worker thread
    and the caller awaits its completion.

    Attributes:
        base_url: Base URL for resolving relative paths in HTML (optional)
    """

    def __init__(self, base_url: str | None = None):
        """Initialize the converter.

        Args:
            base_url: Base URL for relative links, images and stylesheets
        """
        self.base_url = base_url

    async def generate_pdf(self, content: str, options: PdfOptions) -> bytes:
        return await asyncio.to_thread(self.render, content, options)

    def render(self, content: str, options: PdfOptions) -> bytes:
        """Render HTML to PDF bytes in the calling thread.

        Args:
            content: HTML source text
            options: Page layout options

        Returns:
            The PDF document bytes

        Raises:
            ConversionError: If WeasyPrint fails to render the document
        """
        try:
            html_doc = HTML(string=content, base_url=self.base_url)
            pdf_bytes = html_doc.write_pdf(stylesheets=self._stylesheets(options))
        except Exception as e:
            logger.error(f"WeasyPrint failed to render document: {e}")
            raise ConversionError(f"PDF generation failed: {e}") from e

        logger.debug(f"Rendered {len(content)} characters of HTML to {len(pdf_bytes)} PDF bytes")
        return pdf_bytes

    def _stylesheets(self, options: PdfOptions) -> list[CSS]:
        stylesheets = [CSS(string=page_css(options))]
        if not options.print_background:
            stylesheets.append(CSS(string=NO_BACKGROUND_CSS))
        return stylesheets


def css_length(value: float | str) -> str:
    """Express a margin value as a CSS length; bare numbers are pixels.

    Examples:
        >>> css_length(10)
        '10px'
        >>> css_length("1cm")
        '1cm'
    """
    if isinstance(value, str):
        return value
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{value}px"


def margin_css(margin: PageMargin) -> str:
    return " ".join(
        css_length(side) for side in (margin.top, margin.right, margin.bottom, margin.left)
    )


def page_css(options: PdfOptions) -> str:
    """Build the ``@page`` rule for a set of layout options.

    Examples:
        >>> page_css(PdfOptions(margin=PageMargin(top=10, right=10, bottom=10, left=10)))
        '@page { size: A4 !important; margin: 10px 10px 10px 10px !important; }'
    """
    return (
        f"@page {{ size: {options.format} !important; "
        f"margin: {margin_css(options.margin)} !important; }}"
    )
