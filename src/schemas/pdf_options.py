"""PDF layout option schemas.

Mirrors the option record accepted by the conversion primitive: a page size
keyword, a four-sided margin and a background printing switch.
"""

from pydantic import BaseModel, Field


class PageMargin(BaseModel):
    """Page insets.

    Numbers are CSS pixels; strings are passed through as CSS lengths
    (e.g. ``"1cm"``).
    """

    top: float | str = 0
    right: float | str = 0
    bottom: float | str = 0
    left: float | str = 0

    model_config = {"frozen": True}


class PdfOptions(BaseModel):
    """Layout options for one conversion.

    Attributes:
        format: CSS page size keyword (e.g. "A4", "Letter")
        margin: Page margins
        print_background: Whether background colours and images are rendered
    """

    format: str = "A4"
    margin: PageMargin = PageMargin()
    print_background: bool = Field(default=True, alias="printBackground")

    model_config = {"populate_by_name": True, "frozen": True}


class ConversionRequest(BaseModel):
    """Everything needed to convert one item's HTML to PDF."""

    content: str = ""
    filename: str
    options: PdfOptions

    model_config = {"frozen": True}
