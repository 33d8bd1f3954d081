"""HTML to PDF node.

Converts per-item HTML content into a PDF binary attachment using a
PdfConverter (WeasyPrint by default).
"""

import base64
import copy
import logging

from htmltopdf.converters.converter import PdfConverter
from htmltopdf.converters.weasyprint_converter import WeasyPrintConverter
from htmltopdf.runtime.context import ExecutionContext
from htmltopdf.runtime.exceptions import NodeError, NodeOperationError
from schemas.description import NodeDefaults, NodeDescription, NodeProperty
from schemas.item import BinaryData, NodeExecutionData
from schemas.pdf_options import ConversionRequest, PageMargin, PdfOptions

from .node import Node
from .registry import register_node

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
BINARY_PROPERTY = "data"
DEFAULT_FILENAME = "output.pdf"

PDF_OPTIONS = PdfOptions(
    format="A4",
    margin=PageMargin(top=10, right=10, bottom=10, left=10),
    print_background=True,
)


@register_node
class HtmlToPdfNode(Node):
    """Convert HTML content to a PDF attachment on each item.

    For every input item the node:
    1. Resolves the ``htmlContent`` and ``filename`` parameters
    2. Renders the HTML to PDF with fixed A4 layout options
    3. Emits the item's json unchanged with the PDF attached as ``data``

    Attributes:
        converter: Conversion primitive used to render PDFs
    """

    description = NodeDescription(
        display_name="Html To PDF",
        name="htmltopdf",
        icon="file:htmltopdf.svg",
        group=["transform"],
        version=1,
        description="Convert HTML content to PDF",
        defaults=NodeDefaults(name="HtmlToPDF"),
        inputs=["main"],
        outputs=["main"],
        properties=[
            NodeProperty(
                display_name="HTML Content",
                name="htmlContent",
                type="string",
                default="",
                placeholder="Add your HTML Content",
                description=(
                    "HTML content that needs to be converted to PDF. "
                    "Only html content is supported"
                ),
            ),
            NodeProperty(
                display_name="Filename",
                name="filename",
                type="string",
                default=DEFAULT_FILENAME,
                description="Name of the generated PDF file",
            ),
        ],
    )

    def __init__(self, converter: PdfConverter | None = None):
        self.converter = converter or WeasyPrintConverter()

    async def execute(self, context: ExecutionContext) -> list[list[NodeExecutionData]]:
        items = context.get_input_data()
        return_data: list[NodeExecutionData] = []
        logger.info(f"Converting {len(items)} items to PDF")

        for item_index, item in enumerate(items):
            try:
                request = self._build_request(context, item_index)
                pdf_bytes = await self.converter.generate_pdf(request.content, request.options)
                return_data.append(self._build_output(item, item_index, request, pdf_bytes))
                logger.debug(f"Item {item_index}: generated {request.filename}")
            except Exception as error:
                if context.continue_on_fail():
                    logger.warning(f"Item {item_index} failed, continuing: {error}")
                    return_data.append(
                        NodeExecutionData(
                            json=copy.deepcopy(item.json_data),
                            error=error,
                            paired_item=item_index,
                        )
                    )
                    continue

                logger.error(f"Item {item_index} failed: {error}")
                if isinstance(error, NodeError):
                    error.context["item_index"] = item_index
                    raise
                raise NodeOperationError(
                    context.get_node(), error, item_index=item_index
                ) from error

        logger.info(f"PDF conversion complete for {len(return_data)} items")
        return [return_data]

    def _build_request(self, context: ExecutionContext, item_index: int) -> ConversionRequest:
        html_content = context.get_node_parameter("htmlContent", item_index, "")
        filename = context.get_node_parameter("filename", item_index, DEFAULT_FILENAME)
        return ConversionRequest(
            content=str(html_content),
            filename=str(filename),
            options=PDF_OPTIONS,
        )

    def _build_output(
        self,
        item: NodeExecutionData,
        item_index: int,
        request: ConversionRequest,
        pdf_bytes: bytes,
    ) -> NodeExecutionData:
        return NodeExecutionData(
            json=copy.deepcopy(item.json_data),
            binary={
                BINARY_PROPERTY: BinaryData(
                    mime_type=PDF_MIME_TYPE,
                    data=base64.b64encode(pdf_bytes).decode("ascii"),
                    file_name=request.filename,
                )
            },
            paired_item=item_index,
        )
