"""Command-line interface for html-to-pdf-node."""

import argparse
import asyncio
import base64
import json
import logging
import sys
from pathlib import Path

from htmltopdf.nodes import HtmlToPdfNode, get_node_type, list_node_types
from htmltopdf.runtime import ExecutionContext
from schemas.item import NodeExecutionData

DEFAULT_NODE = HtmlToPdfNode.description.name
DEFAULT_OUTPUT_PDF = Path("./output.pdf")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def parse_param(value: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` command-line parameter.

    Only the first ``=`` separates name from value, so expressions such as
    ``htmlContent=={{ json.body }}`` keep their leading ``=``.
    """
    name, sep, param_value = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, param_value


def load_items(input_path: Path) -> list[NodeExecutionData]:
    """Load input items from a JSON file.

    The file holds a JSON array. Entries with a ``json`` key are read as
    host items; any other object is used as the item's json payload.
    """
    data = json.loads(input_path.read_text())
    if not isinstance(data, list):
        raise ValueError(f"{input_path} must contain a JSON array of items")

    items = []
    for entry in data:
        if isinstance(entry, dict) and "json" in entry:
            items.append(NodeExecutionData.model_validate(entry))
        else:
            items.append(NodeExecutionData(json=entry))
    return items


def write_binaries(items: list[NodeExecutionData], binary_dir: Path) -> list[Path]:
    """Decode binary attachments of output items into files.

    Returns:
        Paths of the files written
    """
    binary_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for index, item in enumerate(items):
        for key, binary in (item.binary or {}).items():
            name = Path(binary.file_name or "").name
            if name in ("", ".", ".."):
                name = f"{key}.bin"
            target = binary_dir / name
            if target in written:
                target = binary_dir / f"{target.stem}-{index}{target.suffix}"
            target.write_bytes(base64.b64decode(binary.data))
            written.append(target)
    return written


def describe(args: argparse.Namespace) -> int:
    """Execute the describe command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        node_type = get_node_type(args.node)
    except ValueError as e:
        logger.error(f"{e} (available: {', '.join(list_node_types())})")
        return 1

    print(node_type.description.model_dump_json(by_alias=True, exclude_none=True, indent=2))
    return 0


def run_node(args: argparse.Namespace) -> int:
    """Execute the run command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    input_path = args.input.resolve()
    if not input_path.exists():
        logger.error(f"Input file not found: {input_path}")
        return 1

    try:
        node_type = get_node_type(args.node)
        items = load_items(input_path)
        context = ExecutionContext.for_node(
            node_type,
            items,
            parameters=dict(args.param or []),
            continue_on_fail=args.continue_on_fail,
        )
        output = asyncio.run(node_type().execute(context))[0]

        payload = json.dumps([item.to_host() for item in output], indent=2)
        if args.output:
            args.output.write_text(payload)
        else:
            print(payload)

        errors = [item for item in output if item.error is not None]
        logger.info(f"Executed {node_type.description.name} on {len(items)} items")
        logger.info(f"  Items returned: {len(output)}")
        if args.output:
            logger.info(f"  Output: {args.output}")

        if args.binary_dir:
            written = write_binaries(output, args.binary_dir)
            logger.info(f"  Files written: {len(written)}")

        if errors:
            logger.warning(f"  Errors: {len(errors)}")
            for item in errors:
                logger.warning(f"    - item {item.paired_item}: {item.error}")

        return 0

    except Exception as e:
        logger.error(f"Failed to run node: {e}")
        return 1


def convert_html(args: argparse.Namespace) -> int:
    """Execute the convert command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    html_path = args.html.resolve()
    if not html_path.exists():
        logger.error(f"HTML file not found: {html_path}")
        return 1

    output_path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        context = ExecutionContext.for_node(
            HtmlToPdfNode,
            [NodeExecutionData(json={"source": str(html_path)})],
            parameters={
                "htmlContent": html_path.read_text(),
                "filename": output_path.name,
            },
        )
        output = asyncio.run(HtmlToPdfNode().execute(context))[0]

        pdf_bytes = base64.b64decode(output[0].binary["data"].data)
        output_path.write_bytes(pdf_bytes)

        logger.info(f"Converted {html_path.name}")
        logger.info(f"  Size: {len(pdf_bytes)} bytes")
        logger.info(f"  Output: {output_path}")

        return 0

    except Exception as e:
        logger.error(f"Failed to convert HTML to PDF: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="htmltopdf",
        description="Convert HTML content on workflow items to PDF attachments",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    describe_parser = subparsers.add_parser(
        "describe",
        help="Print a node description as JSON",
        description="Print the declarative description (metadata and input fields) of a registered node type.",
    )
    describe_parser.add_argument(
        "--node",
        type=str,
        default=DEFAULT_NODE,
        help=f"Node type name (default: {DEFAULT_NODE})",
    )
    describe_parser.set_defaults(func=describe)

    run_parser = subparsers.add_parser(
        "run",
        help="Execute a node over a JSON file of items",
        description="Execute a registered node over a JSON array of items and print or save the output items.",
    )
    run_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Path to a JSON file containing an array of items",
    )
    run_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write output items to this file instead of stdout",
    )
    run_parser.add_argument(
        "--node",
        type=str,
        default=DEFAULT_NODE,
        help=f"Node type name (default: {DEFAULT_NODE})",
    )
    run_parser.add_argument(
        "--param",
        type=parse_param,
        action="append",
        metavar="NAME=VALUE",
        help="Node parameter; values starting with '=' are per-item expressions (repeatable)",
    )
    run_parser.add_argument(
        "--continue-on-fail",
        action="store_true",
        help="Record failed items as error items instead of aborting",
    )
    run_parser.add_argument(
        "--binary-dir",
        type=Path,
        default=None,
        help="Directory to write decoded binary attachments to",
    )
    run_parser.set_defaults(func=run_node)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a single HTML file to PDF",
        description="Convert one HTML file to a PDF file using the Html To PDF node.",
    )
    convert_parser.add_argument(
        "--html",
        type=Path,
        required=True,
        help="Path to the HTML file to convert",
    )
    convert_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_PDF,
        help=f"Path of the PDF to write (default: {DEFAULT_OUTPUT_PDF})",
    )
    convert_parser.set_defaults(func=convert_html)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
