"""Pytest fixtures for html-to-pdf-node tests."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from htmltopdf.converters.converter import PdfConverter
from schemas.item import NodeExecutionData


@pytest.fixture
def sample_items():
    """Three input items with distinct json payloads."""
    return [
        NodeExecutionData(json={"id": 1, "title": "First", "body": "<h1>First</h1>"}),
        NodeExecutionData(json={"id": 2, "title": "Second", "body": "<h1>Second</h1>"}),
        NodeExecutionData(json={"id": 3, "title": "Third", "body": "<h1>Third</h1>"}),
    ]


@pytest.fixture
def mock_converter():
    """Converter double returning a small fake PDF for every call."""
    converter = MagicMock(spec=PdfConverter)
    converter.generate_pdf = AsyncMock(return_value=b"%PDF-1.7 fake document")
    return converter


@pytest.fixture
def sample_html():
    return """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>Quarterly Report</title>
    <style>
        body { font-family: serif; background: #eef; }
        h1 { font-size: 24pt; }
    </style>
</head>
<body>
    <h1>Quarterly Report</h1>
    <p>Revenue grew by <strong>12%</strong> over the previous quarter.</p>
</body>
</html>"""


@pytest.fixture
def sample_items_file(tmp_path):
    """Write a JSON array of items to disk."""
    items = [
        {"json": {"name": "alpha", "html": "<h1>Alpha</h1>"}},
        {"name": "beta", "html": "<h1>Beta</h1>"},
    ]
    items_path = tmp_path / "items.json"
    items_path.write_text(json.dumps(items, indent=2))
    return items_path
