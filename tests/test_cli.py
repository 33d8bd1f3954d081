"""Tests for the CLI module."""

import argparse
import json

import pytest

from htmltopdf.cli import load_items, main, parse_param, write_binaries
from schemas.item import BinaryData, NodeExecutionData


class TestParseParam:
    """Tests for NAME=VALUE parsing."""

    def test_simple_value(self):
        assert parse_param("filename=report.pdf") == ("filename", "report.pdf")

    def test_expression_keeps_leading_equals(self):
        assert parse_param("htmlContent=={{ json.body }}") == ("htmlContent", "={{ json.body }}")

    def test_empty_value_allowed(self):
        assert parse_param("htmlContent=") == ("htmlContent", "")

    def test_missing_separator_rejected(self):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_param("filename")


class TestLoadItems:
    """Tests for reading items from JSON."""

    def test_host_and_plain_entries(self, sample_items_file):
        """Entries with 'json' are host items; others become the payload."""
        items = load_items(sample_items_file)

        assert [item.json_data for item in items] == [
            {"name": "alpha", "html": "<h1>Alpha</h1>"},
            {"name": "beta", "html": "<h1>Beta</h1>"},
        ]

    def test_rejects_non_array(self, tmp_path):
        path = tmp_path / "items.json"
        path.write_text('{"json": {}}')

        with pytest.raises(ValueError, match="JSON array"):
            load_items(path)


class TestWriteBinaries:
    """Tests for writing decoded attachments."""

    def test_writes_files_by_name(self, tmp_path):
        items = [
            NodeExecutionData(
                json={},
                binary={"data": BinaryData(mime_type="application/pdf", data="JVBERi0=", file_name="a.pdf")},
            )
        ]
        written = write_binaries(items, tmp_path / "out")

        assert written == [tmp_path / "out" / "a.pdf"]
        assert (tmp_path / "out" / "a.pdf").read_bytes() == b"%PDF-"

    def test_duplicate_names_get_index_suffix(self, tmp_path):
        binary = BinaryData(mime_type="application/pdf", data="JVBERi0=", file_name="same.pdf")
        items = [
            NodeExecutionData(json={}, binary={"data": binary}),
            NodeExecutionData(json={}, binary={"data": binary}),
        ]
        written = write_binaries(items, tmp_path)

        assert [p.name for p in written] == ["same.pdf", "same-1.pdf"]

    @pytest.mark.parametrize("file_name", ["..", ".", "", "../"])
    def test_unsafe_names_fall_back_to_key(self, tmp_path, file_name):
        """Names that do not resolve to a file are replaced by the binary key."""
        items = [
            NodeExecutionData(
                json={},
                binary={"data": BinaryData(mime_type="application/pdf", data="JVBERi0=", file_name=file_name)},
            )
        ]
        written = write_binaries(items, tmp_path / "out")

        assert written == [tmp_path / "out" / "data.bin"]
        assert (tmp_path / "out" / "data.bin").read_bytes() == b"%PDF-"

    def test_skips_items_without_binary(self, tmp_path):
        items = [NodeExecutionData(json={}, error=RuntimeError("x"))]
        assert write_binaries(items, tmp_path) == []


class TestCLIDescribe:
    """Tests for the describe command."""

    def test_describe_prints_description(self, capsys):
        result = main(["describe"])

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "htmltopdf"
        assert data["displayName"] == "Html To PDF"
        assert [p["name"] for p in data["properties"]] == ["htmlContent", "filename"]

    def test_describe_unknown_node(self, caplog):
        result = main(["describe", "--node", "nope"])

        assert result == 1
        assert "no such node type: nope" in caplog.text


class TestCLIRun:
    """Tests for the run command."""

    def test_run_missing_input(self, tmp_path, caplog):
        result = main(["run", "--input", str(tmp_path / "missing.json")])

        assert result == 1
        assert "Input file not found" in caplog.text

    def test_run_writes_output_items(self, tmp_path, sample_items_file):
        output_path = tmp_path / "out.json"
        result = main([
            "run",
            "--input", str(sample_items_file),
            "--output", str(output_path),
            "--param", "htmlContent=={{ json.html }}",
            "--param", "filename=={{ json.name }}.pdf",
        ])

        assert result == 0
        data = json.loads(output_path.read_text())
        assert len(data) == 2
        assert data[0]["json"] == {"name": "alpha", "html": "<h1>Alpha</h1>"}
        assert data[0]["binary"]["data"]["fileName"] == "alpha.pdf"
        assert data[1]["binary"]["data"]["mimeType"] == "application/pdf"
        assert data[1]["pairedItem"] == 1

    def test_run_prints_to_stdout(self, capsys, sample_items_file):
        result = main(["run", "--input", str(sample_items_file)])

        assert result == 0
        data = json.loads(capsys.readouterr().out)
        assert [item["binary"]["data"]["fileName"] for item in data] == [
            "output.pdf",
            "output.pdf",
        ]

    def test_run_writes_binaries(self, tmp_path, sample_items_file):
        binary_dir = tmp_path / "pdfs"
        result = main([
            "run",
            "--input", str(sample_items_file),
            "--output", str(tmp_path / "out.json"),
            "--param", "filename=={{ json.name }}.pdf",
            "--binary-dir", str(binary_dir),
        ])

        assert result == 0
        assert (binary_dir / "alpha.pdf").read_bytes().startswith(b"%PDF-")
        assert (binary_dir / "beta.pdf").read_bytes().startswith(b"%PDF-")

    def test_run_aborts_on_failure(self, tmp_path, sample_items_file, caplog):
        """Without --continue-on-fail a bad expression fails the command."""
        output_path = tmp_path / "out.json"
        result = main([
            "run",
            "--input", str(sample_items_file),
            "--output", str(output_path),
            "--param", "htmlContent=={{ json.missing }}",
        ])

        assert result == 1
        assert not output_path.exists()
        assert "Failed to run node" in caplog.text

    def test_run_continue_on_fail(self, tmp_path, sample_items_file):
        output_path = tmp_path / "out.json"
        result = main([
            "run",
            "--input", str(sample_items_file),
            "--output", str(output_path),
            "--param", "htmlContent=={{ json.missing }}",
            "--continue-on-fail",
        ])

        assert result == 0
        data = json.loads(output_path.read_text())
        assert [item["pairedItem"] for item in data] == [0, 1]
        assert all(item["error"]["name"] == "ParameterResolutionError" for item in data)
        assert all("binary" not in item for item in data)


class TestCLIConvert:
    """Tests for the convert command."""

    def test_convert_missing_html(self, tmp_path, caplog):
        result = main(["convert", "--html", str(tmp_path / "missing.html")])

        assert result == 1
        assert "HTML file not found" in caplog.text

    def test_convert_writes_pdf(self, tmp_path, sample_html):
        html_path = tmp_path / "report.html"
        html_path.write_text(sample_html)
        output_path = tmp_path / "out" / "report.pdf"

        result = main(["convert", "--html", str(html_path), "--output", str(output_path)])

        assert result == 0
        assert output_path.read_bytes().startswith(b"%PDF-")


class TestCLINoCommand:
    """Tests for running without a command."""

    def test_no_command_prints_help(self, capsys):
        result = main([])

        assert result == 0
        assert "usage" in capsys.readouterr().out.lower()
