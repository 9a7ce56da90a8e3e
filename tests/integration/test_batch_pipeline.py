"""Integration tests for batch file conversion.

These tests run the complete file workflow:
  1. Read a CSV, JSONL or Parquet input
  2. Resolve the canceller against the font
  3. Convert the text column
  4. Write the output atomically in the requested format
"""

import json
import logging
from pathlib import Path

import pandas as pd
import pytest

from baybayin.errors import BatchError
from baybayin.export.batch import convert_file, read_table


pytestmark = pytest.mark.integration


@pytest.fixture
def csv_input(tmp_path: Path, sample_rows) -> Path:
    """Write sample rows as CSV."""
    path = tmp_path / "input.csv"
    pd.DataFrame(sample_rows).to_csv(path, index=False)
    return path


@pytest.fixture
def jsonl_input(tmp_path: Path, sample_rows) -> Path:
    """Write sample rows as JSONL."""
    path = tmp_path / "input.jsonl"
    with path.open("w", encoding="utf-8") as f:
        for row in sample_rows:
            f.write(json.dumps(row) + "\n")
    return path


class TestBatchConversion:
    """Test file-to-file conversion."""

    def test_csv_to_csv(self, tmp_path: Path, csv_input: Path, test_logger: logging.Logger):
        """Test CSV conversion keeps columns and adds baybayin."""
        output = tmp_path / "out" / "output.csv"

        result = convert_file(csv_input, output, test_logger, progress=False)

        assert result.rows == 4
        assert result.empty_rows == 1
        assert result.canceller == "+"

        df = pd.read_csv(output, dtype=str, keep_default_na=False)
        assert list(df.columns) == ["id", "text", "baybayin"]
        assert df["baybayin"].tolist() == ["ᜊᜆ", "ᜋᜄ ᜊᜆ", "", "ᜐᜎᜋᜆ+ ᜉᜓ"]

    def test_jsonl_to_jsonl(self, tmp_path: Path, jsonl_input: Path, test_logger: logging.Logger):
        """Test JSONL conversion with a font-resolved canceller."""
        output = tmp_path / "output.jsonl"

        result = convert_file(
            jsonl_input,
            output,
            test_logger,
            canceller="+",
            font="Baybayin Kariktan",
            progress=False,
        )

        assert result.canceller == "]"

        records = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
        assert [r["id"] for r in records] == [1, 2, 3, 4]
        assert records[3]["baybayin"] == "ᜐᜎᜋᜆ] ᜉᜓ"
        # Glyphs are written unescaped
        assert "ᜊᜆ" in output.read_text(encoding="utf-8")

    def test_csv_to_parquet(self, tmp_path: Path, csv_input: Path, test_logger: logging.Logger):
        """Test Parquet output."""
        output = tmp_path / "output.parquet"

        convert_file(csv_input, output, test_logger, canceller="x", progress=False)

        df = read_table(output)
        assert df["baybayin"].tolist()[3] == "ᜐᜎᜋᜆx ᜉᜓ"

    def test_custom_column(self, tmp_path: Path, test_logger: logging.Logger):
        """Test converting a non-default column."""
        path = tmp_path / "words.csv"
        pd.DataFrame({"salita": ["mga", "nga"]}).to_csv(path, index=False)

        convert_file(path, tmp_path / "out.csv", test_logger, column="salita", progress=False)

        df = pd.read_csv(tmp_path / "out.csv")
        assert df["baybayin"].tolist() == ["ᜋᜄ", "ᜅ"]

    def test_missing_column(self, csv_input: Path, tmp_path: Path, test_logger: logging.Logger):
        """Test a missing column is reported."""
        with pytest.raises(BatchError, match="Column 'tagalog' not found"):
            convert_file(csv_input, tmp_path / "out.csv", test_logger, column="tagalog", progress=False)

    def test_unsupported_input(self, tmp_path: Path, test_logger: logging.Logger):
        """Test unsupported input formats."""
        path = tmp_path / "input.xlsx"
        path.write_bytes(b"")

        with pytest.raises(BatchError, match="Unsupported file type"):
            convert_file(path, tmp_path / "out.csv", test_logger, progress=False)

    def test_unsupported_output(self, csv_input: Path, tmp_path: Path, test_logger: logging.Logger):
        """Test unsupported output formats fail before any work."""
        with pytest.raises(BatchError, match="Unsupported output type"):
            convert_file(csv_input, tmp_path / "out.txt", test_logger, progress=False)
        assert not (tmp_path / "out.txt").exists()

    def test_missing_input(self, tmp_path: Path, test_logger: logging.Logger):
        """Test a missing input file."""
        with pytest.raises(BatchError, match="not found"):
            convert_file(tmp_path / "nope.csv", tmp_path / "out.csv", test_logger, progress=False)

    def test_summary_log_context(
        self, tmp_path: Path, csv_input: Path, test_logger: logging.Logger, caplog
    ):
        """Test the batch summary carries structured fields."""
        with caplog.at_level(logging.INFO, logger=test_logger.name):
            convert_file(csv_input, tmp_path / "out.csv", test_logger, progress=False)

        summary = [r for r in caplog.records if hasattr(r, "extra_fields")]
        assert len(summary) == 1
        assert summary[0].extra_fields == {
            "rows": 4,
            "empty_rows": 1,
            "canceller": "+",
            "font": "Baybayin Simple",
        }
