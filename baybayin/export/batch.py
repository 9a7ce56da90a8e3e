"""Batch conversion of tabular files."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from tqdm import tqdm

from baybayin.errors import BatchError
from baybayin.transliterate import convert, resolve_canceller
from baybayin.utils.io import atomic_write, read_jsonl, write_jsonl
from baybayin.utils.log import log_with_context


SUPPORTED_EXTENSIONS = {".csv", ".jsonl", ".parquet"}

OUTPUT_COLUMN = "baybayin"


@dataclass
class BatchResult:
    """Result of a batch conversion."""

    input_path: Path
    output_path: Path
    rows: int
    empty_rows: int
    canceller: str
    font: str


def read_table(path: Path) -> pd.DataFrame:
    """
    Read a CSV, JSONL or Parquet file.

    Args:
        path: Input file

    Returns:
        DataFrame

    Raises:
        BatchError: If the format is unsupported or the file is missing
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext not in SUPPORTED_EXTENSIONS:
        raise BatchError(
            f"Unsupported file type '{ext}' (expected one of {', '.join(sorted(SUPPORTED_EXTENSIONS))})"
        )
    if not path.exists():
        raise BatchError(f"Input file not found: {path}")

    if ext == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if ext == ".jsonl":
        return pd.DataFrame(list(read_jsonl(path)))
    return pd.read_parquet(path)


def write_table(df: pd.DataFrame, path: Path) -> None:
    """
    Write a DataFrame atomically in the format given by the extension.

    Args:
        df: DataFrame to write
        path: Output file

    Raises:
        BatchError: If the format is unsupported
    """
    path = Path(path)
    ext = path.suffix.lower()

    if ext == ".jsonl":
        # Round-trip through pandas JSON so numpy scalars become plain types
        write_jsonl(path, json.loads(df.to_json(orient="records", force_ascii=False)))
    elif ext == ".csv":
        atomic_write(path, lambda tmp: df.to_csv(tmp, index=False, encoding="utf-8"))
    elif ext == ".parquet":
        atomic_write(path, lambda tmp: df.to_parquet(tmp, index=False))
    else:
        raise BatchError(f"Unsupported output type '{ext}'")


def convert_file(
    input_path: Path,
    output_path: Path,
    logger: logging.Logger,
    column: str = "text",
    canceller: str = "+",
    font: str = "Baybayin Simple",
    progress: bool = True,
) -> BatchResult:
    """
    Convert one text column of a file and write it with a `baybayin` column.

    Args:
        input_path: CSV, JSONL or Parquet input
        output_path: Output file (format from its extension)
        logger: Logger instance
        column: Column holding Latin text
        canceller: Requested vowel-canceller symbol
        font: Font name
        progress: Show a progress bar

    Returns:
        Batch result

    Raises:
        BatchError: If the input cannot be read or lacks the column
    """
    out_ext = Path(output_path).suffix.lower()
    if out_ext not in SUPPORTED_EXTENSIONS:
        raise BatchError(f"Unsupported output type '{out_ext}'")

    df = read_table(input_path)

    if column not in df.columns:
        raise BatchError(
            f"Column '{column}' not found in {input_path} (columns: {', '.join(map(str, df.columns))})"
        )

    resolved = resolve_canceller(canceller, font)
    if resolved != canceller:
        logger.warning(f"Canceller {canceller!r} not supported by {font}, using {resolved!r}")

    logger.info(f"Converting {len(df)} rows from {input_path}")

    # Non-string cells (NaN, numbers) convert to ""
    converted = [
        convert(value, resolved, font)
        for value in tqdm(df[column], desc="Converting", unit="row", disable=not progress)
    ]
    df[OUTPUT_COLUMN] = converted

    write_table(df, output_path)
    empty_rows = sum(1 for value in converted if not value)
    log_with_context(
        logger,
        "info",
        f"Wrote {len(df)} rows to {output_path}",
        rows=len(df),
        empty_rows=empty_rows,
        canceller=resolved,
        font=font,
    )

    return BatchResult(
        input_path=Path(input_path),
        output_path=Path(output_path),
        rows=len(df),
        empty_rows=empty_rows,
        canceller=resolved,
        font=font,
    )
