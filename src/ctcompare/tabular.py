"""CSV decode/encode helpers."""

from __future__ import annotations

import csv
import io
from typing import Iterable, Mapping

from ctcompare.exceptions import TableDecodeError


def decode_csv(text: str) -> list[dict[str, str]]:
    """Parse CSV text with a header row into a list of row dicts.

    A leading byte order mark is dropped. Short rows are padded with empty
    strings; extra cells are dropped.
    """
    text = text.removeprefix("\ufeff")
    if not text:
        return []

    reader = csv.DictReader(io.StringIO(text, newline=""), restval="")
    try:
        return [
            {k: v for k, v in row.items() if k is not None}
            for row in reader
        ]
    except csv.Error as exc:
        raise TableDecodeError(f"Line {reader.line_num}: {exc}") from exc


def encode_csv(rows: Iterable[Mapping[str, object]], columns: list[str]) -> str:
    """Serialize rows as CSV with a header, ``\\n`` line endings and minimal quoting."""
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=columns, lineterminator="\n")
    writer.writeheader()
    for row in rows:
        writer.writerow(row)
    return buf.getvalue()
