"""Locate the data table inside an exported ASCT+B sheet.

Exported sheets start with a free-form preamble (title, authors, DOI, ...)
of varying length before the real header row, whose first cell is
``AS/1``.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from ctcompare.tabular import decode_csv

logger = logging.getLogger(__name__)

DEFAULT_HEADER_OFFSET = 10

_HEADER_RE = re.compile(r'^"?AS/[0-9]+')


def find_table_start(lines: Sequence[str], default_offset: int = DEFAULT_HEADER_OFFSET) -> int:
    """Index of the header row, or ``default_offset`` when none is found."""
    for index, line in enumerate(lines):
        if _HEADER_RE.match(line):
            return index
    logger.warning(
        "No AS/<n> header row found in %d lines, assuming table starts at line %d",
        len(lines), default_offset,
    )
    return default_offset


def locate_and_decode(
    raw_text: str, default_offset: int = DEFAULT_HEADER_OFFSET
) -> list[dict[str, str]]:
    """Strip the preamble from an ASCT+B export and decode the table."""
    lines = raw_text.removeprefix("\ufeff").split("\n")
    start = find_table_start(lines, default_offset)
    return decode_csv("\n".join(lines[start:]))
