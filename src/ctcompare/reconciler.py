"""Remove annotation entries already present in an ASCT+B table."""

from __future__ import annotations

from typing import Iterable, Mapping

from ctcompare.models import MatchType


def reconcile(
    annotation_map: dict[str, str],
    rows: Iterable[Mapping[str, str]],
    match_type: MatchType,
) -> int:
    """Drop every map entry matched by a reference row; return the match count.

    Each row removes at most one entry: its candidate identifiers are tried
    in order and the first one found in the map is popped. ``annotation_map``
    is modified in place and afterwards holds only the unmatched entries.
    """
    present = 0
    for row in rows:
        for key in match_type.reference_candidates(row):
            if not key:
                continue
            if key in annotation_map:
                del annotation_map[key]
                present += 1
                break
    return present
