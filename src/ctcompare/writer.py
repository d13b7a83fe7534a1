"""Write filtered annotation files and the combined summary as CSV."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

from ctcompare.models import OUTPUT_COLUMNS, SUMMARY_COLUMNS, MatchType, OrganConfig, SummaryRecord
from ctcompare.report import sort_summaries
from ctcompare.tabular import encode_csv


def ensure_output_dir(path: Path | str) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def format_annotations(annotation_map: Mapping[str, str], match_type: MatchType) -> str:
    """CSV of the remaining entries, ordered by map key."""
    rows = [
        match_type.expand_for_output(key, value)
        for key, value in sorted(annotation_map.items(), key=lambda kv: kv[0])
    ]
    return encode_csv(rows, OUTPUT_COLUMNS)


def format_summary(records: Iterable[SummaryRecord]) -> str:
    return encode_csv([r.as_row() for r in sort_summaries(records)], SUMMARY_COLUMNS)


def write_annotations(
    output_dir: Path | str, organ: OrganConfig, annotation_map: Mapping[str, str]
) -> Path:
    path = Path(output_dir) / f"{organ.name}.csv"
    path.write_text(format_annotations(annotation_map, organ.match_type), encoding="utf-8")
    return path


def write_summary(
    output_dir: Path | str, records: Iterable[SummaryRecord], name: str = "Summary"
) -> Path:
    path = Path(output_dir) / f"{name}.csv"
    path.write_text(format_summary(records), encoding="utf-8")
    return path
