"""Summary records for the combined report."""

from __future__ import annotations

from typing import Iterable

from ctcompare.models import OrganConfig, SummaryRecord


def build_summary(organ: OrganConfig, total: int, present: int) -> SummaryRecord:
    return SummaryRecord(
        dataset=organ.name,
        annotation_files=", ".join(organ.annotations),
        master_table=organ.master_table,
        present=present,
        absent=total - present,
        total=total,
        match_strategy=organ.match_type.value,
    )


def sort_summaries(records: Iterable[SummaryRecord]) -> list[SummaryRecord]:
    return sorted(records, key=lambda r: r.dataset)
