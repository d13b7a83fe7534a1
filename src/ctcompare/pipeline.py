"""Per-organ comparison pipeline and the top-level run loop."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import httpx

from ctcompare.aggregator import build_annotation_map
from ctcompare.config import AppConfig, config
from ctcompare.exceptions import ReferenceFetchError, TableDecodeError
from ctcompare.locator import locate_and_decode
from ctcompare.models import OrganConfig, OrganResult, SummaryRecord
from ctcompare.reconciler import reconcile
from ctcompare.report import build_summary, sort_summaries
from ctcompare.sources import fetch_reference_text
from ctcompare.writer import ensure_output_dir, write_annotations, write_summary

logger = logging.getLogger(__name__)


def compare_organ(
    organ: OrganConfig, http: httpx.Client, settings: AppConfig
) -> tuple[dict[str, str], SummaryRecord]:
    """Build the annotation map for ``organ`` and reconcile it against its ASCT+B table."""
    annotation_map = build_annotation_map(organ, http, settings)
    total = len(annotation_map)

    raw = fetch_reference_text(http, settings, organ.master_table)
    rows = locate_and_decode(raw, settings.locator.header_offset)
    present = reconcile(annotation_map, rows, organ.match_type)

    logger.info("%d values found for %s", present, organ.name)
    return annotation_map, build_summary(organ, total, present)


def process_organ(
    organ: OrganConfig,
    http: httpx.Client,
    settings: AppConfig,
    output_dir: Path | str,
) -> OrganResult:
    """Compare one organ and write its filtered annotation file."""
    remaining, summary = compare_organ(organ, http, settings)
    path = write_annotations(output_dir, organ, remaining)
    logger.debug("Wrote %d absent entries to %s", len(remaining), path)
    return OrganResult(organ=organ, summary=summary, remaining=remaining, output_path=path)


def run(
    organs: Iterable[OrganConfig],
    settings: AppConfig | None = None,
    http: httpx.Client | None = None,
    output_dir: Path | str | None = None,
) -> list[SummaryRecord]:
    """Process organs one after another and write ``Summary.csv``.

    An organ whose ASCT+B table cannot be fetched or decoded is logged and
    left out of the summary; the remaining organs still run. Returns the
    summary records sorted by dataset name.
    """
    settings = settings or config
    out = ensure_output_dir(output_dir or settings.output.output_dir)

    own_client = http is None
    if own_client:
        http = httpx.Client(timeout=settings.sources.timeout, follow_redirects=True)

    summaries: list[SummaryRecord] = []
    try:
        for organ in organs:
            try:
                result = process_organ(organ, http, settings, out)
            except (ReferenceFetchError, TableDecodeError) as e:
                logger.error("Skipping %s: %s", organ.name, e)
                continue
            summaries.append(result.summary)
    finally:
        if own_client:
            http.close()

    path = write_summary(out, summaries, settings.output.summary_name)
    logger.info("Wrote summary for %d organ(s) to %s", len(summaries), path)
    return sort_summaries(summaries)
