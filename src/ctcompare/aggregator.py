"""Build an organ's annotation map from its Azimuth annotation files."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

import httpx

from ctcompare.config import AppConfig
from ctcompare.models import MatchType, OrganConfig
from ctcompare.sources import fetch_annotation_text
from ctcompare.tabular import decode_csv

logger = logging.getLogger(__name__)


def merge_rows(
    annotation_map: dict[str, str],
    rows: Iterable[Mapping[str, str]],
    match_type: MatchType,
) -> dict[str, str]:
    """Insert annotation rows into ``annotation_map``; later rows win on key collisions."""
    for row in rows:
        entry = match_type.extract_entry(row)
        if entry is None:
            continue
        key, value = entry
        annotation_map[key] = value
    return annotation_map


def build_annotation_map(
    organ: OrganConfig, http: httpx.Client, settings: AppConfig
) -> dict[str, str]:
    """Merge every annotation file of ``organ`` into one key -> value map.

    Files are read in declared order. A file that cannot be fetched (or is
    empty) is logged and skipped; the remaining files are still merged.
    """
    annotation_map: dict[str, str] = {}
    for source in organ.annotations:
        text = fetch_annotation_text(http, settings, source)
        if not text:
            logger.warning("Could not fetch annotation file %s for %s", source, organ.name)
            continue
        merge_rows(annotation_map, decode_csv(text), organ.match_type)

    logger.debug(
        "%s: %d annotation entries from %d file(s)",
        organ.name, len(annotation_map), len(organ.annotations),
    )
    return annotation_map
