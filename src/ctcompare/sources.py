"""Remote document fetchers for Azimuth annotation CSVs and ASCT+B sheets.

Annotation CSVs live in the Azimuth website repository on GitHub; ASCT+B
tables are exported as CSV through the Google Sheets gviz endpoint, one
sheet per organ.
"""

from __future__ import annotations

import logging

import httpx

from ctcompare.config import AppConfig
from ctcompare.exceptions import ReferenceFetchError, SourceFetchError

logger = logging.getLogger(__name__)


def annotation_url(base_url: str, name: str) -> str:
    """Join the annotation base URL and ``<name>.csv`` with a single slash."""
    return f"{base_url.rstrip('/')}/{name.lstrip('/')}.csv"


def fetch_text(http: httpx.Client, url: str, params: dict | None = None) -> str:
    """GET a document and return its body text."""
    try:
        resp = http.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise SourceFetchError(f"GET {url} failed: {exc}") from exc
    return resp.text


def fetch_annotation_text(http: httpx.Client, settings: AppConfig, name: str) -> str:
    """Fetch one Azimuth annotation CSV; returns '' when it is unavailable."""
    url = annotation_url(settings.sources.annotation_base_url, name)
    try:
        return fetch_text(http, url)
    except SourceFetchError as exc:
        logger.warning("%s", exc)
        return ""


def fetch_reference_text(http: httpx.Client, settings: AppConfig, sheet: str) -> str:
    """Fetch an ASCT+B sheet as CSV text."""
    params = {"tqx": settings.sources.master_table_format, "sheet": sheet}
    try:
        text = fetch_text(http, settings.sources.master_table_url, params=params)
    except SourceFetchError as exc:
        raise ReferenceFetchError(f"ASCT+B table '{sheet}': {exc}") from exc
    if not text:
        raise ReferenceFetchError(f"ASCT+B table '{sheet}' is empty")
    return text
