"""Application configuration, overridable from the environment."""

import os

from pydantic import BaseModel, Field


class SourcesConfig(BaseModel):
    annotation_base_url: str = (
        "https://raw.githubusercontent.com/satijalab/azimuth_website/master/static/csv/"
    )
    master_table_url: str = (
        "https://docs.google.com/spreadsheets/d/"
        "1tK916JyG5ZSXW_cXfsyZnzXfjyoN-8B2GXLbYD6_vF0/gviz/tq"
    )
    master_table_format: str = "out:csv"
    timeout: float = 60.0


class OutputConfig(BaseModel):
    output_dir: str = "output"
    summary_name: str = "Summary"


class LocatorConfig(BaseModel):
    header_offset: int = Field(10, ge=0)  # used when no AS/<n> header row is found


class AppConfig(BaseModel):
    sources: SourcesConfig = SourcesConfig()
    output: OutputConfig = OutputConfig()
    locator: LocatorConfig = LocatorConfig()
    debug: bool = False


def _build_config() -> AppConfig:
    """Build config from environment variables."""
    defaults = AppConfig()
    return AppConfig(
        sources=SourcesConfig(
            annotation_base_url=os.environ.get(
                "CTCOMPARE_ANNOTATION_BASE_URL", defaults.sources.annotation_base_url
            ),
            master_table_url=os.environ.get(
                "CTCOMPARE_MASTER_TABLE_URL", defaults.sources.master_table_url
            ),
            timeout=float(os.environ.get("CTCOMPARE_TIMEOUT", "60")),
        ),
        output=OutputConfig(
            output_dir=os.environ.get("CTCOMPARE_OUTPUT_DIR", "output"),
        ),
        locator=LocatorConfig(
            header_offset=int(os.environ.get("CTCOMPARE_HEADER_OFFSET", "10")),
        ),
        debug=os.environ.get("DEBUG", "").lower() in ("1", "true", "yes"),
    )


config = _build_config()
