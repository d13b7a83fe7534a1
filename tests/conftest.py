from pathlib import Path

import pytest

from ctcompare.config import AppConfig, OutputConfig, SourcesConfig
from ctcompare.models import MatchType, OrganConfig

FIXTURES_DIR = Path(__file__).parent / "fixtures"

ANNOTATION_BASE = "https://azimuth.test/static/csv/"
MASTER_TABLE_URL = "https://sheets.test/spreadsheets/d/abc/gviz/tq"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def settings(tmp_path) -> AppConfig:
    return AppConfig(
        sources=SourcesConfig(
            annotation_base_url=ANNOTATION_BASE,
            master_table_url=MASTER_TABLE_URL,
        ),
        output=OutputConfig(output_dir=str(tmp_path / "output")),
    )


@pytest.fixture
def kidney() -> OrganConfig:
    return OrganConfig(
        name="Kidney",
        annotations=("kidney_l1", "kidney_l2"),
        master_table="Kidney_v1.1_DRAFT",
        match_type=MatchType.ID,
    )


@pytest.fixture
def brain() -> OrganConfig:
    return OrganConfig(
        name="Brain",
        annotations=("humanbrain_class",),
        master_table="Brain_v1.1_DRAFT",
        match_type=MatchType.NAME,
    )


@pytest.fixture
def kidney_asctb_text() -> str:
    return read_fixture("kidney_asctb.csv")


@pytest.fixture
def brain_asctb_text() -> str:
    return read_fixture("brain_asctb.csv")
