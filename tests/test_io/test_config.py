"""Tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from ctcompare.config import AppConfig, LocatorConfig, _build_config


def test_defaults():
    cfg = AppConfig()
    assert cfg.sources.annotation_base_url.endswith("/azimuth_website/master/static/csv/")
    assert cfg.sources.master_table_url.endswith("/gviz/tq")
    assert cfg.output.output_dir == "output"
    assert cfg.locator.header_offset == 10


def test_build_config_from_env(monkeypatch):
    monkeypatch.setenv("CTCOMPARE_ANNOTATION_BASE_URL", "https://mirror.test/csv/")
    monkeypatch.setenv("CTCOMPARE_OUTPUT_DIR", "/tmp/ct")
    monkeypatch.setenv("CTCOMPARE_HEADER_OFFSET", "4")
    monkeypatch.setenv("CTCOMPARE_TIMEOUT", "5")
    monkeypatch.setenv("DEBUG", "true")

    cfg = _build_config()

    assert cfg.sources.annotation_base_url == "https://mirror.test/csv/"
    assert cfg.sources.master_table_url == AppConfig().sources.master_table_url
    assert cfg.sources.timeout == 5.0
    assert cfg.output.output_dir == "/tmp/ct"
    assert cfg.locator.header_offset == 4
    assert cfg.debug is True


def test_header_offset_rejects_negative(monkeypatch):
    with pytest.raises(ValidationError):
        LocatorConfig(header_offset=-1)

    monkeypatch.setenv("CTCOMPARE_HEADER_OFFSET", "-3")
    with pytest.raises(ValidationError):
        _build_config()
