"""Organ registry: which Azimuth files are checked against which ASCT+B sheet."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import yaml

from ctcompare.exceptions import ConfigError
from ctcompare.models import MatchType, OrganConfig

logger = logging.getLogger(__name__)

DEFAULT_ORGANS: tuple[OrganConfig, ...] = (
    OrganConfig(
        name="Kidney",
        annotations=("kidney_l1", "kidney_l2", "kidney_l3"),
        master_table="Kidney_v1.1_DRAFT",
        match_type=MatchType.ID,
    ),
    OrganConfig(
        name="Brain",
        annotations=(
            "humanbrain_class",
            "humanbrain_cluster",
            "humanbrain_crossspecies",
            "humanbrain_subclass",
        ),
        master_table="Brain_v1.1_DRAFT",
        match_type=MatchType.NAME,
    ),
    OrganConfig(
        name="Lung",
        annotations=("lung_l1", "lung_l2"),
        master_table="Lung_v1.1_DRAFT",
        match_type=MatchType.ID,
    ),
    OrganConfig(
        name="Pancreas",
        annotations=("pancreas",),
        master_table="Pancreas_v1.0_DRAFT",
        match_type=MatchType.ID,
    ),
    OrganConfig(
        name="Bone_Marrow_Blood",
        annotations=("pbmc1", "pbmc2", "pbmc3", "bonemarrow_l1", "bonemarrow_l2"),
        master_table="Bone Marrow_Blood_v1.1_DRAFT",
        match_type=MatchType.ID,
    ),
)


def _parse_organ(entry: dict, index: int) -> OrganConfig:
    if not isinstance(entry, dict):
        raise ConfigError(f"Organ #{index}: expected a mapping, got {type(entry).__name__}")

    missing = {"name", "annotations", "master_table"} - set(entry)
    if missing:
        raise ConfigError(f"Organ #{index}: missing keys {sorted(missing)}")

    name = str(entry["name"])
    if not name.strip() or name in (".", "..") or any(sep in name for sep in ("/", "\\")):
        raise ConfigError(f"Organ #{index}: '{name}' is not usable as a file name")

    annotations = entry["annotations"]
    if isinstance(annotations, str) or not isinstance(annotations, list):
        raise ConfigError(f"Organ {entry['name']}: 'annotations' must be a list")

    raw_match = entry.get("match_type", MatchType.ID.value)
    try:
        match_type = MatchType(raw_match)
    except ValueError:
        valid = [m.value for m in MatchType]
        raise ConfigError(
            f"Organ {entry['name']}: unknown match_type '{raw_match}'. Valid: {valid}"
        )

    return OrganConfig(
        name=name,
        annotations=tuple(str(a) for a in annotations),
        master_table=str(entry["master_table"]),
        match_type=match_type,
    )


def load_organs(path: Path | str) -> tuple[OrganConfig, ...]:
    """Load organ configs from a YAML file.

    Expected layout::

        organs:
          - name: Kidney
            annotations: [kidney_l1, kidney_l2]
            master_table: Kidney_v1.1_DRAFT
            match_type: ID
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Organ file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    entries = data.get("organs") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        raise ConfigError(f"{path}: expected a top-level 'organs' list")

    organs = tuple(_parse_organ(entry, i) for i, entry in enumerate(entries, start=1))
    logger.debug("Loaded %d organ configs from %s", len(organs), path)
    return organs


def select_organs(
    organs: Iterable[OrganConfig], names: Iterable[str] | None = None
) -> tuple[OrganConfig, ...]:
    """Keep only the named organs, preserving registry order."""
    organs = tuple(organs)
    if not names:
        return organs

    wanted = set(names)
    known = {o.name for o in organs}
    unknown = wanted - known
    if unknown:
        raise ConfigError(f"Unknown organ(s): {sorted(unknown)}. Available: {sorted(known)}")
    return tuple(o for o in organs if o.name in wanted)
