"""Core value types: match strategies, organ configs and summary records."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

# Azimuth annotation CSV columns
LABEL_COLUMN = "Label"
ONTOLOGY_COLUMN = "OBO Ontology ID"

# ASCT+B reference table columns
CT_ID_COLUMN = "CT/1/ID"
CT_NAME_COLUMN = "CT/1"
CT_LABEL_COLUMN = "CT/1/Label"

OUTPUT_COLUMNS = ["Label", "Ontology ID"]
SUMMARY_COLUMNS = [
    "Dataset",
    "Azimuth Annotation Files",
    "ASCT+B Table",
    "Present in ASCT+B",
    "Absent in ASCT+B",
    "Total Azimuth CTs",
    "Match Strategy",
]

# Markdown link whose target ends in a Cell Ontology term, e.g.
# [T cell](http://purl.obolibrary.org/obo/CL_0000084)
_CL_LINK_RE = re.compile(r"\[.*\]\(.*(CL_[0-9]+)\)")


def extract_ontology_id(reference: str | None) -> str:
    """Return the normalized ``CL:<digits>`` id in an ontology link, or ''."""
    match = _CL_LINK_RE.search(reference or "")
    if not match:
        return ""
    return match.group(1).replace("_", ":", 1)


class MatchType(str, enum.Enum):
    """How annotation entries are matched against an ASCT+B table.

    ``ID`` keys the annotation map on the Cell Ontology id and matches
    ``CT/1/ID``. ``NAME`` keys it on the label and matches either ``CT/1``
    or ``CT/1/Label``.
    """

    ID = "ID"
    NAME = "Name"

    def extract_entry(self, row: Mapping[str, str]) -> tuple[str, str] | None:
        """Build an annotation map ``(key, value)`` from an annotation row."""
        label = row.get(LABEL_COLUMN) or ""
        ontology_id = extract_ontology_id(row.get(ONTOLOGY_COLUMN))
        if self is MatchType.ID:
            if not ontology_id:
                return None
            return ontology_id, label
        return label, ontology_id

    def expand_for_output(self, key: str, value: str) -> dict[str, str]:
        if self is MatchType.ID:
            return {"Label": value, "Ontology ID": key}
        return {"Label": key, "Ontology ID": value}

    def reference_candidates(self, row: Mapping[str, str]) -> list[str | None]:
        """Identifiers of a reference row, in the order they are tried."""
        if self is MatchType.ID:
            return [row.get(CT_ID_COLUMN)]
        return [row.get(CT_NAME_COLUMN), row.get(CT_LABEL_COLUMN)]


@dataclass(frozen=True)
class OrganConfig:
    name: str
    annotations: tuple[str, ...]
    master_table: str
    match_type: MatchType = MatchType.ID


@dataclass(frozen=True)
class SummaryRecord:
    dataset: str
    annotation_files: str
    master_table: str
    present: int
    absent: int
    total: int
    match_strategy: str

    def as_row(self) -> dict[str, str | int]:
        values = (
            self.dataset,
            self.annotation_files,
            self.master_table,
            self.present,
            self.absent,
            self.total,
            self.match_strategy,
        )
        return dict(zip(SUMMARY_COLUMNS, values))


@dataclass
class OrganResult:
    organ: OrganConfig
    summary: SummaryRecord
    remaining: dict[str, str] = field(default_factory=dict)
    output_path: Path | None = None
