"""
Field projection: decide which normalized fields a detail table shows,
in what order, under which labels.

Known categories follow their profile's declared order. Anything else
falls back to every field seen across the records, in first-seen order.
Either way a column only survives if at least one record has data for it.
"""
import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from app.normalizers import METADATA_KEYS, NormalizedRecord
from app.profiles import CategoryProfile, default_label

log = logging.getLogger(__name__)

PLACEHOLDER = "-"
NOT_APPLICABLE = "n/a"


@dataclass(frozen=True)
class ProjectedField:
    field: str
    label: str
    values: Tuple[str, ...]   # one display value per record


@dataclass(frozen=True)
class ProjectionResult:
    fields: Tuple[ProjectedField, ...]

    @property
    def labels(self) -> List[str]:
        return [f.label for f in self.fields]

    def rows(self) -> List[List[str]]:
        """Cells transposed into one list per record."""
        if not self.fields:
            return []
        return [list(row) for row in zip(*(f.values for f in self.fields))]


@dataclass(frozen=True)
class NoData:
    """Nothing to tabulate; render `message` instead of a table."""
    message: str = "No data available"
    error: bool = False


Projection = Union[ProjectionResult, NoData]


def has_data(value: Optional[str]) -> bool:
    if not value:
        return False
    v = value.strip()
    return bool(v) and v != PLACEHOLDER and v.lower() != NOT_APPLICABLE


def cell(value: Optional[str]) -> str:
    return value if has_data(value) else PLACEHOLDER


def discovered_fields(records: Sequence[NormalizedRecord]) -> List[str]:
    """Union of record keys in first-seen order."""
    seen = {}
    for rec in records:
        for key in rec:
            if key not in METADATA_KEYS:
                seen.setdefault(key, None)
    return list(seen)


def project(
    category: Optional[str],
    records: Sequence[NormalizedRecord],
    profiles: Mapping[str, CategoryProfile],
    empty_message: str = "No data available",
) -> Projection:
    profile = profiles.get(category) if category else None

    if profile is not None:
        candidates = [f for f in profile.fields if f not in METADATA_KEYS]
        label_for = profile.label_for
    else:
        candidates = discovered_fields(records)
        label_for = default_label

    fields = [f for f in candidates if any(has_data(r.get(f)) for r in records)]
    if not fields:
        log.info("no fields with data (category=%s, records=%d)", category, len(records))
        return NoData(empty_message)

    return ProjectionResult(tuple(
        ProjectedField(
            field=f,
            label=label_for(f),
            values=tuple(cell(r.get(f)) for r in records),
        )
        for f in fields
    ))
