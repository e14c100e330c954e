import logging
from typing import Any, Dict, Iterable, List, assert_never
from .base import Normalizer
from .types import (
    LookupValue,
    NormalizedRecord,
    NullValue,
    RawFieldValue,
    Record,
    ScalarValue,
    SequenceValue,
    parse_field,
)

log = logging.getLogger(__name__)

# Nested subform holding the product lines of a job
SUBFORM_FIELD = "Product_Details"

# Platform bookkeeping keys, never shown to users
METADATA_KEYS = frozenset({"ID", "ROWID", "CREATORID", "MODIFIEDTIME", SUBFORM_FIELD})


class RecordNormalizer(Normalizer):
    """
    Flattens a raw platform record into field -> display string.
    Subform values are written first so the record's own fields win
    on a name collision.
    """
    def normalize_record(self, rec: Record) -> NormalizedRecord:
        out: NormalizedRecord = {}
        sub = rec.get(SUBFORM_FIELD)
        if isinstance(sub, dict):
            out.update(_extract_fields(sub))
        elif isinstance(sub, list):
            out.update(_extract_subform_rows(sub))
        elif sub is not None:
            log.debug("ignoring non-structured %s: %r", SUBFORM_FIELD, type(sub).__name__)
        out.update(_extract_fields(rec))
        return out


class AllowedFieldsFilter(Normalizer):
    """Keeps only the listed fields of an already flattened record."""
    def __init__(self, allowed_fields: Iterable[str]):
        self.allowed_fields = frozenset(allowed_fields)

    def normalize_record(self, rec: Record) -> NormalizedRecord:
        return {k: v for k, v in rec.items() if k in self.allowed_fields}


def _extract_fields(source: Record) -> NormalizedRecord:
    return {
        key: display_value(value)
        for key, value in source.items()
        if key not in METADATA_KEYS
    }


def _extract_subform_rows(rows: List[Any]) -> NormalizedRecord:
    # Collect each key across subform rows (in row order), then join like a multi-select.
    collected: Dict[str, List[Any]] = {}
    for row in rows:
        if not isinstance(row, dict):
            continue
        for key, value in row.items():
            if key in METADATA_KEYS:
                continue
            collected.setdefault(key, []).append(value)
    return {key: display_value(values) for key, values in collected.items()}


# --- Individual field helpers ---

def display_value(raw: Any) -> str:
    """Display string for a raw JSON field value."""
    return extract(parse_field(raw))

def extract(value: RawFieldValue) -> str:
    """Collapse any field shape to one display string. Never raises on odd data."""
    if isinstance(value, NullValue):
        return ""
    if isinstance(value, ScalarValue):
        return format_scalar(value.value)
    if isinstance(value, LookupValue):
        if value.display_value is not None:
            return display_value(value.display_value)
        if value.value is not None:
            return display_value(value.value)
        return ""
    if isinstance(value, SequenceValue):
        parts = [s for s in (extract(item) for item in value.items) if s]
        return ", ".join(parts)
    assert_never(value)

def format_scalar(v: Any) -> str:
    """Falsy scalars (0, False, "") display as empty."""
    if not v:
        return ""
    if v is True:
        return "true"
    if isinstance(v, float) and v.is_integer():
        return str(int(v))
    return str(v)
