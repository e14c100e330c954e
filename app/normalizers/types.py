# app/normalizers/types.py
from dataclasses import dataclass
from typing import Any, Dict, Tuple, Union

# Raw platform record as decoded from JSON, and its flat display form.
Record = Dict[str, Any]
NormalizedRecord = Dict[str, str]

Scalar = Union[str, int, float, bool]


# -----------------------------
# Field value shapes returned by the platform
# -----------------------------
@dataclass(frozen=True)
class NullValue:
    """Missing or null field."""


@dataclass(frozen=True)
class ScalarValue:
    value: Scalar


@dataclass(frozen=True)
class LookupValue:
    # Reference field: {"display_value": ..., "ID": ...}. Only the
    # human-readable parts are kept; internal ids are never surfaced.
    display_value: Any = None
    value: Any = None


@dataclass(frozen=True)
class SequenceValue:
    # Multi-select or lookup collection
    items: Tuple["RawFieldValue", ...] = ()


RawFieldValue = Union[NullValue, ScalarValue, LookupValue, SequenceValue]


def parse_field(raw: Any) -> RawFieldValue:
    """
    Classify a decoded JSON value into one of the field shapes.
    Anything unexpected degrades to NullValue instead of raising.
    """
    if raw is None:
        return NullValue()
    if isinstance(raw, (list, tuple)):
        return SequenceValue(tuple(parse_field(item) for item in raw))
    if isinstance(raw, dict):
        return LookupValue(
            display_value=raw.get("display_value"),
            value=raw.get("value"),
        )
    if isinstance(raw, (str, int, float, bool)):
        return ScalarValue(raw)
    return NullValue()
