from .pipeline import get_default_normalizer, normalize, NormalizerPipeline
from .rules import (
    AllowedFieldsFilter,
    METADATA_KEYS,
    RecordNormalizer,
    SUBFORM_FIELD,
    display_value,
    extract,
)
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
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "normalize",
    "NormalizerPipeline",
    "RecordNormalizer",
    "AllowedFieldsFilter",
    "METADATA_KEYS",
    "SUBFORM_FIELD",
    "display_value",
    "extract",
    "parse_field",
    "RawFieldValue",
    "NullValue",
    "ScalarValue",
    "LookupValue",
    "SequenceValue",
    "Record",
    "NormalizedRecord",
    "Normalizer",
]
