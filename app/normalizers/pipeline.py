from typing import Iterable, List, Optional
from .base import Normalizer
from .types import NormalizedRecord, Record
from .rules import AllowedFieldsFilter, RecordNormalizer

class NormalizerPipeline(Normalizer):
    """
    A chain of normalizers.
    Each stage takes the output of the previous stage, so field
    restriction can be layered on top of the flattening step.
    """
    def __init__(self, stages: List[Normalizer]):
        self.stages = stages

    def normalize_record(self, rec: Record) -> NormalizedRecord:
        out = rec
        # Stages return new dicts, the input record is never touched
        for stage in self.stages:
            out = stage.normalize_record(out)
        return out

def get_default_normalizer(allowed_fields: Optional[Iterable[str]] = None) -> Normalizer:
    """
    Factory for the default pipeline: flatten, then optionally restrict
    the output to `allowed_fields`.
    """
    stages: List[Normalizer] = [RecordNormalizer()]
    if allowed_fields is not None:
        stages.append(AllowedFieldsFilter(allowed_fields))
    return NormalizerPipeline(stages)

def normalize(rec: Record, allowed_fields: Optional[Iterable[str]] = None) -> NormalizedRecord:
    """Normalize a single raw record with the default pipeline."""
    return get_default_normalizer(allowed_fields).normalize_record(rec)
