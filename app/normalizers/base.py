# app/normalizers/base.py
from typing import Protocol
from .types import NormalizedRecord, Record

class Normalizer(Protocol):
    def normalize_record(self, rec: Record) -> NormalizedRecord:
        """Return a NEW normalized record. Do not mutate `rec`."""
        ...
