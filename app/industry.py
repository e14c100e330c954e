import re
from typing import Optional

from app.normalizers import Record, display_value

TENSILE = "Tensile"
ROLL_DOOR = "Roll Door"

# Checked in order; the first pattern that matches decides the category.
CATEGORY_PATTERNS = (
    (TENSILE, re.compile(r"tensile", re.I)),
    (ROLL_DOOR, re.compile(r"(roll.*)?door", re.I)),
)


def classify(text: Optional[str]) -> Optional[str]:
    """
    Map free-text industry / job type to a category key.
    Returns None for anything unrecognised (the "unknown" bucket).
    """
    if not text:
        return None
    for key, pattern in CATEGORY_PATTERNS:
        if pattern.search(text):
            return key
    return None


def industry_text(record: Record) -> str:
    """Industry display value of a job, falling back to its job type."""
    return display_value(record.get("Industry")) or display_value(record.get("Job_Type"))
