# app/profiles.py
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ValidationError

from app.industry import ROLL_DOOR, TENSILE

log = logging.getLogger(__name__)


# -----------------------------
# Per-category product field configuration
# -----------------------------
@dataclass(frozen=True)
class CategoryProfile:
    key: str
    fields: Tuple[str, ...]                      # display order
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the caller's containers so a loaded profile can't drift.
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def label_for(self, field_name: str) -> str:
        return self.labels.get(field_name) or default_label(field_name)


class ProfileRegistry(Mapping[str, CategoryProfile]):
    """Read-only category key -> profile lookup, built once at startup."""

    def __init__(self, profiles: List[CategoryProfile]):
        self._profiles: Mapping[str, CategoryProfile] = MappingProxyType(
            {p.key: p for p in profiles}
        )

    def __getitem__(self, key: str) -> CategoryProfile:
        return self._profiles[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __repr__(self) -> str:
        return f"<ProfileRegistry({', '.join(self._profiles)})>"


def default_label(field_name: str) -> str:
    return field_name.replace("_", " ")


# Shared head of both product layouts
_FABRIC_FIELDS = (
    "Product_Name",
    "Project_Details",
    "Fabric_Category",
    "RM_Type",
    "Qty_Required_Nos",
    "RM",
    "UOM11",
    "Nos_Per_Set",
    "Total_No_of_Sets",
    "Fabric_Color",
    "Color_Code",
    "GSM",
    "W_m",
    "L_m",
    "Remarks2",
    "Preferred_Variant",
    "Variant_Description",
)

_FABRIC_LABELS = {
    "RM_Type": "Fabric Type",
    "RM": "Fabric Code",
    "W_m": "Width (m)",
    "L_m": "Length (m)",
    "UOM11": "UOM",
    "Nos_Per_Set": "Nos Per Set",
    "Remarks2": "Remarks",
}

DEFAULT_PROFILES = (
    CategoryProfile(
        key=TENSILE,
        fields=_FABRIC_FIELDS + ("Added_User", "Added_Time"),
        labels=_FABRIC_LABELS,
    ),
    CategoryProfile(
        key=ROLL_DOOR,
        fields=_FABRIC_FIELDS + (
            "Roll_Door_Type",
            "Structure",
            "Transparent_fabric1",
            "Printing",
            "Added_User",
            "Added_Time",
        ),
        labels={**_FABRIC_LABELS, "Transparent_fabric1": "Transparent Fabric", "Printing": "Printing"},
    ),
)


# -----------------------------
# Optional JSON override file
# -----------------------------
class ProfileEntry(BaseModel):
    productFields: List[str]
    fieldLabels: Dict[str, str] = {}


def load_profiles(path: Optional[str | Path] = None) -> ProfileRegistry:
    """
    Build the registry. Without a path the built-in profiles are used.

    File format (keyed by category):
      {"Tensile": {"productFields": [...], "fieldLabels": {...}}, ...}
    """
    if not path:
        return ProfileRegistry(list(DEFAULT_PROFILES))

    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read profiles from {p}: {e}") from e
    if not isinstance(raw, dict) or not raw:
        raise ValueError(f"Profiles file {p} must be a non-empty JSON object")

    profiles: List[CategoryProfile] = []
    for key, body in raw.items():
        try:
            parsed = ProfileEntry.model_validate(body)
        except ValidationError as e:
            raise ValueError(f"Invalid profile {key!r} in {p}: {e}") from e
        unknown = set(parsed.fieldLabels) - set(parsed.productFields)
        if unknown:
            log.warning("profile %s labels fields it never shows: %s", key, sorted(unknown))
        profiles.append(CategoryProfile(key=key, fields=tuple(parsed.productFields), labels=parsed.fieldLabels))

    log.info("loaded %d category profile(s) from %s", len(profiles), p)
    return ProfileRegistry(profiles)
