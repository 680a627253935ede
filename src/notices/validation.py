"""Validation of notice form submissions.

The form posts flat string fields (camelCase names, see `FIELD_NAMES`). They
are copied into a `FieldSet` so that every field the renderer reads is a
string. Values are not checked semantically: dates and addresses are free
text, and an empty required field renders as an empty slot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .catalog import lookup

# Wire name -> FieldSet attribute. Order matches the form.
FIELD_NAMES: Dict[str, str] = {
    "type": "notice_type",
    "landlordName": "landlord_name",
    "landlordAddress": "landlord_address",
    "tenantName": "tenant_name",
    "tenantAddress": "tenant_address",
    "propertyAddress": "property_address",
    "tenancyStart": "tenancy_start",
    "noticeEnd": "notice_end",
    "reason": "reason",
}

OPTIONAL_FIELDS = frozenset({"reason"})


@dataclass(frozen=True)
class FieldSet:
    notice_type: str
    landlord_name: str = ""
    landlord_address: str = ""
    tenant_name: str = ""
    tenant_address: str = ""
    property_address: str = ""
    tenancy_start: str = ""
    notice_end: str = ""
    reason: str = ""

    def to_metadata(self) -> Dict[str, str]:
        """Flat string mapping used as payment session metadata."""
        return {wire: getattr(self, attr) for wire, attr in FIELD_NAMES.items()}

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, Any]) -> "FieldSet":
        """Rebuild a FieldSet from session metadata without re-checking the type.

        The notice type is resolved again by the renderer; an unknown value
        surfaces there as InvalidNoticeType.
        """
        values = {attr: _as_str(metadata.get(wire)) for wire, attr in FIELD_NAMES.items()}
        return cls(**values)


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def validate_field_set(notice_type: str, raw_fields: Mapping[str, Any]) -> FieldSet:
    """Build a FieldSet for `notice_type` from raw form values.

    Raises:
        InvalidNoticeType: when `notice_type` is not in the catalog.
    """
    lookup(notice_type)

    values: Dict[str, str] = {"notice_type": notice_type}
    for wire, attr in FIELD_NAMES.items():
        if attr == "notice_type":
            continue
        values[attr] = _as_str(raw_fields.get(wire))
    return FieldSet(**values)
