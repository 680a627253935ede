"""
Notice domain.

This package holds the pieces that know what a landlord notice is:
- the catalog of notice types (name, price, description)
- validation of submitted form fields into a FieldSet

Both the payment step and the document renderer resolve notice types
through `catalog.lookup`, so they always agree on name and price.
"""

from .catalog import (
    NOTICE_CATALOG,
    InvalidNoticeType,
    NoticeMetadata,
    format_price,
    list_notices,
    lookup,
)
from .validation import FieldSet, validate_field_set

__all__ = [
    "NOTICE_CATALOG",
    "InvalidNoticeType",
    "NoticeMetadata",
    "format_price",
    "list_notices",
    "lookup",
    "FieldSet",
    "validate_field_set",
]
