"""
Notice catalog.

Static lookup table of the notice types the service can produce. Prices are
in pence (GBP minor units).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping


class InvalidNoticeType(ValueError):
    """Raised when a notice type identifier is not in the catalog."""

    def __init__(self, notice_type: object) -> None:
        super().__init__(f"Unknown notice type: {notice_type!r}")
        self.notice_type = notice_type


@dataclass(frozen=True)
class NoticeMetadata:
    notice_type: str
    name: str
    price: int
    description: str


_ENTRIES = (
    NoticeMetadata(
        notice_type="section21",
        name="Section 21 (Form 6A) – Notice to End Assured Shorthold Tenancy",
        price=1500,
        description="Official Section 21 notice (Form 6A) to end an assured shorthold tenancy.",
    ),
    NoticeMetadata(
        notice_type="section8",
        name="Section 8 – Eviction Notice",
        price=2000,
        description="Section 8 notice for eviction due to rent arrears or breach of tenancy.",
    ),
    NoticeMetadata(
        notice_type="rentincrease",
        name="Rent Increase Letter",
        price=1000,
        description="Letter to formally notify tenants of a rent increase.",
    ),
    NoticeMetadata(
        notice_type="renewal",
        name="Tenancy Renewal Offer Letter",
        price=1000,
        description="Letter offering tenants a renewal of their tenancy agreement.",
    ),
)

# Read-only after import; safe to share between concurrent requests.
NOTICE_CATALOG: Mapping[str, NoticeMetadata] = MappingProxyType({e.notice_type: e for e in _ENTRIES})


def lookup(notice_type: str) -> NoticeMetadata:
    """Return the catalog entry for `notice_type` or raise InvalidNoticeType."""
    if not isinstance(notice_type, str):
        raise InvalidNoticeType(notice_type)
    try:
        return NOTICE_CATALOG[notice_type]
    except KeyError:
        raise InvalidNoticeType(notice_type) from None


def list_notices() -> List[NoticeMetadata]:
    return list(NOTICE_CATALOG.values())


def format_price(pence: int) -> str:
    return f"£{pence // 100}.{pence % 100:02d}"
