from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from src.notices.catalog import NoticeMetadata
from src.notices.validation import FieldSet


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class PaymentStatus(str, Enum):
    PAID = "paid"
    UNPAID = "unpaid"
    NO_PAYMENT_REQUIRED = "no_payment_required"


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class GatewayError(Exception):
    """Session creation or retrieval failed (network or provider side)."""


class SessionNotFound(GatewayError):
    def __init__(self, session_id: str):
        super().__init__(f"Checkout session '{session_id}' not found")
        self.session_id = session_id


class GatewayUnconfigured(GatewayError):
    """The payment provider credential is missing."""


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass
class CheckoutSession:
    session_id: str
    url: str
    payment_status: PaymentStatus
    amount_total: int                    # pence
    currency: str
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def fields(self) -> FieldSet:
        return FieldSet.from_metadata(self.metadata)


# ---------------------------------------------------------------------------
# Abstract gateway interface
# ---------------------------------------------------------------------------

class CheckoutGateway(ABC):
    """Every hosted checkout client must implement this interface."""

    @abstractmethod
    def create_session(
        self,
        notice: NoticeMetadata,
        fields: FieldSet,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a hosted payment session carrying `fields` as metadata."""

    @abstractmethod
    def retrieve_session(self, session_id: str) -> CheckoutSession:
        """Fetch a session; raises SessionNotFound for unknown ids."""
