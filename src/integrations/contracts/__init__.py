"""
Contracts (data models).

This folder defines the request/response shapes for the hosted checkout
integration:
- CheckoutSession and the CheckoutGateway interface
- gateway error types
- session metadata limits

Both mock and real HTTP clients should use these contracts.
"""

from .interfaces import (
    CheckoutGateway,
    CheckoutSession,
    GatewayError,
    GatewayUnconfigured,
    PaymentStatus,
    SessionNotFound,
)
from .payments import (
    MAX_METADATA_KEY_LENGTH,
    MAX_METADATA_KEYS,
    MAX_METADATA_VALUE_LENGTH,
    check_metadata_limits,
    is_paid,
    metadata_limit_errors,
)

__all__ = [
    # interfaces
    "CheckoutGateway", "CheckoutSession", "GatewayError", "GatewayUnconfigured",
    "PaymentStatus", "SessionNotFound",
    # payments
    "MAX_METADATA_KEYS", "MAX_METADATA_KEY_LENGTH", "MAX_METADATA_VALUE_LENGTH",
    "check_metadata_limits", "is_paid", "metadata_limit_errors",
]
