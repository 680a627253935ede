"""
Integrations layer.
This package contains all code used to communicate with external systems such as:
- Payment systems (Stripe Checkout hosted payment pages)

Key rule:
- Route handlers MUST NOT call provider SDKs directly.
- They should call integration clients (under src/integrations/clients).
- We use MOCK clients during development and swap to REAL_HTTP clients when credentials are available.

Switching implementations:
- The selection of mock vs real clients should happen in ONE place (src/api/endpoints/notices.py).
"""

from .contracts.interfaces import (
    CheckoutGateway,
    CheckoutSession,
    GatewayError,
    GatewayUnconfigured,
    PaymentStatus,
    SessionNotFound,
)
from .contracts.payments import check_metadata_limits, is_paid, metadata_limit_errors

__all__ = [
    "CheckoutGateway", "CheckoutSession", "GatewayError", "GatewayUnconfigured",
    "PaymentStatus", "SessionNotFound",
    "check_metadata_limits", "is_paid", "metadata_limit_errors",
]
