"""
Stripe Checkout client.

Used when STRIPE_SECRET_KEY is configured. The submitted FieldSet travels as
session metadata and comes back unchanged on retrieval.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import stripe

from src.integrations.contracts.interfaces import (
    CheckoutGateway,
    CheckoutSession,
    GatewayError,
    GatewayUnconfigured,
    PaymentStatus,
    SessionNotFound,
)
from src.integrations.contracts.payments import check_metadata_limits
from src.notices.catalog import NoticeMetadata
from src.notices.validation import FieldSet
from src.utils.config_loader import get_stripe_secret_key

logger = logging.getLogger(__name__)


def _plain_dict(obj: Any) -> Dict[str, str]:
    if obj is None:
        return {}
    if hasattr(obj, "to_dict"):
        obj = obj.to_dict()
    return {str(k): "" if v is None else str(v) for k, v in dict(obj).items()}


def _payment_status(value: Optional[str]) -> PaymentStatus:
    try:
        return PaymentStatus((value or "").strip().lower())
    except ValueError:
        return PaymentStatus.UNPAID


class StripeCheckoutClient(CheckoutGateway):
    def __init__(
        self,
        api_key: Optional[str] = None,
        currency: str = "gbp",
        payment_method_types: Optional[List[str]] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else get_stripe_secret_key()
        if not self.api_key:
            raise GatewayUnconfigured("STRIPE_SECRET_KEY is not configured.")
        self.currency = currency
        self.payment_method_types = payment_method_types or ["card"]

    def _to_session(self, raw: Any) -> CheckoutSession:
        return CheckoutSession(
            session_id=raw.id,
            url=getattr(raw, "url", None) or "",
            payment_status=_payment_status(getattr(raw, "payment_status", None)),
            amount_total=int(getattr(raw, "amount_total", None) or 0),
            currency=getattr(raw, "currency", None) or self.currency,
            metadata=_plain_dict(getattr(raw, "metadata", None)),
        )

    def create_session(
        self,
        notice: NoticeMetadata,
        fields: FieldSet,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        metadata = check_metadata_limits(fields.to_metadata())
        try:
            raw = stripe.checkout.Session.create(
                api_key=self.api_key,
                payment_method_types=self.payment_method_types,
                mode="payment",
                line_items=[
                    {
                        "price_data": {
                            "currency": self.currency,
                            "product_data": {
                                "name": notice.name,
                                "description": notice.description,
                            },
                            "unit_amount": notice.price,
                        },
                        "quantity": 1,
                    }
                ],
                metadata=metadata,
                success_url=success_url,
                cancel_url=cancel_url,
            )
        except stripe.StripeError as e:
            logger.error("Stripe session creation failed: %s", e)
            raise GatewayError(f"Stripe session creation failed: {e}") from e

        session = self._to_session(raw)
        logger.info("Stripe session created: %s", session.session_id)
        return session

    def retrieve_session(self, session_id: str) -> CheckoutSession:
        try:
            raw = stripe.checkout.Session.retrieve(session_id, api_key=self.api_key)
        except stripe.InvalidRequestError as e:
            if getattr(e, "code", None) == "resource_missing":
                raise SessionNotFound(session_id) from e
            logger.error("Invalid Stripe request for session %s: %s", session_id, e)
            raise GatewayError(f"Invalid Stripe request: {e}") from e
        except stripe.StripeError as e:
            logger.error("Stripe API error retrieving session %s: %s", session_id, e)
            raise GatewayError(f"Stripe session retrieval failed: {e}") from e

        return self._to_session(raw)
