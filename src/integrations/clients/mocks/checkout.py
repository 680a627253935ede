"""
Hosted checkout — MOCK client.

⚠️  This is an in-memory stand-in for the Stripe Checkout client.
    It makes no network calls and keeps sessions in a dict (reset on
    restart). With `auto_pay=True` (the default) the "hosted payment page"
    URL points straight at the success URL, so the whole flow can be
    exercised locally without a Stripe account.
"""

import logging
import uuid
from typing import Dict

from src.integrations.contracts.interfaces import (
    CheckoutGateway,
    CheckoutSession,
    PaymentStatus,
    SessionNotFound,
)
from src.integrations.contracts.payments import check_metadata_limits
from src.notices.catalog import NoticeMetadata
from src.notices.validation import FieldSet

logger = logging.getLogger(__name__)

SESSION_ID_PLACEHOLDER = "{CHECKOUT_SESSION_ID}"


class InMemoryCheckoutClient(CheckoutGateway):
    """
    Mock checkout client.

    Parameters
    ----------
    auto_pay : bool
        If True, new sessions are created already paid. Default True.
    currency : str
        Currency code recorded on sessions. Default "gbp".
    """

    def __init__(self, auto_pay: bool = True, currency: str = "gbp"):
        self._auto_pay = auto_pay
        self._currency = currency
        self._sessions: Dict[str, CheckoutSession] = {}
        logger.info("[CHECKOUT MOCK] Client initialised (auto_pay=%s)", auto_pay)

    def _new_session_id(self) -> str:
        return f"cs_test_{uuid.uuid4().hex}"

    def create_session(
        self,
        notice: NoticeMetadata,
        fields: FieldSet,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        metadata = check_metadata_limits(fields.to_metadata())
        session_id = self._new_session_id()
        session = CheckoutSession(
            session_id=session_id,
            url=success_url.replace(SESSION_ID_PLACEHOLDER, session_id),
            payment_status=PaymentStatus.PAID if self._auto_pay else PaymentStatus.UNPAID,
            amount_total=notice.price,
            currency=self._currency,
            metadata=metadata,
        )
        self._sessions[session_id] = session
        logger.info("[CHECKOUT MOCK] Session %s created for %s (%d)", session_id, notice.notice_type, notice.price)
        return session

    def retrieve_session(self, session_id: str) -> CheckoutSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def complete_payment(self, session_id: str) -> CheckoutSession:
        """Mark a session as paid, as the hosted page would after a card payment."""
        session = self.retrieve_session(session_id)
        session.payment_status = PaymentStatus.PAID
        logger.info("[CHECKOUT MOCK] Session %s marked paid", session_id)
        return session
