"""Error handling helpers for the notice request path."""
from typing import Any, Dict, Optional, Tuple
import logging

from src.integrations.contracts.interfaces import GatewayError, GatewayUnconfigured, SessionNotFound
from src.notices.catalog import InvalidNoticeType
from src.rendering.pdf_writer import RenderFailure

logger = logging.getLogger(__name__)

INVALID_NOTICE_TYPE = "Invalid notice type."
PAYMENT_UNCONFIGURED = "Payment system is not configured. Please provide your STRIPE_SECRET_KEY in the environment."
PAYMENT_UNCONFIGURED_SHORT = "Payment system is not configured."
SESSION_CREATE_FAILED = "Failed to create payment session."
SESSION_RETRIEVE_FAILED = "Failed to retrieve session."
MISSING_SESSION_ID = "Missing session ID."
PAYMENT_INCOMPLETE = "Payment has not been completed for this session."
RENDER_FAILED = "Failed to generate your document."
GENERIC_ERROR = "An error occurred or the payment was cancelled."


class ErrorHandler:
    """Map request-path exceptions to a status code and an end-user message.

    The operator log gets the full exception; the user gets a short message.
    """

    def __init__(self, *, unconfigured_message: str = PAYMENT_UNCONFIGURED, gateway_message: str = SESSION_CREATE_FAILED):
        self.unconfigured_message = unconfigured_message
        self.gateway_message = gateway_message

    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Tuple[int, str]:
        context = context or {}
        if isinstance(exc, InvalidNoticeType):
            logger.warning("Invalid notice type %r (%s)", exc.notice_type, context)
            return 400, INVALID_NOTICE_TYPE
        if isinstance(exc, GatewayUnconfigured):
            logger.warning("Payment gateway not configured (%s)", context)
            return 500, self.unconfigured_message
        if isinstance(exc, SessionNotFound):
            logger.warning("Checkout session not found: %s", exc.session_id)
            return 404, self.gateway_message
        if isinstance(exc, GatewayError):
            logger.error("Payment gateway error: %s (%s)", exc, context, exc_info=True)
            return 500, self.gateway_message
        if isinstance(exc, RenderFailure):
            logger.error("Document render failed: %s (%s)", exc, context, exc_info=True)
            return 500, RENDER_FAILED
        logger.error("Unhandled exception in notice request: %s", exc, exc_info=True)
        return 500, GENERIC_ERROR
