import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import RedirectResponse, Response

from src.api.views import render_error
from src.error_handler import (
    INVALID_NOTICE_TYPE,
    MISSING_SESSION_ID,
    PAYMENT_INCOMPLETE,
    PAYMENT_UNCONFIGURED,
    PAYMENT_UNCONFIGURED_SHORT,
    RENDER_FAILED,
    SESSION_CREATE_FAILED,
    SESSION_RETRIEVE_FAILED,
    ErrorHandler,
)
from src.integrations.clients.mocks.checkout import SESSION_ID_PLACEHOLDER
from src.integrations.clients.real_http.stripe_checkout import StripeCheckoutClient
from src.integrations.contracts.interfaces import CheckoutGateway, GatewayError
from src.integrations.contracts.payments import is_paid
from src.notices.catalog import InvalidNoticeType, lookup
from src.notices.validation import validate_field_set
from src.rendering.pdf_writer import render_notice
from src.utils.config_loader import get_stripe_secret_key, integrations_mode

logger = logging.getLogger(__name__)

router = APIRouter()
notices_api = router


def get_checkout_gateway(request: Request) -> Optional[CheckoutGateway]:
    """Dependency returning the configured gateway, or None when payments are unconfigured."""
    payment_cfg = request.app.state.config.payment
    if integrations_mode() == "mock":
        return request.app.state.mock_gateway

    api_key = get_stripe_secret_key()
    if not api_key:
        return None
    return StripeCheckoutClient(
        api_key=api_key,
        currency=payment_cfg.currency,
        payment_method_types=payment_cfg.payment_method_types,
    )


def _success_url(request: Request) -> str:
    return f"{request.url_for('success')}?session_id={SESSION_ID_PLACEHOLDER}"


def _download_filename(notice_type: str) -> str:
    return f"{notice_type or 'notice'}-{int(time.time() * 1000)}.pdf"


@router.post("/create-session", tags=["Checkout"])
async def create_session(request: Request, gateway: Optional[CheckoutGateway] = Depends(get_checkout_gateway)):
    form = await request.form()
    raw = {k: v for k, v in form.items() if isinstance(v, str)}
    notice_type = raw.get("type", "")

    try:
        fields = validate_field_set(notice_type, raw)
    except InvalidNoticeType:
        logger.warning("create-session rejected unknown notice type %r", notice_type)
        return render_error(request, INVALID_NOTICE_TYPE, status_code=400)

    if gateway is None:
        logger.warning("create-session called without STRIPE_SECRET_KEY configured")
        return render_error(request, PAYMENT_UNCONFIGURED, status_code=500)

    notice = lookup(fields.notice_type)
    try:
        session = await run_in_threadpool(
            gateway.create_session,
            notice,
            fields,
            _success_url(request),
            str(request.url_for("error_page")),
        )
    except GatewayError as e:
        status_code, message = ErrorHandler(gateway_message=SESSION_CREATE_FAILED).handle_exception(
            e, context={"notice_type": notice_type}
        )
        return render_error(request, message, status_code=status_code)

    logger.info("Checkout session %s created for notice_type=%s", session.session_id, notice_type)
    return RedirectResponse(session.url, status_code=303)


@router.get("/success", name="success", tags=["Checkout"])
async def success(
    request: Request,
    session_id: Optional[str] = None,
    gateway: Optional[CheckoutGateway] = Depends(get_checkout_gateway),
):
    if not session_id:
        return render_error(request, MISSING_SESSION_ID, status_code=400)
    if gateway is None:
        return render_error(request, PAYMENT_UNCONFIGURED_SHORT, status_code=500)

    handler = ErrorHandler(unconfigured_message=PAYMENT_UNCONFIGURED_SHORT, gateway_message=SESSION_RETRIEVE_FAILED)
    try:
        session = await run_in_threadpool(gateway.retrieve_session, session_id)
    except GatewayError as e:
        status_code, message = handler.handle_exception(e, context={"session_id": session_id})
        return render_error(request, message, status_code=status_code)

    if not is_paid(session):
        logger.warning("Session %s not paid (status=%s)", session_id, session.payment_status.value)
        return render_error(request, PAYMENT_INCOMPLETE, status_code=402)

    fields = session.fields
    try:
        result = await run_in_threadpool(
            render_notice,
            fields.notice_type,
            fields,
            config=request.app.state.config.document,
        )
    except InvalidNoticeType as e:
        status_code, message = handler.handle_exception(e, context={"session_id": session_id})
        return render_error(request, message, status_code=status_code)

    if not result.ok:
        logger.error("Render failed for session %s: %s", session_id, result.error)
        return render_error(request, RENDER_FAILED, status_code=500)

    filename = _download_filename(fields.notice_type)
    logger.info("Delivering %s for session %s", filename, session_id)
    return Response(
        content=result.content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
