import logging

from src.error_handler import (
    GENERIC_ERROR,
    INVALID_NOTICE_TYPE,
    PAYMENT_UNCONFIGURED,
    RENDER_FAILED,
    SESSION_CREATE_FAILED,
    SESSION_RETRIEVE_FAILED,
    ErrorHandler,
)
from src.integrations.contracts.interfaces import GatewayError, GatewayUnconfigured, SessionNotFound
from src.notices.catalog import InvalidNoticeType
from src.rendering.pdf_writer import RenderFailure


def test_invalid_notice_type_is_a_client_error():
    assert ErrorHandler().handle_exception(InvalidNoticeType("bogus")) == (400, INVALID_NOTICE_TYPE)


def test_unconfigured_gateway_message():
    assert ErrorHandler().handle_exception(GatewayUnconfigured("no key")) == (500, PAYMENT_UNCONFIGURED)


def test_gateway_error_uses_operation_message(caplog):
    eh = ErrorHandler(gateway_message=SESSION_RETRIEVE_FAILED)
    with caplog.at_level(logging.ERROR):
        out = eh.handle_exception(GatewayError("timeout"), context={"session_id": "cs_1"})
    assert out == (500, SESSION_RETRIEVE_FAILED)
    assert "timeout" in caplog.text


def test_session_not_found_is_404():
    assert ErrorHandler().handle_exception(SessionNotFound("cs_x")) == (404, SESSION_CREATE_FAILED)


def test_render_failure():
    assert ErrorHandler().handle_exception(RenderFailure("boom")) == (500, RENDER_FAILED)


def test_unexpected_exception_is_generic():
    status_code, message = ErrorHandler().handle_exception(Exception("boom"), context={"k": "v"})
    assert status_code == 500
    assert message == GENERIC_ERROR
    assert "boom" not in message
