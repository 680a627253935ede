"""
FastAPI application - Main entry point
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from src.api.endpoints.notices import notices_api
from src.api.views import STATIC_DIR, render_error, render_page
from src.error_handler import GENERIC_ERROR, INVALID_NOTICE_TYPE
from src.integrations.clients.mocks.checkout import InMemoryCheckoutClient
from src.notices.catalog import InvalidNoticeType, format_price, list_notices, lookup
from src.notices.validation import OPTIONAL_FIELDS
from src.utils.config_loader import get_stripe_secret_key, integrations_mode, load_app_config

# Setup logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="UK Landlord Legal Notice Generator",
    description="Collects landlord/tenant details, takes payment and produces a PDF notice",
    version="1.0.0",
)

app.state.config = load_app_config()
# Process-wide session store for INTEGRATIONS_MODE=mock.
app.state.mock_gateway = InMemoryCheckoutClient(currency=app.state.config.payment.currency)

# Serve static assets from the static directory.
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Register checkout routes (create-session, success)
app.include_router(notices_api)


@app.get("/", tags=["Pages"])
async def home(request: Request):
    return render_page(request, "home.html")


@app.get("/select", tags=["Pages"])
async def select(request: Request):
    notices = [{"notice": n, "price": format_price(n.price)} for n in list_notices()]
    return render_page(request, "select.html", {"notices": notices})


@app.get("/form/{notice_type}", tags=["Pages"])
async def notice_form(request: Request, notice_type: str):
    try:
        notice = lookup(notice_type)
    except InvalidNoticeType:
        return render_error(request, INVALID_NOTICE_TYPE, status_code=404)
    return render_page(
        request,
        "form.html",
        {
            "type": notice_type,
            "config": notice,
            "price": format_price(notice.price),
            "optional_fields": OPTIONAL_FIELDS,
        },
    )


@app.get("/error", name="error_page", tags=["Pages"])
async def error_page(request: Request):
    return render_error(request, GENERIC_ERROR, status_code=200)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check; reports whether payments can be taken."""
    return {
        "status": "healthy",
        "payments": {
            "configured": bool(get_stripe_secret_key()) or integrations_mode() == "mock",
            "mode": integrations_mode() or "auto",
        },
        "timestamp": datetime.now().isoformat(),
    }


@app.on_event("startup")
async def startup_event():
    """Initialize on startup"""
    logger.info("Starting UK Landlord Legal Notice Generator...")
    if not get_stripe_secret_key() and integrations_mode() != "mock":
        logger.warning("STRIPE_SECRET_KEY not set; payment routes will report a configuration error")


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "3000"))
    logger.info("Server is running on http://localhost:%d", port)
    uvicorn.run(app, host="0.0.0.0", port=port)
