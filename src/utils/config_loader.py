"""
Application configuration loader (site, payment, document layout).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class SiteConfig(BaseModel):
    title: str = "UK Landlord Legal Notice Generator"


class PaymentConfig(BaseModel):
    currency: str = "gbp"
    payment_method_types: List[str] = Field(default_factory=lambda: ["card"])


class DocumentConfig(BaseModel):
    page_size: Literal["A4", "LETTER"] = "A4"
    margin: float = Field(default=50, ge=0, le=200)
    title_font_size: float = Field(default=16, gt=0)
    subtitle_font_size: float = Field(default=14, gt=0)
    body_font_size: float = Field(default=12, gt=0)
    line_spacing: float = Field(default=1.2, ge=1.0, le=3.0)
    font: str = "Helvetica"
    bold_font: str = "Helvetica-Bold"
    author: str = "UK Landlord Legal Notice Generator"


class AppConfig(BaseModel):
    site: SiteConfig = Field(default_factory=SiteConfig)
    payment: PaymentConfig = Field(default_factory=PaymentConfig)
    document: DocumentConfig = Field(default_factory=DocumentConfig)


def default_config_path() -> Path:
    return Path(__file__).parent.parent.parent / "config" / "app_config.yml"


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate the application configuration from YAML.

    A missing file is not an error: the built-in defaults describe the
    standard A4 notice layout.

    Raises:
        ValidationError: If the file doesn't match the schema
    """
    if config_path is None:
        env_path = os.getenv("APP_CONFIG_PATH")
        config_path = Path(env_path) if env_path else default_config_path()

    if not config_path.exists():
        logger.warning("App config not found at %s; using defaults", config_path)
        return AppConfig()

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = AppConfig(**data)
        logger.info("Successfully loaded app config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("App config validation failed: %s", e)
        raise


def get_stripe_secret_key() -> str:
    return os.getenv("STRIPE_SECRET_KEY", "").strip()


def integrations_mode() -> str:
    """Return "mock" or "real" from INTEGRATIONS_MODE (empty means auto)."""
    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        return "real"
    if mode in {"mock", "test"}:
        return "mock"
    return ""
