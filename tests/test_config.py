"""Tests for application configuration loading."""

import pytest
from pydantic import ValidationError

from src.utils.config_loader import (
    AppConfig,
    default_config_path,
    get_stripe_secret_key,
    integrations_mode,
    load_app_config,
)


def test_bundled_config_loads():
    cfg = load_app_config(default_config_path())
    assert cfg.document.page_size == "A4"
    assert cfg.document.margin == 50
    assert cfg.document.title_font_size == 16
    assert cfg.document.body_font_size == 12
    assert cfg.payment.currency == "gbp"


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_app_config(tmp_path / "missing.yml")
    assert cfg == AppConfig()


def test_partial_file_merges_with_defaults(tmp_path):
    path = tmp_path / "app.yml"
    path.write_text("document:\n  margin: 36\n", encoding="utf-8")
    cfg = load_app_config(path)
    assert cfg.document.margin == 36
    assert cfg.document.font == "Helvetica"


def test_invalid_file_raises(tmp_path):
    path = tmp_path / "app.yml"
    path.write_text("document:\n  page_size: A0\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_app_config(path)


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "app.yml"
    path.write_text("site:\n  title: Test Notices\n", encoding="utf-8")
    monkeypatch.setenv("APP_CONFIG_PATH", str(path))
    assert load_app_config().site.title == "Test Notices"


def test_stripe_key_is_stripped(monkeypatch):
    monkeypatch.setenv("STRIPE_SECRET_KEY", "  sk_test_abc \n")
    assert get_stripe_secret_key() == "sk_test_abc"


@pytest.mark.parametrize(
    "value, expected",
    [("mock", "mock"), ("TEST", "mock"), ("live", "real"), ("real", "real"), ("", ""), ("other", "")],
)
def test_integrations_mode(monkeypatch, value, expected):
    monkeypatch.setenv("INTEGRATIONS_MODE", value)
    assert integrations_mode() == expected
