"""Pytest fixtures for notice validation, rendering and checkout tests."""

from datetime import date

import pytest

from src.integrations.clients.mocks.checkout import InMemoryCheckoutClient
from src.notices.validation import validate_field_set

SCENARIO_FORM = {
    "type": "section21",
    "landlordName": "Jane Doe",
    "landlordAddress": "1 Letting Rd",
    "tenantName": "John Smith",
    "tenantAddress": "2 Rental Ave",
    "propertyAddress": "2 Rental Ave",
    "tenancyStart": "2023-01-01",
    "noticeEnd": "2024-01-01",
    "reason": "",
}


@pytest.fixture
def scenario_form():
    return dict(SCENARIO_FORM)


@pytest.fixture
def field_set(scenario_form):
    return validate_field_set("section21", scenario_form)


@pytest.fixture
def field_set_with_reason(scenario_form):
    scenario_form["reason"] = "Non-payment of rent"
    return validate_field_set("section21", scenario_form)


@pytest.fixture
def notice_date():
    return date(2024, 3, 5)


@pytest.fixture
def checkout():
    """In-memory checkout gateway."""
    return InMemoryCheckoutClient()
