"""Tests for the notice catalog."""

import pytest

from src.notices.catalog import NOTICE_CATALOG, InvalidNoticeType, format_price, list_notices, lookup


@pytest.mark.parametrize("notice_type", ["section21", "section8", "rentincrease", "renewal"])
def test_known_types_have_name_price_description(notice_type):
    notice = lookup(notice_type)
    assert notice.notice_type == notice_type
    assert notice.name
    assert isinstance(notice.price, int) and notice.price > 0
    assert notice.description


def test_prices_match_published_tariff():
    prices = {k: v.price for k, v in NOTICE_CATALOG.items()}
    assert prices == {"section21": 1500, "section8": 2000, "rentincrease": 1000, "renewal": 1000}


def test_section21_display_name():
    assert lookup("section21").name == "Section 21 (Form 6A) – Notice to End Assured Shorthold Tenancy"


@pytest.mark.parametrize("bad", ["bogus", "", "Section21", None, 21])
def test_unknown_type_is_rejected(bad):
    with pytest.raises(InvalidNoticeType):
        lookup(bad)


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        NOTICE_CATALOG["extra"] = lookup("section8")


def test_lookup_returns_same_record_each_time():
    assert lookup("renewal") is lookup("renewal")


def test_list_notices_keeps_catalog_order():
    assert [n.notice_type for n in list_notices()] == ["section21", "section8", "rentincrease", "renewal"]


def test_format_price():
    assert format_price(1500) == "£15.00"
    assert format_price(1005) == "£10.05"
