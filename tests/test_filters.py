from datetime import date, datetime

import pytest
from fastapi import HTTPException

from app.services.filters import (
    RankingFilter,
    build_filter,
    day_bounds,
    parse_id,
    parse_limit,
)


@pytest.mark.parametrize(
    "platform, category, expected",
    [
        (None, None, RankingFilter()),
        ("all_platforms", "all_categories", RankingFilter()),
        ("", "  ", RankingFilter()),
        ("coupang", None, RankingFilter(platform="coupang")),
        (" gmarket ", "3", RankingFilter(platform="gmarket", category_id=3)),
        ("all_platforms", "12", RankingFilter(category_id=12)),
        ("coupang", "electronics", RankingFilter(platform="coupang")),
        (None, "4.5", RankingFilter()),
        ("coupang", "99999999999999999999", RankingFilter(platform="coupang")),
    ],
)
def test_build_filter_normalizes_query_values(platform, category, expected):
    assert build_filter(platform, category) == expected


def test_build_filter_accepts_int_category():
    assert build_filter(None, 7).category_id == 7


def test_build_filter_int64_boundary():
    assert build_filter(None, str(2**63 - 1)).category_id == 2**63 - 1
    assert build_filter(None, str(2**63)).category_id is None


def test_filter_is_immutable():
    spec = build_filter("coupang", "1")
    with pytest.raises(AttributeError):
        spec.platform = "naver_shopping"


def test_filter_is_empty():
    assert RankingFilter().is_empty
    assert not RankingFilter(category_id=1).is_empty


@pytest.mark.parametrize("raw, expected", [("5", 5), (12, 12), (" 3 ", 3)])
def test_parse_id_valid(raw, expected):
    assert parse_id(raw, "product ID") == expected


@pytest.mark.parametrize("raw", ["abc", "1.5", "", "0", "-2", None, "99999999999999999999", 2**63])
def test_parse_id_rejects_malformed(raw):
    with pytest.raises(HTTPException) as exc:
        parse_id(raw, "product ID")
    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid product ID"


@pytest.mark.parametrize(
    "raw, expected",
    [(None, 20), ("abc", 20), ("5", 5), ("1000", 100), ("0", 1), ("-4", 1), (50, 50)],
)
def test_parse_limit_clamps(raw, expected):
    assert parse_limit(raw, default=20, maximum=100) == expected


def test_day_bounds_half_open():
    start, end = day_bounds(date(2024, 3, 1))
    assert start == datetime(2024, 3, 1, 0, 0)
    assert end == datetime(2024, 3, 2, 0, 0)
