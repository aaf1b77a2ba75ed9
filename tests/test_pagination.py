import pytest

from app.core.errors import ValidationFailed
from app.domains.documents.pagination import PageRequest


def test_parse_coerces_strings():
    page = PageRequest.parse("10", "20")
    assert page.limit == 10
    assert page.offset == 20


def test_parse_missing_values_are_none():
    page = PageRequest.parse(None, "")
    assert page.limit is None
    assert page.offset is None


def test_metadata_first_page():
    meta = PageRequest.parse("10", "0").metadata(total_count=25, page_size=10)
    assert meta.total_count == 25
    assert meta.pages == 3
    assert meta.current_page == 1
    assert meta.page_size == 10


@pytest.mark.parametrize(
    "limit, offset, total, expected_pages, expected_page",
    [
        ("10", "20", 25, 3, 3),
        ("10", "15", 25, 3, 2),
        ("5", "0", 5, 1, 1),
        ("3", "0", 0, 0, 1),
    ],
)
def test_metadata_page_math(limit, offset, total, expected_pages, expected_page):
    meta = PageRequest.parse(limit, offset).metadata(total_count=total, page_size=0)
    assert meta.pages == expected_pages
    assert meta.current_page == expected_page


@pytest.mark.parametrize("limit, offset", [(None, "0"), ("10", None), ("0", "0"), (None, None)])
def test_metadata_absent_without_limit_or_offset(limit, offset):
    assert PageRequest.parse(limit, offset).metadata(total_count=7, page_size=7) is None


def test_metadata_serializes_camel_case():
    meta = PageRequest.parse("2", "2").metadata(total_count=3, page_size=1)
    assert meta.model_dump(by_alias=True) == {
        "totalCount": 3,
        "pages": 2,
        "currentPage": 2,
        "pageSize": 1,
    }


@pytest.mark.parametrize("value", ["abc", "1.5", "-1"])
def test_parse_rejects_bad_limit(value):
    with pytest.raises(ValidationFailed) as exc:
        PageRequest.parse(value, "0")
    assert exc.value.messages[0].startswith("limit")


@pytest.mark.parametrize(
    "limit, offset, field",
    [("99999999999999999999999", "0", "limit"), ("10", "99999999999999999999999", "offset")],
)
def test_parse_rejects_values_beyond_database_integer(limit, offset, field):
    with pytest.raises(ValidationFailed) as exc:
        PageRequest.parse(limit, offset)
    assert exc.value.messages == [f"{field} is too large"]


def test_parse_accepts_largest_database_integer():
    assert PageRequest.parse(str(2**63 - 1), "0").limit == 2**63 - 1
