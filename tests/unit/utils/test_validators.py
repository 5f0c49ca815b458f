"""
验证器工具函数单元测试
"""
from decimal import Decimal

import pytest

from book_inventory.utils.validators import (
    MAX_QUANTITY, is_blank, parse_price, parse_quantity, validate_book_data,
    validate_isbn, validate_search_query
)
from tests.fixtures.sample_data import INVALID_ISBN, SAMPLE_BOOKS, VALID_ISBN


class TestISBNValidator:
    """ISBN验证器测试类"""

    @pytest.mark.parametrize("isbn", VALID_ISBN)
    def test_validate_isbn_valid(self, isbn):
        assert validate_isbn(isbn) is True, f"ISBN {isbn} should be valid"

    @pytest.mark.parametrize("isbn", INVALID_ISBN)
    def test_validate_isbn_invalid(self, isbn):
        assert validate_isbn(isbn) is False, f"ISBN {isbn} should be invalid"

    def test_validate_isbn_rejects_non_string(self):
        assert validate_isbn(9780123456789) is False
        assert validate_isbn(None) is False


class TestPriceValidator:
    """价格验证器测试类"""

    @pytest.mark.parametrize("value,expected", [
        (0, Decimal("0")),
        (0.0, Decimal("0.0")),
        (59.99, Decimal("59.99")),
        ("59.99", Decimal("59.99")),
        (" 12 ", Decimal("12")),
        (Decimal("1.50"), Decimal("1.50")),
    ])
    def test_parse_price_valid(self, value, expected):
        assert parse_price(value) == expected

    @pytest.mark.parametrize("value", [-1, -0.01, "abc", "", "NaN", "Infinity", True, None, [1]])
    def test_parse_price_invalid(self, value):
        assert parse_price(value) is None

    def test_parse_price_column_limit(self):
        """测试价格上限与 NUMERIC(10,2) 一致"""
        assert parse_price("99999999.99") == Decimal("99999999.99")
        assert parse_price("99999999.995") is None
        assert parse_price(100000000) is None
        assert parse_price("1e30") is None


class TestQuantityValidator:
    """库存数量验证器测试类"""

    @pytest.mark.parametrize("value,expected", [
        (0, 0),
        (10, 10),
        ("7", 7),
        (3.0, 3),
        ("4.00", 4),
    ])
    def test_parse_quantity_valid(self, value, expected):
        assert parse_quantity(value) == expected

    @pytest.mark.parametrize("value", [-1, "-3", 2.5, "2.5", "ten", False, None])
    def test_parse_quantity_invalid(self, value):
        assert parse_quantity(value) is None

    def test_parse_quantity_integer_limit(self):
        assert parse_quantity(MAX_QUANTITY) == MAX_QUANTITY
        assert parse_quantity(MAX_QUANTITY + 1) is None
        assert parse_quantity(10 ** 20) is None
        assert parse_quantity("1e20") is None


class TestBookDataValidator:
    """书籍数据验证测试类"""

    def test_valid_book_data(self):
        for data in SAMPLE_BOOKS:
            assert validate_book_data(data) == []

    def test_zero_price_and_quantity_allowed(self):
        data = {**SAMPLE_BOOKS[0], "price": 0, "quantity": 0}

        assert validate_book_data(data) == []

    def test_missing_fields_reported_in_order(self):
        assert validate_book_data({}) == [
            "Field 'title' is required",
            "Field 'author' is required",
            "Field 'isbn' is required",
            "Field 'price' is required",
            "Field 'quantity' is required",
        ]

    def test_blank_strings_are_missing(self):
        data = {**SAMPLE_BOOKS[0], "title": "   ", "author": ""}

        assert validate_book_data(data) == [
            "Field 'title' is required",
            "Field 'author' is required",
        ]

    def test_out_of_range_numbers(self):
        data = {**SAMPLE_BOOKS[0], "price": "1e30", "quantity": 10 ** 20}

        assert validate_book_data(data) == [
            "Price must be a valid positive number",
            "Quantity must be a valid positive integer",
        ]

    def test_numeric_and_format_errors(self):
        data = {**SAMPLE_BOOKS[0], "price": "free", "quantity": -2, "isbn": "12345678901234567890123"}

        assert validate_book_data(data) == [
            "Price must be a valid positive number",
            "Quantity must be a valid positive integer",
            "ISBN format is invalid",
        ]

    def test_type_errors(self):
        data = {**SAMPLE_BOOKS[0], "title": 123, "description": ["x"]}

        assert validate_book_data(data) == [
            "Field 'title' must be a string",
            "Description must be a string",
        ]

    def test_description_optional(self):
        data = {key: value for key, value in SAMPLE_BOOKS[0].items() if key != "description"}

        assert validate_book_data(data) == []
        assert validate_book_data({**data, "description": None}) == []


class TestSearchQueryValidator:
    """搜索关键字验证测试类"""

    def test_short_queries_rejected(self):
        for query in ["", "a", " a ", None]:
            assert validate_search_query(query) == ["Search query must be at least 2 characters long"]

    def test_two_characters_accepted(self):
        assert validate_search_query("ab") == []
        assert validate_search_query("  ab ") == []


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("  \t")
    assert not is_blank("x")
    assert not is_blank(0)
