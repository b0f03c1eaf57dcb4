"""Unit tests for identifier case conversion (modgen.naming).

Tests cover:
- split_words on separators and internal capitals
- Pascal / camel / snake / kebab conversions, including empty input
- pluralize rule table
- Cross-form consistency properties
"""

from __future__ import annotations

import pytest

from modgen.naming import (
    pluralize,
    split_words,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
)

pytestmark = pytest.mark.unit

SAMPLE_NAMES = [
    "order",
    "order_item",
    "order-item",
    "orderItem",
    "OrderItem",
    "user_profile-setting",
    "a",
    "category",
]


# ---------------------------------------------------------------------------
# split_words
# ---------------------------------------------------------------------------


class TestSplitWords:
    def test_single_word(self):
        assert split_words("order") == ["order"]

    def test_underscore_and_hyphen_separators(self):
        assert split_words("order_item-line") == ["order", "item", "line"]

    def test_internal_capitals_start_new_words(self):
        assert split_words("orderItemLine") == ["order", "Item", "Line"]

    def test_leading_capital_does_not_split(self):
        assert split_words("Order") == ["Order"]

    def test_consecutive_capitals_split_per_letter(self):
        assert split_words("HTTPLog") == ["H", "T", "T", "P", "Log"]

    def test_empty_chunks_dropped(self):
        assert split_words("__order--item_") == ["order", "item"]

    def test_empty_string(self):
        assert split_words("") == []


# ---------------------------------------------------------------------------
# Case conversions
# ---------------------------------------------------------------------------


class TestCaseConversion:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("order", "Order"),
            ("order_item", "OrderItem"),
            ("order-item", "OrderItem"),
            ("orderItem", "OrderItem"),
            ("Order", "Order"),
            ("", ""),
        ],
    )
    def test_pascal_case(self, value, expected):
        assert to_pascal_case(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("order", "order"),
            ("order_item", "orderItem"),
            ("Order-Item", "orderItem"),
            ("", ""),
        ],
    )
    def test_camel_case(self, value, expected):
        assert to_camel_case(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("OrderItem", "order_item"),
            ("order-item", "order_item"),
            ("order", "order"),
            ("", ""),
        ],
    )
    def test_snake_case(self, value, expected):
        assert to_snake_case(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("OrderItem", "order-item"),
            ("order_item", "order-item"),
            ("", ""),
        ],
    )
    def test_kebab_case(self, value, expected):
        assert to_kebab_case(value) == expected


# ---------------------------------------------------------------------------
# pluralize
# ---------------------------------------------------------------------------


class TestPluralize:
    @pytest.mark.parametrize(
        "word,expected",
        [
            ("order", "orders"),
            ("class", "classes"),
            ("box", "boxes"),
            ("match", "matches"),
            ("dish", "dishes"),
            ("category", "categories"),
            ("day", "days"),
            ("key", "keys"),
            ("toy", "toys"),
            ("y", "ys"),
            ("", "s"),
        ],
    )
    def test_rules(self, word, expected):
        assert pluralize(word) == expected

    def test_no_irregular_table(self):
        assert pluralize("person") == "persons"
        assert pluralize("child") == "childs"


# ---------------------------------------------------------------------------
# Cross-form properties
# ---------------------------------------------------------------------------


class TestNamingProperties:
    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_camel_is_pascal_with_first_letter_lowered(self, name):
        pascal = to_pascal_case(name)
        camel = to_camel_case(name)
        assert camel[0] == pascal[0].lower()
        assert camel[1:] == pascal[1:]

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_snake_and_kebab_share_fragments(self, name):
        assert to_snake_case(name).split("_") == to_kebab_case(name).split("-")

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_resplitting_pascal_yields_snake(self, name):
        assert to_snake_case(to_pascal_case(name)) == to_snake_case(name)

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_conversions_are_deterministic(self, name):
        assert to_pascal_case(name) == to_pascal_case(name)
        assert to_snake_case(name) == to_snake_case(name)
