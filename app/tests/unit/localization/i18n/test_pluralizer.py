"""Tests for localization.i18n.pluralizer module."""

from decimal import Decimal

import pytest

from localization.i18n import (
    InvalidCountError,
    Leaf,
    MissingCountError,
    Plural,
    PluralVariantMissingError,
    Pluralizer,
)
from tests.factories.i18n import make_catalog


@pytest.fixture
def pluralizer(locale_data):
    return Pluralizer(locale_data)


class TestPluralizer:
    """Tests for Pluralizer.select()."""

    def test_leaf_is_returned_as_is(self, pluralizer):
        assert pluralizer.select(Leaf("Welcome back"), None, "en") == "Welcome back"
        assert pluralizer.select(Leaf("Welcome back"), 3, "en") == "Welcome back"

    @pytest.mark.parametrize(
        "count, expected",
        [(1, "{{count}} item"), (0, "{{count}} items"), (5, "{{count}} items")],
    )
    def test_selects_english_variant(self, pluralizer, count, expected):
        items = make_catalog("en").lookup("items")
        assert pluralizer.select(items, count, "en", "items") == expected

    def test_float_count(self, pluralizer):
        items = make_catalog("en").lookup("items")
        assert pluralizer.select(items, 1.5, "en", "items") == "{{count}} items"

    @pytest.mark.parametrize(
        "count, expected",
        [
            (0, "لا توجد عناصر"),
            (2, "عنصران"),
            (3, "{{count}} عناصر"),
            (11, "{{count}} عنصرًا"),
            (100, "{{count}} عنصر"),
        ],
    )
    def test_selects_arabic_variant(self, pluralizer, count, expected):
        items = make_catalog("ar").lookup("items")
        assert pluralizer.select(items, count, "ar", "items") == expected

    def test_missing_category_falls_back_to_other(self, pluralizer):
        items = Plural({"one": "{{count}} item", "other": "{{count}} items"})
        # Arabic "two" is absent, so "other" is used
        assert pluralizer.select(items, 2, "ar", "items") == "{{count}} items"

    def test_missing_category_and_other_raises(self, pluralizer):
        files = make_catalog("en").lookup("files")

        with pytest.raises(PluralVariantMissingError) as exc_info:
            pluralizer.select(files, 3, "en", "files")

        error = exc_info.value
        assert error.key == "files"
        assert error.locale == "en"
        assert error.category == "other"

    def test_plural_without_count_raises(self, pluralizer):
        items = make_catalog("en").lookup("items")

        with pytest.raises(MissingCountError) as exc_info:
            pluralizer.select(items, None, "en", "items")

        assert exc_info.value.key == "items"

    @pytest.mark.parametrize(
        "count", [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), "3", True]
    )
    def test_non_finite_or_non_numeric_count_raises(self, pluralizer, count):
        items = make_catalog("en").lookup("items")

        with pytest.raises(InvalidCountError) as exc_info:
            pluralizer.select(items, count, "en", "items")

        assert exc_info.value.key == "items"

    def test_decimal_count(self, pluralizer):
        items = make_catalog("en").lookup("items")
        assert pluralizer.select(items, Decimal("1"), "en", "items") == "{{count}} item"
