"""Plural variant selection."""

import math
from decimal import Decimal
from typing import Any, Optional, Union

from localization.i18n.errors import (
    InvalidCountError,
    MissingCountError,
    PluralVariantMissingError,
)
from localization.i18n.locale_data import LocaleData, Number
from localization.i18n.models import Leaf, Plural
from localization.logging import get_module_logger

logger = get_module_logger()


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


class Pluralizer:
    """Selects the template matching a count's plural category.

    A missing category falls back to ``other``; a plain Leaf is returned as
    is whether or not a count was given.
    """

    def __init__(self, locale_data: LocaleData):
        self.locale_data = locale_data

    def select(
        self,
        value: Union[Leaf, Plural],
        count: Optional[Number],
        locale: str,
        key: str = "",
    ) -> str:
        """Pick the template to interpolate.

        Args:
            value: Resolved message.
            count: Numeric count, required for Plural values.
            locale: Locale whose plural rules apply (the resolved locale).
            key: Key being translated, for error messages.

        Returns:
            Template string.

        Raises:
            MissingCountError: If value is Plural and count is None.
            InvalidCountError: If value is Plural and count is not a finite number.
            PluralVariantMissingError: If neither the category nor 'other' exists.
        """
        if isinstance(value, Leaf):
            return value.text

        if count is None:
            raise MissingCountError(key)
        if not _is_finite_number(count):
            raise InvalidCountError(key, count)

        category = self.locale_data.plural_category(locale, count)
        template = value.variant(category)
        if template is not None:
            return template

        template = value.variant("other")
        if template is not None:
            logger.debug(
                "plural_category_fell_back_to_other",
                key=key,
                locale=locale,
                category=category,
            )
            return template

        raise PluralVariantMissingError(key, locale, category)
