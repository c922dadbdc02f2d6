"""Locale data strategies: fallback chains, plural rules and text direction.

Resolution and pluralization consult an injected ``LocaleData`` instead of
branching on locale identifiers, so locale data can change without touching
resolution logic. ``BabelLocaleData`` draws plural rules and script
direction from the CLDR data shipped with Babel.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Iterable, List, Mapping, Optional, Sequence, Set, Union

from babel import Locale as BabelLocale
from babel import UnknownLocaleError

from localization.logging import get_module_logger

logger = get_module_logger()

Number = Union[int, float]


def language_of(locale: str) -> str:
    """Language part of a locale identifier ("es" from "es-MX")."""
    return locale.replace("_", "-").split("-")[0]


@lru_cache(maxsize=256)
def parse_babel_locale(locale: str) -> Optional[BabelLocale]:
    """Parse a BCP-47-like identifier into a Babel Locale.

    Args:
        locale: Identifier such as "en", "es-MX" or "zh-Hant-TW".

    Returns:
        Babel Locale, or None if CLDR has no data for it.
    """
    try:
        return BabelLocale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        logger.debug("unknown_cldr_locale", locale=locale)
        return None


class LocaleData(ABC):
    """Per-locale behavior consulted during translation."""

    @abstractmethod
    def fallback_chain(self, locale: str) -> List[str]:
        """Ordered locales to try for a request in ``locale``.

        The chain starts with the requested locale and terminates in the
        configured default locale.
        """

    @abstractmethod
    def plural_category(self, locale: str, count: Number) -> str:
        """Plural category (zero|one|two|few|many|other) of ``count``."""

    def text_direction(self, locale: str) -> str:
        """Script direction of the locale: "ltr" or "rtl"."""
        return "ltr"


class BabelLocaleData(LocaleData):
    """CLDR-backed locale data.

    Attributes:
        default_locale: Locale every chain terminates in.
        fallbacks: Explicit fallback locales per locale.
        available: Locales that have a catalog, or None if unknown. When
            known, chain entries without a catalog are skipped.
    """

    def __init__(
        self,
        default_locale: str = "en",
        fallbacks: Optional[Mapping[str, Sequence[str]]] = None,
        available: Optional[Iterable[str]] = None,
    ):
        self.default_locale = default_locale
        self.fallbacks = {k: list(v) for k, v in (fallbacks or {}).items()}
        self.available: Optional[Set[str]] = (
            set(available) if available is not None else None
        )

    def fallback_chain(self, locale: str) -> List[str]:
        """Build the chain: locale, its explicit fallbacks, its language,
        the language's explicit fallbacks, then the default locale.

        Examples:
            >>> BabelLocaleData("en").fallback_chain("es-MX")
            ['es-MX', 'es', 'en']
        """
        candidates = [locale, *self.fallbacks.get(locale, [])]
        language = language_of(locale)
        if language != locale:
            candidates.append(language)
            candidates.extend(self.fallbacks.get(language, []))
        candidates.append(self.default_locale)

        chain: List[str] = []
        for candidate in candidates:
            if candidate in chain:
                continue
            if (
                self.available is not None
                and candidate not in self.available
                and candidate != self.default_locale
            ):
                continue
            chain.append(candidate)
        return chain

    def plural_category(self, locale: str, count: Number) -> str:
        """CLDR plural category, using the default locale's rules for
        identifiers CLDR does not know.

        Examples:
            >>> BabelLocaleData("en").plural_category("en", 1)
            'one'
            >>> BabelLocaleData("en").plural_category("en", 0)
            'other'
        """
        babel_locale = parse_babel_locale(locale) or parse_babel_locale(
            self.default_locale
        )
        if babel_locale is None:
            return "other"
        return babel_locale.plural_form(count)

    def text_direction(self, locale: str) -> str:
        babel_locale = parse_babel_locale(locale)
        if babel_locale is None:
            return "ltr"
        return "rtl" if babel_locale.character_order == "right-to-left" else "ltr"
