"""Locale negotiation: picking a catalog locale from user preferences.

Implements RFC 4647-style lookup for the common cases: exact tag match
first, then language-only match ("pt-BR" requested, "pt" available).
"""

from typing import Iterable, List, Optional, Tuple

from localization.logging import get_module_logger

logger = get_module_logger()


class LanguageNegotiator:
    """Matches requested language tags against available locales."""

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if an available locale matches a requested tag.

        Args:
            requested: Requested tag (e.g., "en-US").
            available: Available locale (e.g., "en").
            strict: If True, requires an exact (case-insensitive) match.

        Returns:
            True if they match.
        """
        requested = requested.replace("_", "-").lower()
        available = available.replace("_", "-").lower()
        if requested == available:
            return True

        if strict:
            return False

        return requested.split("-")[0] == available.split("-")[0]

    @staticmethod
    def find_best_match(
        requested: Iterable[str],
        available: Iterable[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the best available locale for tags in preference order.

        For each requested tag, an exact match beats a language-only match;
        earlier tags beat later ones.

        Args:
            requested: Requested tags in preference order.
            available: Available locales.
            default: Returned when nothing matches.

        Returns:
            Matching available locale, or default.
        """
        available = list(available)
        for req_lang in requested:
            if req_lang == "*":
                continue
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Parse an Accept-Language header into tags ordered by quality.

    Entries with an unparseable quality count as q=1.0; q=0 entries are
    dropped. Ties keep header order.

    Examples:
        >>> parse_accept_language("fr-CA,fr;q=0.9,en;q=0.8")
        ['fr-CA', 'fr', 'en']
    """
    if not header:
        return []

    preferences: List[Tuple[str, float]] = []
    for part in header.split(","):
        pieces = part.split(";")
        lang_range = pieces[0].strip()
        if not lang_range:
            continue
        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.strip().partition("=")
            if name.strip() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 1.0
        if quality > 0:
            preferences.append((lang_range, quality))

    return [tag for tag, _ in sorted(preferences, key=lambda x: x[1], reverse=True)]


def negotiate_from_header(
    accept_language: Optional[str],
    available: Iterable[str],
    default: str,
) -> str:
    """Resolve the locale to translate into from an Accept-Language header.

    Args:
        accept_language: Header value (may be None).
        available: Locales that have catalogs.
        default: Locale used when nothing matches.

    Returns:
        Negotiated locale.
    """
    tags = parse_accept_language(accept_language)
    match = LanguageNegotiator.find_best_match(tags, available, default=None)
    if match is None:
        logger.info("no_matching_locale_in_header", header=accept_language, default=default)
        return default
    logger.debug("resolved_from_header", locale=match)
    return match
