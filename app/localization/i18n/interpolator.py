"""Placeholder substitution with locale-aware formatting.

Templates use ``{{name}}`` placeholders, optionally with a format hint:

    "{{count, number}} files"           -> "1,234 files"
    "Total: {{amount, currency:EUR}}"   -> "Total: €12.50"
    "Due {{due, date:long}}"            -> "Due January 5, 2026"

Every ``{{...}}`` is a placeholder: names are looked up exactly as written
("first-name" and "user.name" included), and nothing is left unsubstituted.

Numbers and dates are formatted with Babel using the locale's CLDR data.
Output is plain text; escaping for markup is the renderer's job.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Mapping, Optional, Tuple

from babel import Locale as BabelLocale
from babel import dates, numbers

from localization.i18n.errors import FormatHintError, MissingInterpolationValueError
from localization.i18n.locale_data import LocaleData, parse_babel_locale
from localization.logging import get_module_logger

logger = get_module_logger()

# Every {{...}} is a placeholder; its body is parsed by _parse_placeholder
PLACEHOLDER_PATTERN = re.compile(r"\{\{(?P<body>.*?)\}\}", re.DOTALL)

HINT_PATTERN = re.compile(r"^(?P<hint>\w+)\s*(?::\s*(?P<arg>.*?))?$", re.DOTALL)

# Unicode FIRST STRONG ISOLATE / POP DIRECTIONAL ISOLATE
FSI = "\u2068"
PDI = "\u2069"


def _parse_placeholder(body: str) -> Tuple[str, Optional[str], Optional[str]]:
    """Split a placeholder body into name, hint and hint argument.

    Examples:
        >>> _parse_placeholder(" amount, currency:EUR ")
        ('amount', 'currency', 'EUR')
        >>> _parse_placeholder("first-name")
        ('first-name', None, None)

    Raises:
        FormatHintError: If the name is empty or the hint is malformed.
    """
    name, comma, spec = body.partition(",")
    name = name.strip()
    if not name:
        raise FormatHintError(body.strip(), "", "placeholder name is empty")
    if not comma:
        return name, None, None

    match = HINT_PATTERN.match(spec.strip())
    if match is None:
        raise FormatHintError(name, spec.strip(), "malformed format hint")
    return name, match.group("hint"), match.group("arg")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


class Interpolator:
    """Substitutes placeholders in resolved templates.

    Attributes:
        locale_data: Provides text direction for bidi isolation.
        default_locale: Locale whose CLDR data formats values for locales
            Babel does not know.
        bidi_isolation: Wrap substituted values in FSI/PDI for RTL locales.
    """

    def __init__(
        self,
        locale_data: LocaleData,
        default_locale: str = "en",
        bidi_isolation: bool = False,
    ):
        self.locale_data = locale_data
        self.default_locale = default_locale
        self.bidi_isolation = bidi_isolation

    def interpolate(
        self,
        template: str,
        values: Mapping[str, Any],
        locale: str,
        key: Optional[str] = None,
    ) -> str:
        """Replace every placeholder in a template.

        Substitution is single-pass: substituted values are never rescanned
        for placeholders.

        Args:
            template: Template string.
            values: Placeholder name -> value (exact, case-sensitive names).
            locale: Locale used for formatting hints and text direction.
            key: Key being translated, for error messages.

        Returns:
            Interpolated text.

        Raises:
            MissingInterpolationValueError: If a placeholder has no value.
            FormatHintError: If a hint is unknown or cannot format the value.
        """
        isolate = self.bidi_isolation and self.locale_data.text_direction(locale) == "rtl"
        babel_locale = parse_babel_locale(locale) or parse_babel_locale(
            self.default_locale
        )

        def substitute(match: "re.Match[str]") -> str:
            name, hint, arg = _parse_placeholder(match.group("body"))
            if name not in values:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    key=key,
                    available_variables=sorted(values.keys()),
                )
                raise MissingInterpolationValueError(name, key)

            if hint:
                text = self._format(name, values[name], hint, arg, babel_locale)
            else:
                text = str(values[name])
            return f"{FSI}{text}{PDI}" if isolate else text

        return PLACEHOLDER_PATTERN.sub(substitute, template)

    def _format(
        self,
        name: str,
        value: Any,
        hint: str,
        arg: Optional[str],
        babel_locale: Optional[BabelLocale],
    ) -> str:
        arg = arg or None
        locale = babel_locale or self.default_locale
        try:
            if hint in ("number", "integer", "percent", "currency"):
                if not _is_number(value):
                    raise FormatHintError(name, hint, f"expected a number, got {type(value).__name__}")
                if hint == "number":
                    return numbers.format_decimal(value, format=arg, locale=locale)
                if hint == "integer":
                    return numbers.format_decimal(value, format="#,##0", locale=locale)
                if hint == "percent":
                    return numbers.format_percent(value, format=arg, locale=locale)
                if not arg:
                    raise FormatHintError(name, hint, "a currency code is required (currency:EUR)")
                return numbers.format_currency(value, arg.upper(), locale=locale)

            if hint == "date":
                if not isinstance(value, date):
                    raise FormatHintError(name, hint, f"expected a date, got {type(value).__name__}")
                return dates.format_date(value, format=arg or "medium", locale=locale)
            if hint == "time":
                if not isinstance(value, (datetime, time)):
                    raise FormatHintError(name, hint, f"expected a time, got {type(value).__name__}")
                return dates.format_time(value, format=arg or "medium", locale=locale)
            if hint == "datetime":
                if not isinstance(value, datetime):
                    raise FormatHintError(name, hint, f"expected a datetime, got {type(value).__name__}")
                return dates.format_datetime(value, format=arg or "medium", locale=locale)
        except FormatHintError:
            raise
        except (ValueError, TypeError, KeyError) as e:
            raise FormatHintError(name, hint, str(e)) from e

        raise FormatHintError(name, hint, "unknown format hint")
