"""Exceptions raised by the translation runtime.

Every failure surfaces to the ``translate()`` caller; none is converted into a
placeholder string. Callers needing a user-facing fallback catch
``TranslationError`` and substitute explicitly.
"""

from typing import Optional, Sequence


class TranslationError(Exception):
    """Base exception for all translation runtime errors.

    Attributes:
        phase: Translation phase the error surfaced in (set by the Translator),
            or None when raised outside a translation.

    Example:
        try:
            text = await translator.translate("cart.items", "es", count=3)
        except TranslationError as e:
            logger.error("translation_failed", error=str(e), phase=e.phase)
            text = "..."
    """

    phase: Optional[str] = None


class BundleLoadError(TranslationError):
    """Raised when a locale's catalog could not be fetched or parsed.

    Retryable: the failure is recorded on the locale and the next call fetches again.
    """

    def __init__(self, locale: str, reason: str):
        self.locale = locale
        self.reason = reason
        super().__init__(f"Failed to load catalog for locale '{locale}': {reason}")


class LoadCancelledError(TranslationError):
    """Raised to every waiter of an in-flight catalog load that was cancelled."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Catalog load for locale '{locale}' was cancelled")


class KeyNotFoundError(TranslationError, LookupError):
    """Raised when a key is absent from the locale and its whole fallback chain.

    Not retryable: indicates a catalog authoring or configuration gap.
    """

    def __init__(self, key: str, chain: Sequence[str]):
        self.key = key
        self.chain = tuple(chain)
        super().__init__(
            f"Translation key '{key}' not found in locales: {', '.join(self.chain)}"
        )

    def __str__(self) -> str:
        # LookupError would repr() the message otherwise
        return self.args[0]


class PluralVariantMissingError(TranslationError):
    """Raised when neither the selected plural category nor 'other' exists."""

    def __init__(self, key: str, locale: str, category: str):
        self.key = key
        self.locale = locale
        self.category = category
        super().__init__(
            f"Plural variant '{category}' (and 'other') missing for key '{key}' in '{locale}'"
        )


class MissingCountError(TranslationError, ValueError):
    """Raised when a pluralized key is translated without a count."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Key '{key}' is pluralized and requires a count")


class InvalidCountError(TranslationError, ValueError):
    """Raised when a count is not a finite number."""

    def __init__(self, key: str, count: object):
        self.key = key
        self.count = count
        super().__init__(f"Invalid count {count!r} for key '{key}': expected a finite number")


class MissingInterpolationValueError(TranslationError, ValueError):
    """Raised when a template placeholder has no supplied value."""

    def __init__(self, placeholder: str, key: Optional[str] = None):
        self.placeholder = placeholder
        self.key = key
        where = f" in key '{key}'" if key else ""
        super().__init__(f"Missing interpolation value '{placeholder}'{where}")


class FormatHintError(TranslationError, ValueError):
    """Raised for an unknown format hint or a value the hint cannot format."""

    def __init__(self, placeholder: str, hint: str, reason: str):
        self.placeholder = placeholder
        self.hint = hint
        super().__init__(
            f"Cannot format '{placeholder}' with hint '{hint}': {reason}"
        )


class CatalogFormatError(TranslationError, ValueError):
    """Raised when raw catalog data does not have the catalog shape."""

    def __init__(self, locale: str, path: str, reason: str):
        self.locale = locale
        self.path = path
        super().__init__(f"Invalid catalog for '{locale}' at '{path}': {reason}")
