"""i18n runtime - message catalogs, fallback resolution, pluralization and
interpolation.

Main components:
- models: Catalog and its tagged values (Leaf, Plural, Node), LoadState
- store: CatalogStore registry of loaded catalogs
- sources: CatalogSource, YAMLCatalogSource, MappingCatalogSource
- loader: BundleLoader with single-flight loading
- locale_data: LocaleData strategy and BabelLocaleData (CLDR)
- resolver / pluralizer / interpolator: the translation pipeline
- translator: Translator facade
- negotiation: Accept-Language negotiation
- factory / service: wiring and lifecycle
"""

from localization.i18n.errors import (
    BundleLoadError,
    CatalogFormatError,
    FormatHintError,
    InvalidCountError,
    KeyNotFoundError,
    LoadCancelledError,
    MissingCountError,
    MissingInterpolationValueError,
    PluralVariantMissingError,
    TranslationError,
)
from localization.i18n.factory import create_translator
from localization.i18n.interpolator import Interpolator
from localization.i18n.loader import BundleLoader
from localization.i18n.locale_data import BabelLocaleData, LocaleData
from localization.i18n.models import (
    PLURAL_CATEGORIES,
    Catalog,
    Leaf,
    LoadState,
    LoadStatus,
    Node,
    Plural,
)
from localization.i18n.negotiation import LanguageNegotiator, negotiate_from_header
from localization.i18n.pluralizer import Pluralizer
from localization.i18n.resolver import KeyResolver, Resolution
from localization.i18n.service import TranslationService
from localization.i18n.sources import (
    CatalogSource,
    MappingCatalogSource,
    YAMLCatalogSource,
)
from localization.i18n.store import CatalogStore
from localization.i18n.translator import TranslationPhase, Translator

__all__ = [
    "PLURAL_CATEGORIES",
    "Catalog",
    "Leaf",
    "Plural",
    "Node",
    "LoadState",
    "LoadStatus",
    "CatalogStore",
    "CatalogSource",
    "YAMLCatalogSource",
    "MappingCatalogSource",
    "BundleLoader",
    "LocaleData",
    "BabelLocaleData",
    "KeyResolver",
    "Resolution",
    "Pluralizer",
    "Interpolator",
    "Translator",
    "TranslationPhase",
    "TranslationService",
    "LanguageNegotiator",
    "negotiate_from_header",
    "create_translator",
    "TranslationError",
    "BundleLoadError",
    "LoadCancelledError",
    "KeyNotFoundError",
    "PluralVariantMissingError",
    "MissingCountError",
    "InvalidCountError",
    "MissingInterpolationValueError",
    "FormatHintError",
    "CatalogFormatError",
]
