"""
Domain models and value objects.

Contains fundamental currency formatting entities like CurrencyConfig,
LocaleSymbols, PluralAffixTable, RoundingPolicy.
"""

from src.core.domain.affixes import AffixPair, PluralAffixTable
from src.core.domain.currency import (
    DEFAULT_MAXIMUM_FRACTION_DIGITS,
    DEFAULT_MINIMUM_FRACTION_DIGITS,
    ROUNDING_MODES,
    CurrencyConfig,
    CurrencyPluralInfo,
    CurrencyStyle,
    CurrencyUsage,
    normalize_currency_code,
)
from src.core.domain.plural import PLURAL_CATEGORIES, PluralCategory
from src.core.domain.rounding import RoundingKind, RoundingPolicy
from src.core.domain.symbols import (
    GENERIC_CURRENCY_SYMBOL,
    NO_CURRENCY_ISO_CODE,
    LocaleSymbols,
)

__all__ = [
    # Plural
    "PLURAL_CATEGORIES",
    "PluralCategory",
    # Currency config
    "DEFAULT_MAXIMUM_FRACTION_DIGITS",
    "DEFAULT_MINIMUM_FRACTION_DIGITS",
    "ROUNDING_MODES",
    "CurrencyConfig",
    "CurrencyPluralInfo",
    "CurrencyStyle",
    "CurrencyUsage",
    "normalize_currency_code",
    # Locale symbols
    "GENERIC_CURRENCY_SYMBOL",
    "NO_CURRENCY_ISO_CODE",
    "LocaleSymbols",
    # Affixes
    "AffixPair",
    "PluralAffixTable",
    # Rounding
    "RoundingKind",
    "RoundingPolicy",
]
