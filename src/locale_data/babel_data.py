"""
BabelLocaleData — провайдер локальных данных на основе Babel (Unicode CLDR)

Источники:
- символы валют: babel.numbers.get_currency_symbol
- fallback-валюта локали: babel.numbers.get_territory_currencies
- fraction digits / rounding: глобальная таблица CLDR currency_fractions
  (digits, rounding, cash_digits, cash_rounding); rounding задан в единицах
  10^-digits
- plural long names и currency unit patterns: данные локали CLDR

Thread-safe: парсинг локали кэшируется, состояние провайдера не меняется.
"""

import logging
from decimal import Decimal
from functools import lru_cache
from typing import Optional

from babel import Locale
from babel.core import get_global
from babel.numbers import (
    get_currency_symbol,
    get_minus_sign_symbol,
    get_plus_sign_symbol,
    get_territory_currencies,
)

from src.core.domain import (
    GENERIC_CURRENCY_SYMBOL,
    NO_CURRENCY_ISO_CODE,
    PLURAL_CATEGORIES,
    CurrencyPluralInfo,
    CurrencyUsage,
    LocaleSymbols,
    PluralCategory,
    normalize_currency_code,
)
from src.core.pattern import CURRENCY_PLACEHOLDER
from src.locale_data.base import rounding_increment_from_units

logger = logging.getLogger(__name__)

_LONG_NAME_PLACEHOLDER = CURRENCY_PLACEHOLDER * 3


@lru_cache(maxsize=256)
def parse_locale(locale: str) -> Locale:
    """Кэшированный Locale.parse; принимает "en_US" и "en-US"."""
    return Locale.parse(locale.replace("-", "_"))


class BabelLocaleData:
    """LocaleDataProvider на данных Babel."""

    def get_locale_symbols(self, locale: str) -> LocaleSymbols:
        loc = parse_locale(locale)
        currency = self._territory_currency(loc)
        number_symbols = self._number_symbols(loc)

        return LocaleSymbols(
            locale=str(loc),
            currency=currency,
            currency_symbol=(
                get_currency_symbol(currency, loc) if currency else GENERIC_CURRENCY_SYMBOL
            ),
            international_currency_symbol=currency or NO_CURRENCY_ISO_CODE,
            minus_sign=get_minus_sign_symbol(loc),
            plus_sign=get_plus_sign_symbol(loc),
            percent_sign=number_symbols.get("percentSign", "%"),
            per_mille_sign=number_symbols.get("perMille", "‰"),
        )

    def get_currency_symbol(self, locale: str, currency: str) -> str:
        return get_currency_symbol(currency, parse_locale(locale))

    def get_currency_iso_code(self, currency: str) -> str:
        return normalize_currency_code(currency)

    def get_currency_long_name(self, locale: str, currency: str, plural_keyword: str) -> str:
        loc = parse_locale(locale)
        # plural names are only exposed through the raw CLDR locale data
        plural_names = loc._data["currency_names_plural"].get(currency) or {}
        if plural_keyword in plural_names:
            return plural_names[plural_keyword]
        if PluralCategory.OTHER.keyword in plural_names:
            return plural_names[PluralCategory.OTHER.keyword]

        logger.debug(
            "No plural long name for %s in %s, falling back to display name", currency, loc
        )
        return loc.currencies.get(currency, currency)

    def get_currency_rounding(self, currency: str, usage: CurrencyUsage) -> tuple[int, Decimal]:
        fractions = get_global("currency_fractions")
        digits, rounding, cash_digits, cash_rounding = fractions.get(
            currency, fractions["DEFAULT"]
        )
        if usage == CurrencyUsage.CASH:
            digits, rounding = cash_digits, cash_rounding
        return digits, rounding_increment_from_units(rounding, digits)

    def get_currency_plural_info(self, locale: str) -> CurrencyPluralInfo:
        """
        Plural-шаблоны локали: decimal pattern + currency unit pattern.

        Unit pattern "{0} {1}" превращается в "#,##0.### ¤¤¤".
        """
        loc = parse_locale(locale)
        number_pattern = loc.decimal_formats[None].pattern
        unit_patterns = loc._data["currency_unit_patterns"]

        patterns: dict[PluralCategory, str] = {}
        for category in PLURAL_CATEGORIES:
            unit_pattern = unit_patterns.get(category.keyword)
            if unit_pattern is None and category == PluralCategory.OTHER:
                unit_pattern = "{0} {1}"
            if unit_pattern is not None:
                patterns[category] = _combine_patterns(unit_pattern, number_pattern)
        return CurrencyPluralInfo(patterns=patterns)

    # -------------------------------------------------------------------------

    @staticmethod
    def _territory_currency(loc: Locale) -> Optional[str]:
        if not loc.territory:
            return None
        currencies = get_territory_currencies(loc.territory)
        return currencies[0] if currencies else None

    @staticmethod
    def _number_symbols(loc: Locale):
        # Babel >= 2.14 groups number symbols by numbering system
        symbols = loc.number_symbols
        return symbols.get("latn", symbols)


def _combine_patterns(unit_pattern: str, number_pattern: str) -> str:
    def fill(number: str) -> str:
        return unit_pattern.replace("{0}", number).replace("{1}", _LONG_NAME_PLACEHOLDER)

    if ";" in number_pattern:
        positive, negative = number_pattern.split(";", 1)
        return f"{fill(positive)};{fill(negative)}"
    return fill(number_pattern)
