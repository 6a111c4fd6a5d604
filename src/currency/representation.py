"""
Representation Resolver — текстовая форма валюты

Выбирает строку, которая заменяет placeholder валюты:
- symbol ("$", "€") — resolve_symbol
- ISO 4217 код ("USD") — resolve_iso_code
- plural long name ("US dollars") — resolve_long_name

ВАЖНО (асимметрия fallback):
Без явной валюты resolve_symbol берёт LocaleSymbols.currency_symbol, а
resolve_iso_code — LocaleSymbols.international_currency_symbol, а НЕ код
fallback-валюты локали: переопределение международного символа не меняет
fallback-валюту. Поэтому "символ" и "ISO код" без явной валюты могут
не соответствовать друг другу.

Ни одна операция не падает: отсутствие валюты деградирует к значениям локали.
"""

import logging

from src.core.domain import CurrencyConfig, CurrencyStyle, LocaleSymbols, PluralCategory
from src.core.pattern import CurrencyDisplay
from src.locale_data import LocaleDataProvider

logger = logging.getLogger(__name__)


class CurrencyRepresentationResolver:
    """Разрешение symbol / ISO code / long name для конфигурации и локали."""

    def __init__(self, data: LocaleDataProvider):
        """
        Args:
            data: источник локальных данных (read-only, можно разделять между потоками)
        """
        self.data = data

    def resolve_symbol(self, symbols: LocaleSymbols, config: CurrencyConfig) -> str:
        """
        Символ валюты.

        Returns:
            Символ явной валюты для локали, иначе generic символ локали
        """
        if config.currency is None:
            return symbols.currency_symbol
        return self.data.get_currency_symbol(symbols.locale, config.currency)

    def resolve_iso_code(self, symbols: LocaleSymbols, config: CurrencyConfig) -> str:
        """
        ISO 4217 код.

        Returns:
            Код явной валюты, иначе международный символ локали
            (не symbols.currency, см. docstring модуля)
        """
        if config.currency is None:
            return symbols.international_currency_symbol
        return self.data.get_currency_iso_code(config.currency)

    def resolve_long_name(
        self, symbols: LocaleSymbols, config: CurrencyConfig, plural: PluralCategory
    ) -> str:
        """
        Long name валюты для plural категории.

        Валюта: явная из config, иначе fallback-валюта локали.
        Если валюты нет совсем — деградация к resolve_effective
        (для CurrencyStyle.SYMBOL это resolve_symbol).
        """
        currency = config.currency or symbols.currency
        if currency is None:
            logger.debug("No currency for long name in %s, using symbol", symbols.locale)
            return self.resolve_effective(symbols, config)
        return self.data.get_currency_long_name(symbols.locale, currency, plural.keyword)

    def resolve_effective(self, symbols: LocaleSymbols, config: CurrencyConfig) -> str:
        """Строка для одиночного ¤: ISO код при CurrencyStyle.ISO_CODE, иначе символ."""
        if config.currency_style == CurrencyStyle.ISO_CODE:
            return self.resolve_iso_code(symbols, config)
        return self.resolve_symbol(symbols, config)

    def resolve(
        self,
        display: CurrencyDisplay,
        symbols: LocaleSymbols,
        config: CurrencyConfig,
        plural: PluralCategory = PluralCategory.OTHER,
    ) -> str:
        """Строка для явно выбранной формы валюты."""
        if display == CurrencyDisplay.LONG_NAME:
            return self.resolve_long_name(symbols, config, plural)
        if display == CurrencyDisplay.ISO_CODE:
            return self.resolve_iso_code(symbols, config)
        return self.resolve_effective(symbols, config)
