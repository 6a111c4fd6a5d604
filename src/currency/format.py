"""
CurrencyFormat — фасад разрешения валюты для pipeline форматирования

Объединяет три компонента:
- CurrencyRepresentationResolver (symbol / ISO code / long name)
- PluralAffixBuilder (PluralAffixTable)
- CurrencyRoundingResolver (RoundingPolicy)

Провайдер данных по умолчанию — BabelLocaleData.
"""

from typing import Optional

from src.core.domain import (
    CurrencyConfig,
    LocaleSymbols,
    PluralAffixTable,
    PluralCategory,
    RoundingPolicy,
)
from src.currency.affixes import PluralAffixBuilder
from src.currency.representation import CurrencyRepresentationResolver
from src.currency.rounding import CurrencyRoundingResolver, DefaultPolicyFactory
from src.locale_data import BabelLocaleData, LocaleDataProvider


def use_currency(config: CurrencyConfig) -> bool:
    """True если валюта задана явно или affix patterns содержат ¤."""
    return config.currency is not None or config.has_currency_placeholder


class CurrencyFormat:
    """Фасад: символы локали + три резолвера на одном провайдере данных."""

    def __init__(
        self,
        data: Optional[LocaleDataProvider] = None,
        default_policy: Optional[DefaultPolicyFactory] = None,
    ):
        """
        Args:
            data: источник локальных данных (default: BabelLocaleData)
            default_policy: policy округления без валюты (default: default_rounding_policy)
        """
        self.data = data or BabelLocaleData()
        self.representation = CurrencyRepresentationResolver(self.data)
        self.affixes = PluralAffixBuilder(self.representation)
        self.rounding = CurrencyRoundingResolver(self.data, default_policy)

    def get_symbols(self, locale: str) -> LocaleSymbols:
        return self.data.get_locale_symbols(locale)

    def get_currency_symbol(self, symbols: LocaleSymbols, config: CurrencyConfig) -> str:
        """Строка для ¤ с учётом CurrencyStyle."""
        return self.representation.resolve_effective(symbols, config)

    def get_currency_iso_code(self, symbols: LocaleSymbols, config: CurrencyConfig) -> str:
        return self.representation.resolve_iso_code(symbols, config)

    def get_currency_long_name(
        self, symbols: LocaleSymbols, config: CurrencyConfig, plural: PluralCategory
    ) -> str:
        return self.representation.resolve_long_name(symbols, config, plural)

    def get_currency_affixes(
        self, symbols: LocaleSymbols, config: CurrencyConfig
    ) -> PluralAffixTable:
        return self.affixes.build(symbols, config)

    def get_currency_rounding(
        self, symbols: LocaleSymbols, config: CurrencyConfig
    ) -> RoundingPolicy:
        return self.rounding.resolve(symbols, config)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def build_plural_affixes(
    symbols: LocaleSymbols,
    config: CurrencyConfig,
    data: Optional[LocaleDataProvider] = None,
) -> PluralAffixTable:
    """
    PluralAffixTable для конфигурации и локали.

    Raises:
        PatternSyntaxError: Если override-шаблон CurrencyPluralInfo некорректен
    """
    return CurrencyFormat(data).get_currency_affixes(symbols, config)


def resolve_rounding(
    symbols: LocaleSymbols,
    config: CurrencyConfig,
    data: Optional[LocaleDataProvider] = None,
) -> RoundingPolicy:
    """RoundingPolicy для конфигурации и локали."""
    return CurrencyFormat(data).get_currency_rounding(symbols, config)
