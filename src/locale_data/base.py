"""
LocaleDataProvider — интерфейс источника локальных данных

Ядро потребляет локальные данные только через этот узкий интерфейс:
- символы локали (LocaleSymbols)
- символ, ISO код и plural long name валюты
- fraction digits и rounding increment валюты для usage
- legacy таблица plural-шаблонов локали

Реализации должны быть read-only после создания: один экземпляр можно
использовать из нескольких потоков без синхронизации.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable

from src.core.domain import CurrencyPluralInfo, CurrencyUsage, LocaleSymbols


@runtime_checkable
class LocaleDataProvider(Protocol):
    """Источник локальных данных для разрешения валюты."""

    def get_locale_symbols(self, locale: str) -> LocaleSymbols:
        """Символы локали, включая fallback-валюту."""
        ...

    def get_currency_symbol(self, locale: str, currency: str) -> str:
        """Символ валюты в локали ("$", "US$", "CHF")."""
        ...

    def get_currency_iso_code(self, currency: str) -> str:
        """ISO 4217 код валюты."""
        ...

    def get_currency_long_name(self, locale: str, currency: str, plural_keyword: str) -> str:
        """Long name валюты для plural keyword ("US dollar" / "US dollars")."""
        ...

    def get_currency_rounding(self, currency: str, usage: CurrencyUsage) -> tuple[int, Decimal]:
        """(fraction_digits, rounding_increment) из одной записи валюты и usage."""
        ...

    def get_currency_plural_info(self, locale: str) -> CurrencyPluralInfo:
        """Legacy таблица plural-шаблонов локали (с ¤¤¤)."""
        ...


def rounding_increment_from_units(rounding: int, digits: int) -> Decimal:
    """
    Increment из CLDR-записи: rounding задан в единицах 10^-digits.

    Examples:
        >>> rounding_increment_from_units(5, 2)
        Decimal('0.05')
        >>> rounding_increment_from_units(0, 2)
        Decimal('0')
    """
    if rounding <= 0:
        return Decimal(0)
    return Decimal(rounding).scaleb(-digits)
