"""Locale data — провайдеры локальных данных для разрешения валюты.

- LocaleDataProvider: узкий интерфейс, который потребляет ядро
- BabelLocaleData: данные Unicode CLDR через Babel
- StaticLocaleData: данные из JSON, проверенные JSON Schema
"""

from .babel_data import BabelLocaleData, parse_locale
from .base import LocaleDataProvider, rounding_increment_from_units
from .static_data import (
    StaticLocaleData,
    UnknownLocaleDataError,
    load_locale_data_schema,
    validate_locale_data,
)

__all__ = [
    "LocaleDataProvider",
    "BabelLocaleData",
    "StaticLocaleData",
    "UnknownLocaleDataError",
    "load_locale_data_schema",
    "parse_locale",
    "rounding_increment_from_units",
    "validate_locale_data",
]
