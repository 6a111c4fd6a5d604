"""Общие fixtures: статические локальные данные и резолверы."""

import copy

import pytest

from src.currency import CurrencyRepresentationResolver, PluralAffixBuilder
from src.locale_data import StaticLocaleData

LOCALE_DATA = {
    "locales": {
        "en_US": {
            "currency": "USD",
            "currency_symbol": "$",
            "currency_names": {
                "USD": {
                    "symbol": "$",
                    "display_name": "US Dollar",
                    "plural": {"one": "US dollar", "other": "US dollars"},
                },
                "EUR": {"symbol": "€", "plural": {"one": "euro", "other": "euros"}},
                "CHF": {"symbol": "CHF", "display_name": "Swiss Franc"},
            },
            "currency_plural_patterns": {
                "one": "#,##0.00 ¤¤¤",
                "other": "#,##0.00 ¤¤¤",
            },
        },
        "pl_PL": {
            "currency": "PLN",
            "currency_symbol": "zł",
            "currency_names": {
                "PLN": {
                    "symbol": "zł",
                    "plural": {
                        "one": "złoty polski",
                        "few": "złote polskie",
                        "many": "złotych polskich",
                        "other": "złotego polskiego",
                    },
                },
            },
        },
        "en": {
            "currency": None,
        },
    },
    "currencies": {
        "DEFAULT": {"digits": 2, "rounding": "0"},
        "USD": {"digits": 2, "rounding": "0"},
        "JPY": {"digits": 0, "rounding": "0"},
        "CHF": {"digits": 2, "rounding": "0", "cash_digits": 2, "cash_rounding": "0.05"},
        "XTS": {"digits": 2, "rounding": "0.05", "cash_digits": 0, "cash_rounding": "0"},
    },
}


@pytest.fixture
def locale_data_dict():
    """Копия статических данных (тесты могут её портить)."""
    return copy.deepcopy(LOCALE_DATA)


@pytest.fixture
def static_data():
    """StaticLocaleData на тестовых данных."""
    return StaticLocaleData(copy.deepcopy(LOCALE_DATA))


@pytest.fixture
def en_us_symbols(static_data):
    """Символы en_US: fallback-валюта USD."""
    return static_data.get_locale_symbols("en_US")


@pytest.fixture
def no_currency_symbols(static_data):
    """Символы локали без валюты."""
    return static_data.get_locale_symbols("en")


@pytest.fixture
def resolver(static_data):
    return CurrencyRepresentationResolver(static_data)


@pytest.fixture
def builder(resolver):
    return PluralAffixBuilder(resolver)
