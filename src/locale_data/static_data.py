"""
StaticLocaleData — провайдер локальных данных из JSON

Данные проверяются JSON Schema (schema/locale_data.json, Draft 2020-12)
библиотекой jsonschema до использования.

Формат (сокращённо):
    {
      "locales": {
        "en_US": {
          "currency": "USD",
          "currency_symbol": "$",
          "currency_names": {
            "USD": {"symbol": "$", "plural": {"one": "US dollar", "other": "US dollars"}}
          },
          "currency_plural_patterns": {"other": "#,##0.00 ¤¤¤"}
        }
      },
      "currencies": {
        "CHF": {"digits": 2, "rounding": "0", "cash_digits": 2, "cash_rounding": "0.05"}
      }
    }

Rounding increments задаются строками и читаются как Decimal без потерь.
"""

import json
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain import (
    GENERIC_CURRENCY_SYMBOL,
    NO_CURRENCY_ISO_CODE,
    CurrencyPluralInfo,
    CurrencyUsage,
    LocaleSymbols,
    PluralCategory,
    normalize_currency_code,
)

_SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "locale_data.json"

DEFAULT_CURRENCY_RECORD: Final[Dict[str, Any]] = {"digits": 2, "rounding": "0"}

DEFAULT_PLURAL_PATTERN: Final[str] = "#,##0.00 ¤¤¤"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownLocaleDataError(LookupError):
    """Локаль отсутствует в статических данных."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"No static locale data for {locale!r}")


# =============================================================================
# SCHEMA
# =============================================================================


@lru_cache(maxsize=1)
def load_locale_data_schema() -> Dict[str, Any]:
    """
    Загрузка JSON Schema статических данных.

    Raises:
        ValueError: Если сама схема некорректна
    """
    with open(_SCHEMA_PATH, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {_SCHEMA_PATH.name}: {e}")

    return schema


def validate_locale_data(data: Dict[str, Any]) -> None:
    """
    Валидация статических данных против схемы.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    Draft202012Validator(load_locale_data_schema()).validate(data)


# =============================================================================
# PROVIDER
# =============================================================================


class StaticLocaleData:
    """LocaleDataProvider на проверенных in-memory данных."""

    def __init__(self, data: Dict[str, Any]):
        """
        Args:
            data: Данные в формате schema/locale_data.json

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_locale_data(data)
        self._locales: Dict[str, Dict[str, Any]] = data["locales"]
        self._currencies: Dict[str, Dict[str, Any]] = data["currencies"]

    @classmethod
    def from_json_file(cls, path: Path) -> "StaticLocaleData":
        with open(path, "r", encoding="utf-8") as f:
            return cls(json.load(f))

    def get_locale_symbols(self, locale: str) -> LocaleSymbols:
        entry = self._locale(locale)
        currency: Optional[str] = entry.get("currency")

        if "currency_symbol" in entry:
            currency_symbol = entry["currency_symbol"]
        elif currency:
            currency_symbol = self.get_currency_symbol(locale, currency)
        else:
            currency_symbol = GENERIC_CURRENCY_SYMBOL

        signs = {
            key: entry[key]
            for key in ("minus_sign", "plus_sign", "percent_sign", "per_mille_sign")
            if key in entry
        }
        return LocaleSymbols(
            locale=locale,
            currency=currency,
            currency_symbol=currency_symbol,
            international_currency_symbol=(
                entry.get("international_currency_symbol") or currency or NO_CURRENCY_ISO_CODE
            ),
            **signs,
        )

    def get_currency_symbol(self, locale: str, currency: str) -> str:
        return self._names(locale, currency).get("symbol", currency)

    def get_currency_iso_code(self, currency: str) -> str:
        return normalize_currency_code(currency)

    def get_currency_long_name(self, locale: str, currency: str, plural_keyword: str) -> str:
        names = self._names(locale, currency)
        plural = names.get("plural", {})
        if plural_keyword in plural:
            return plural[plural_keyword]
        if PluralCategory.OTHER.keyword in plural:
            return plural[PluralCategory.OTHER.keyword]
        return names.get("display_name", currency)

    def get_currency_rounding(self, currency: str, usage: CurrencyUsage) -> tuple[int, Decimal]:
        record = (
            self._currencies.get(currency)
            or self._currencies.get("DEFAULT")
            or DEFAULT_CURRENCY_RECORD
        )
        digits = record["digits"]
        rounding = record.get("rounding", "0")
        if usage == CurrencyUsage.CASH:
            digits = record.get("cash_digits", digits)
            rounding = record.get("cash_rounding", rounding)
        return digits, Decimal(rounding)

    def get_currency_plural_info(self, locale: str) -> CurrencyPluralInfo:
        patterns = self._locale(locale).get(
            "currency_plural_patterns", {PluralCategory.OTHER.keyword: DEFAULT_PLURAL_PATTERN}
        )
        return CurrencyPluralInfo(patterns=patterns)

    # -------------------------------------------------------------------------

    def _locale(self, locale: str) -> Dict[str, Any]:
        try:
            return self._locales[locale]
        except KeyError:
            raise UnknownLocaleDataError(locale) from None

    def _names(self, locale: str, currency: str) -> Dict[str, Any]:
        return self._locale(locale).get("currency_names", {}).get(currency, {})
