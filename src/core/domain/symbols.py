"""
LocaleSymbols — символы локали для подстановки в affixes

Immutable Pydantic модель: снапшот символов конкретной локали.
Создаётся провайдером локальных данных (см. src.locale_data).

ВАЖНО: international_currency_symbol можно переопределить независимо от
currency. Переопределение НЕ меняет fallback-валюту локали, поэтому
ISO-код без явной валюты берётся именно из international_currency_symbol.
"""

from typing import Any, Final, Optional

from pydantic import BaseModel, Field

# Generic currency sign, если у локали нет валюты
GENERIC_CURRENCY_SYMBOL: Final[str] = "¤"

# ISO 4217 код "no currency"
NO_CURRENCY_ISO_CODE: Final[str] = "XXX"


class LocaleSymbols(BaseModel):
    """
    Символы локали.

    Содержит:
    - locale: идентификатор локали (например, "en_US")
    - currency: fallback-валюта локали (None если у локали нет территории)
    - currency_symbol / international_currency_symbol: строки по умолчанию
    - знаки минуса, плюса, процента и промилле
    """

    locale: str = Field(..., min_length=1, description="Идентификатор локали")
    currency: Optional[str] = Field(None, description="Fallback-валюта локали (ISO 4217)")
    currency_symbol: str = Field(GENERIC_CURRENCY_SYMBOL, description="Символ валюты локали")
    international_currency_symbol: str = Field(
        NO_CURRENCY_ISO_CODE, description="Международный символ валюты локали"
    )
    minus_sign: str = "-"
    plus_sign: str = "+"
    percent_sign: str = "%"
    per_mille_sign: str = "‰"

    model_config = {"frozen": True}

    def with_overrides(self, **changes: Any) -> "LocaleSymbols":
        """Копия с переопределёнными полями (исходный объект не меняется)."""
        return self.model_copy(update=changes)
