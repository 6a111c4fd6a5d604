"""
Currency — конфигурация форматирования валюты

Immutable Pydantic модели:
- CurrencyPluralInfo: legacy таблица plural-шаблонов
- CurrencyConfig: конфигурация одного вызова (валюта, стиль, usage,
  affix patterns, параметры default rounding)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Affix patterns проверяются токенизатором при создании конфигурации
2. currency нормализуется в верхний регистр (ISO 4217, 3 буквы)
3. Конфигурация не мутирует: override строится через with_affix_patterns
"""

from decimal import (
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Decimal,
)
from enum import Enum
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.domain.plural import PluralCategory
from src.core.pattern import (
    AffixPatterns,
    has_currency_placeholder,
    parse_affix_patterns,
    tokenize_affix_pattern,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ROUNDING_MODES: Final[frozenset[str]] = frozenset(
    {
        ROUND_CEILING,
        ROUND_DOWN,
        ROUND_FLOOR,
        ROUND_HALF_DOWN,
        ROUND_HALF_EVEN,
        ROUND_HALF_UP,
        ROUND_UP,
    }
)

DEFAULT_MINIMUM_FRACTION_DIGITS: Final[int] = 0
DEFAULT_MAXIMUM_FRACTION_DIGITS: Final[int] = 3


# =============================================================================
# ENUMS
# =============================================================================


class CurrencyStyle(str, Enum):
    """
    Форма валюты по умолчанию для одиночного placeholder (¤).

    SYMBOL — короткий символ ("$", "€"), ISO_CODE — код ISO 4217 ("USD").
    """

    SYMBOL = "SYMBOL"
    ISO_CODE = "ISO_CODE"


class CurrencyUsage(str, Enum):
    """
    Режим использования валюты: выбирает таблицу округления.

    CASH — правила для наличных расчётов (часто грубее STANDARD).
    """

    STANDARD = "STANDARD"
    CASH = "CASH"


# =============================================================================
# MODELS
# =============================================================================


def normalize_currency_code(value: str) -> str:
    """
    Нормализация ISO 4217 кода.

    Raises:
        ValueError: Если код не состоит из трёх латинских букв
    """
    code = value.strip().upper()
    if len(code) != 3 or not code.isascii() or not code.isalpha():
        raise ValueError(f"Invalid ISO 4217 currency code: {value!r}")
    return code


class CurrencyPluralInfo(BaseModel):
    """
    Legacy таблица шаблонов по plural категориям.

    Каждый шаблон — полный decimal pattern, обычно с ¤¤¤ (long name),
    например "#,##0.00 ¤¤¤". Категория OTHER обязательна: она служит
    fallback для отсутствующих категорий.
    """

    patterns: dict[PluralCategory, str] = Field(..., description="Шаблоны по plural категориям")

    model_config = {"frozen": True}

    @field_validator("patterns")
    @classmethod
    def validate_other_present(cls, v: dict[PluralCategory, str]) -> dict[PluralCategory, str]:
        """Проверка наличия шаблона для OTHER"""
        if PluralCategory.OTHER not in v:
            raise ValueError("CurrencyPluralInfo requires a pattern for 'other'")
        return v

    def get_currency_plural_pattern(self, keyword: str) -> str:
        """Шаблон для plural keyword; отсутствующая категория → шаблон OTHER."""
        category = PluralCategory.or_other(keyword)
        return self.patterns.get(category, self.patterns[PluralCategory.OTHER])


class CurrencyConfig(BaseModel):
    """
    Конфигурация разрешения валюты для одного вызова.

    Affix patterns могут содержать placeholder валюты:
    ¤ — символ (или ISO код при CurrencyStyle.ISO_CODE), ¤¤ — ISO код,
    ¤¤¤ — long name для plural категории.

    Поля minimum/maximum_fraction_digits, rounding_increment и rounding_mode
    используются только default rounding policy (когда валюта недоступна).
    """

    currency: Optional[str] = Field(None, description="Явная валюта (ISO 4217)")
    currency_style: CurrencyStyle = Field(CurrencyStyle.SYMBOL, description="Форма для ¤")
    currency_usage: CurrencyUsage = Field(CurrencyUsage.STANDARD, description="Режим округления")
    currency_plural_info: Optional[CurrencyPluralInfo] = Field(
        None, description="Legacy override plural-шаблонов"
    )

    positive_prefix_pattern: Optional[str] = None
    positive_suffix_pattern: Optional[str] = None
    negative_prefix_pattern: Optional[str] = None
    negative_suffix_pattern: Optional[str] = None
    sign_always_shown: bool = False

    minimum_fraction_digits: int = Field(DEFAULT_MINIMUM_FRACTION_DIGITS, ge=0)
    maximum_fraction_digits: int = Field(DEFAULT_MAXIMUM_FRACTION_DIGITS, ge=0)
    rounding_increment: Optional[Decimal] = Field(None, ge=0)
    rounding_mode: str = ROUND_HALF_EVEN

    model_config = {"frozen": True}

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: Optional[str]) -> Optional[str]:
        """Нормализация ISO 4217 кода"""
        if v is None:
            return v
        return normalize_currency_code(v)

    @field_validator(
        "positive_prefix_pattern",
        "positive_suffix_pattern",
        "negative_prefix_pattern",
        "negative_suffix_pattern",
    )
    @classmethod
    def validate_affix_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Проверка синтаксиса affix pattern (PatternSyntaxError → ValidationError)"""
        tokenize_affix_pattern(v)
        return v

    @field_validator("rounding_mode")
    @classmethod
    def validate_rounding_mode(cls, v: str) -> str:
        if v not in ROUNDING_MODES:
            raise ValueError(f"Unsupported rounding mode: {v}")
        return v

    @model_validator(mode="after")
    def validate_fraction_digits(self) -> "CurrencyConfig":
        """Проверка, что maximum_fraction_digits >= minimum_fraction_digits"""
        if self.maximum_fraction_digits < self.minimum_fraction_digits:
            raise ValueError(
                f"maximum_fraction_digits {self.maximum_fraction_digits} must be >= "
                f"minimum_fraction_digits {self.minimum_fraction_digits}"
            )
        return self

    @classmethod
    def from_pattern(cls, pattern: str, **fields: Any) -> "CurrencyConfig":
        """
        Конфигурация из decimal pattern.

        Raises:
            PatternSyntaxError: Если шаблон некорректен
        """
        patterns = parse_affix_patterns(pattern)
        return cls(
            positive_prefix_pattern=patterns.positive_prefix,
            positive_suffix_pattern=patterns.positive_suffix,
            negative_prefix_pattern=patterns.negative_prefix,
            negative_suffix_pattern=patterns.negative_suffix,
            **fields,
        )

    def with_affix_patterns(self, patterns: AffixPatterns, **changes: Any) -> "CurrencyConfig":
        """Копия конфигурации с affix patterns из разобранного шаблона (и полями changes)."""
        return self.model_copy(
            update={
                "positive_prefix_pattern": patterns.positive_prefix,
                "positive_suffix_pattern": patterns.positive_suffix,
                "negative_prefix_pattern": patterns.negative_prefix,
                "negative_suffix_pattern": patterns.negative_suffix,
                **changes,
            }
        )

    @property
    def affix_patterns(self) -> tuple[Optional[str], ...]:
        return (
            self.positive_prefix_pattern,
            self.positive_suffix_pattern,
            self.negative_prefix_pattern,
            self.negative_suffix_pattern,
        )

    @property
    def has_currency_placeholder(self) -> bool:
        """True если хотя бы один affix pattern содержит ¤."""
        return any(has_currency_placeholder(p) for p in self.affix_patterns)
