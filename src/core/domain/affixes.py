"""
Affixes — литеральные prefix/suffix по plural категориям

Immutable Pydantic модели — выход Affix Template Builder:
- AffixPair: prefix/suffix для положительного и отрицательного числа
- PluralAffixTable: AffixPair для каждой из шести plural категорий

Во всех строках уже нет placeholder токенов: это готовый литеральный текст.
Выбор пары выполняется внешним pipeline в момент форматирования
(по plural категории числа и его знаку).
"""

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, Field, field_validator

from src.core.domain.plural import PLURAL_CATEGORIES, PluralCategory


class AffixPair(BaseModel):
    """Prefix/suffix для обоих знаков одной plural категории."""

    positive_prefix: str = ""
    positive_suffix: str = ""
    negative_prefix: str = ""
    negative_suffix: str = ""

    model_config = {"frozen": True}

    def prefix(self, negative: bool = False) -> str:
        return self.negative_prefix if negative else self.positive_prefix

    def suffix(self, negative: bool = False) -> str:
        return self.negative_suffix if negative else self.positive_suffix

    def wrap(self, digits: str, negative: bool = False) -> str:
        """Обрамление отформатированных цифр affixes выбранного знака."""
        return f"{self.prefix(negative)}{digits}{self.suffix(negative)}"


class PluralAffixTable(BaseModel):
    """
    Таблица AffixPair по plural категориям.

    Инвариант: таблица тотальна — есть запись для каждой из шести категорий.
    entries хранится как read-only mapping.
    """

    entries: Mapping[PluralCategory, AffixPair] = Field(
        ..., description="AffixPair для каждой plural категории"
    )

    model_config = {"frozen": True}

    @field_validator("entries")
    @classmethod
    def validate_total(
        cls, v: Mapping[PluralCategory, AffixPair]
    ) -> Mapping[PluralCategory, AffixPair]:
        """Проверка, что таблица покрывает все plural категории"""
        missing = [c.keyword for c in PLURAL_CATEGORIES if c not in v]
        if missing:
            raise ValueError(f"PluralAffixTable missing categories: {missing}")
        return MappingProxyType(dict(v))

    def get(self, category: PluralCategory) -> AffixPair:
        return self.entries[category]

    def select(self, category: PluralCategory, negative: bool = False) -> tuple[str, str]:
        """(prefix, suffix) для plural категории и знака числа."""
        pair = self.entries[category]
        return pair.prefix(negative), pair.suffix(negative)

    def apply(self, digits: str, category: PluralCategory, negative: bool = False) -> str:
        """Обрамление отформатированных цифр affixes категории и знака."""
        return self.entries[category].wrap(digits, negative)

    def items(self) -> list[tuple[PluralCategory, AffixPair]]:
        """Пары (категория, AffixPair) в фиксированном порядке категорий."""
        return [(c, self.entries[c]) for c in PLURAL_CATEGORIES]

    def __len__(self) -> int:
        return len(self.entries)
