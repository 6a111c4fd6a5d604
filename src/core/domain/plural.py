"""
Plural — грамматические категории числа (CLDR)

Ядро не выбирает категорию само: она вычисляется внешними plural rules
для конкретного числа и передаётся как вход.
"""

from enum import Enum
from typing import Final


class PluralCategory(str, Enum):
    """
    CLDR plural category.

    Порядок объявления фиксирован и задаёт порядок итерации.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @property
    def keyword(self) -> str:
        """CLDR keyword категории ("zero", "one", ...)."""
        return self.value

    @classmethod
    def from_keyword(cls, keyword: str) -> "PluralCategory":
        """
        Категория по CLDR keyword.

        Raises:
            ValueError: Если keyword не является CLDR категорией
        """
        try:
            return cls(keyword)
        except ValueError:
            raise ValueError(f"Unknown plural keyword: {keyword!r}") from None

    @classmethod
    def or_other(cls, keyword: str) -> "PluralCategory":
        """Категория по keyword; неизвестный keyword → OTHER."""
        try:
            return cls(keyword)
        except ValueError:
            return cls.OTHER


PLURAL_CATEGORIES: Final[tuple[PluralCategory, ...]] = tuple(PluralCategory)
