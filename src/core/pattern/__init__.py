"""
Pattern — разбор шаблонов чисел и affix patterns.

Содержит токенизатор prefix/suffix шаблонов с placeholder валюты (¤)
и парсер decimal pattern на positive/negative affix patterns.
"""

from src.core.pattern.affix_pattern import (
    CURRENCY_PLACEHOLDER,
    MAX_CURRENCY_WIDTH,
    AffixToken,
    CurrencyDisplay,
    PatternSyntaxError,
    TokenKind,
    has_currency_placeholder,
    has_minus_sign,
    tokenize_affix_pattern,
)
from src.core.pattern.number_pattern import AffixPatterns, parse_affix_patterns

__all__ = [
    # Constants
    "CURRENCY_PLACEHOLDER",
    "MAX_CURRENCY_WIDTH",
    # Exceptions
    "PatternSyntaxError",
    # Types
    "AffixToken",
    "AffixPatterns",
    "CurrencyDisplay",
    "TokenKind",
    # Functions
    "has_currency_placeholder",
    "has_minus_sign",
    "parse_affix_patterns",
    "tokenize_affix_pattern",
]
