"""
Number Pattern — извлечение affix patterns из шаблона числа

Разбирает decimal pattern (например, "¤#,##0.00;(¤#,##0.00)") на
positive/negative prefix/suffix. Числовая часть шаблона не интерпретируется:
за форматирование цифр отвечает внешний pipeline.

Грамматика (упрощённая):
    pattern    := subpattern (';' subpattern)?
    subpattern := prefix body suffix
    body       := [#0-9@.,]+ ('E' '+'? '0'+)?

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Возвращаемые affix patterns уже проверены tokenize_affix_pattern
2. Любая синтаксическая ошибка → PatternSyntaxError с абсолютной позицией
3. Отсутствие negative subpattern → negative_prefix/suffix = None
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.core.pattern.affix_pattern import (
    QUOTE,
    PatternSyntaxError,
    tokenize_affix_pattern,
)

_NUMERIC_CHARS: Final[frozenset[str]] = frozenset("#0123456789@.,")
_SEPARATOR: Final[str] = ";"
_EXPONENT: Final[str] = "E"


@dataclass(frozen=True)
class AffixPatterns:
    """Affix patterns, извлечённые из шаблона числа."""

    positive_prefix: str
    positive_suffix: str
    negative_prefix: Optional[str] = None
    negative_suffix: Optional[str] = None

    @property
    def has_negative_subpattern(self) -> bool:
        return self.negative_prefix is not None or self.negative_suffix is not None


def parse_affix_patterns(pattern: str) -> AffixPatterns:
    """
    Разбор шаблона числа на affix patterns.

    Args:
        pattern: Шаблон числа, например "#,##0.00 ¤¤¤"

    Returns:
        AffixPatterns с positive (и, если есть, negative) prefix/suffix

    Raises:
        PatternSyntaxError: Незакрытая кавычка, нет числовой части,
            цифры в suffix, больше двух subpatterns, placeholder шире ¤¤¤

    Examples:
        >>> parse_affix_patterns("¤#,##0.00").positive_prefix
        '¤'
        >>> parse_affix_patterns("#,##0.00 ¤¤¤").positive_suffix
        ' ¤¤¤'
    """
    subpatterns = _split_subpatterns(pattern)
    if len(subpatterns) > 2:
        offset = subpatterns[2][0] - 1
        raise PatternSyntaxError("Too many subpatterns", pattern, offset)

    offset, text = subpatterns[0]
    positive_prefix, positive_suffix = _parse_subpattern(pattern, offset, text)

    if len(subpatterns) == 1:
        return AffixPatterns(positive_prefix=positive_prefix, positive_suffix=positive_suffix)

    offset, text = subpatterns[1]
    negative_prefix, negative_suffix = _parse_subpattern(pattern, offset, text)
    return AffixPatterns(
        positive_prefix=positive_prefix,
        positive_suffix=positive_suffix,
        negative_prefix=negative_prefix,
        negative_suffix=negative_suffix,
    )


# =============================================================================
# ВНУТРЕННИЕ ФУНКЦИИ
# =============================================================================


def _split_subpatterns(pattern: str) -> list[tuple[int, str]]:
    """Разделение по ';' вне кавычек. Возвращает (offset, text) для каждой части."""
    parts: list[tuple[int, str]] = []
    in_quote = False
    quote_start = 0
    start = 0
    for i, ch in enumerate(pattern):
        if ch == QUOTE:
            in_quote = not in_quote
            if in_quote:
                quote_start = i
        elif ch == _SEPARATOR and not in_quote:
            parts.append((start, pattern[start:i]))
            start = i + 1
    if in_quote:
        raise PatternSyntaxError("Unterminated quote", pattern, quote_start)
    parts.append((start, pattern[start:]))
    return parts


def _parse_subpattern(pattern: str, offset: int, text: str) -> tuple[str, str]:
    """Разбор одного subpattern на (prefix, suffix)."""
    length = len(text)
    in_quote = False
    i = 0

    # Prefix: всё до первого числового символа вне кавычек
    while i < length:
        ch = text[i]
        if ch == QUOTE:
            in_quote = not in_quote
        elif not in_quote and ch in _NUMERIC_CHARS:
            break
        i += 1
    if i >= length:
        raise PatternSyntaxError("Missing numeric body", pattern, offset + i)
    prefix_end = i

    # Body
    while i < length and text[i] in _NUMERIC_CHARS:
        i += 1
    if i < length and text[i] == _EXPONENT:
        i += 1
        if i < length and text[i] == "+":
            i += 1
        exponent_start = i
        while i < length and text[i] == "0":
            i += 1
        if i == exponent_start:
            raise PatternSyntaxError("Malformed exponent", pattern, offset + i)
    suffix_start = i

    # Suffix не должен содержать числовых символов вне кавычек
    in_quote = False
    for j in range(suffix_start, length):
        ch = text[j]
        if ch == QUOTE:
            in_quote = not in_quote
        elif not in_quote and ch in _NUMERIC_CHARS:
            raise PatternSyntaxError("Unexpected numeric character in suffix", pattern, offset + j)

    prefix = text[:prefix_end]
    suffix = text[suffix_start:]
    _validate_affix(pattern, offset, prefix)
    _validate_affix(pattern, offset + suffix_start, suffix)
    return prefix, suffix


def _validate_affix(pattern: str, offset: int, affix: str) -> None:
    try:
        tokenize_affix_pattern(affix)
    except PatternSyntaxError as e:
        raise PatternSyntaxError(
            e.message, pattern, offset + e.position
        ) from e
