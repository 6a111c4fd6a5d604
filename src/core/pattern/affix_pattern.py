"""
Affix Pattern — токенизация prefix/suffix шаблонов

Affix pattern — это текст до или после числовой части шаблона
(например, "¤" в "¤#,##0.00" или " ¤¤¤" в "#,##0.00 ¤¤¤").

Синтаксис:
- ¤, ¤¤, ¤¤¤ — placeholder валюты (ширина выбирает CurrencyDisplay)
- -, +, %, ‰ — символы локали (минус, плюс, процент, промилле)
- '...' — литеральный текст в кавычках
- '' — литеральный апостроф (внутри и вне кавычек)
- всё остальное — литеральный текст

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Незакрытая кавычка → PatternSyntaxError
2. Placeholder шире 3 символов → PatternSyntaxError
3. Соседние литералы склеиваются в один токен
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символ placeholder валюты (U+00A4 CURRENCY SIGN)
CURRENCY_PLACEHOLDER: Final[str] = "¤"

# Максимальная ширина placeholder: ¤¤¤ = long name
MAX_CURRENCY_WIDTH: Final[int] = 3

QUOTE: Final[str] = "'"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class PatternSyntaxError(ValueError):
    """
    Некорректный шаблон числа или affix pattern.

    Сигнализирует о повреждённой конфигурации (например, override-шаблон
    из CurrencyPluralInfo). Не перехватывается внутри ядра.
    """

    def __init__(self, message: str, pattern: str, position: int):
        self.message = message
        self.pattern = pattern
        self.position = position
        super().__init__(f"{message} in pattern {pattern!r} at position {position}")


# =============================================================================
# ENUMS
# =============================================================================


class CurrencyDisplay(str, Enum):
    """
    Текстовая форма валюты, подставляемая вместо placeholder.

    Единое представление для обоих путей: ширина placeholder (¤/¤¤/¤¤¤)
    и явный выбор формы.
    """

    SYMBOL = "symbol"
    ISO_CODE = "iso_code"
    LONG_NAME = "long_name"

    @classmethod
    def from_width(cls, width: int) -> "CurrencyDisplay":
        """
        Форма валюты по числу повторений ¤.

        Raises:
            ValueError: Если ширина вне диапазона [1, 3]
        """
        if width == 1:
            return cls.SYMBOL
        if width == 2:
            return cls.ISO_CODE
        if width == 3:
            return cls.LONG_NAME
        raise ValueError(f"Unsupported currency placeholder width: {width}")


class TokenKind(str, Enum):
    """Тип токена affix pattern"""

    LITERAL = "literal"
    CURRENCY = "currency"
    MINUS_SIGN = "minus_sign"
    PLUS_SIGN = "plus_sign"
    PERCENT = "percent"
    PER_MILLE = "per_mille"


_SYMBOL_TOKENS: Final[dict[str, TokenKind]] = {
    "-": TokenKind.MINUS_SIGN,
    "+": TokenKind.PLUS_SIGN,
    "%": TokenKind.PERCENT,
    "‰": TokenKind.PER_MILLE,
}


@dataclass(frozen=True)
class AffixToken:
    """Токен affix pattern."""

    kind: TokenKind
    text: str = ""
    display: Optional[CurrencyDisplay] = None


# =============================================================================
# TOKENIZER
# =============================================================================


def tokenize_affix_pattern(pattern: Optional[str]) -> list[AffixToken]:
    """
    Разбор affix pattern на токены.

    Args:
        pattern: Affix pattern (None трактуется как пустой)

    Returns:
        Список токенов в порядке следования

    Raises:
        PatternSyntaxError: Незакрытая кавычка или placeholder шире ¤¤¤

    Examples:
        >>> [t.kind.value for t in tokenize_affix_pattern("-¤")]
        ['minus_sign', 'currency']
        >>> tokenize_affix_pattern("'¤'")[0].text
        '¤'
    """
    tokens: list[AffixToken] = []
    literal: list[str] = []
    if not pattern:
        return tokens

    def flush_literal() -> None:
        if literal:
            tokens.append(AffixToken(kind=TokenKind.LITERAL, text="".join(literal)))
            literal.clear()

    i = 0
    length = len(pattern)
    while i < length:
        ch = pattern[i]

        if ch == QUOTE:
            # '' вне кавычек — литеральный апостроф
            if i + 1 < length and pattern[i + 1] == QUOTE:
                literal.append(QUOTE)
                i += 2
                continue
            start = i
            i += 1
            while True:
                if i >= length:
                    raise PatternSyntaxError("Unterminated quote", pattern, start)
                if pattern[i] == QUOTE:
                    if i + 1 < length and pattern[i + 1] == QUOTE:
                        literal.append(QUOTE)
                        i += 2
                        continue
                    i += 1
                    break
                literal.append(pattern[i])
                i += 1
            continue

        if ch == CURRENCY_PLACEHOLDER:
            start = i
            while i < length and pattern[i] == CURRENCY_PLACEHOLDER:
                i += 1
            width = i - start
            if width > MAX_CURRENCY_WIDTH:
                raise PatternSyntaxError(
                    f"Currency placeholder of width {width} exceeds {MAX_CURRENCY_WIDTH}",
                    pattern,
                    start,
                )
            flush_literal()
            tokens.append(
                AffixToken(kind=TokenKind.CURRENCY, display=CurrencyDisplay.from_width(width))
            )
            continue

        kind = _SYMBOL_TOKENS.get(ch)
        if kind is not None:
            flush_literal()
            tokens.append(AffixToken(kind=kind))
        else:
            literal.append(ch)
        i += 1

    flush_literal()
    return tokens


def has_currency_placeholder(pattern: Optional[str]) -> bool:
    """True если affix pattern содержит хотя бы один placeholder валюты (вне кавычек)."""
    return any(token.kind == TokenKind.CURRENCY for token in tokenize_affix_pattern(pattern))


def has_minus_sign(pattern: Optional[str]) -> bool:
    """True если affix pattern содержит токен минуса (вне кавычек)."""
    return any(token.kind == TokenKind.MINUS_SIGN for token in tokenize_affix_pattern(pattern))
