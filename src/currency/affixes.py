"""
Affix Template Builder — литеральные affixes для всех plural категорий

Для каждой из шести plural категорий (в фиксированном порядке):
1. Разрешается long name валюты для категории
2. Если в конфигурации есть legacy CurrencyPluralInfo:
   шаблон категории разбирается в affix patterns, и конфигурация
   клонируется с этими patterns (with_affix_patterns); sign_always_shown
   во фрагменте сбрасывается
3. Иначе используются affix patterns самой конфигурации
4. AffixGenerator подставляет {symbol, ISO code, long name} и символы локали

Раскрытие placeholder: ¤ → symbol (с учётом CurrencyStyle), ¤¤ → ISO код,
¤¤¤ → long name. Шаблон без placeholder даёт один и тот же литеральный
текст во всех категориях (обратная совместимость со старым способом
выбора ISO/long name повтором ¤ прямо в шаблоне).

Ошибки: некорректный override-шаблон → PatternSyntaxError, пробрасывается
вызывающему без изменений (это признак повреждённых данных).
"""

import logging
from typing import Mapping, Optional

from src.core.domain import (
    PLURAL_CATEGORIES,
    AffixPair,
    CurrencyConfig,
    LocaleSymbols,
    PluralAffixTable,
    PluralCategory,
)
from src.core.pattern import (
    CurrencyDisplay,
    TokenKind,
    has_minus_sign,
    parse_affix_patterns,
    tokenize_affix_pattern,
)
from src.currency.representation import CurrencyRepresentationResolver

logger = logging.getLogger(__name__)


class AffixGenerator:
    """
    Генератор AffixPair из affix patterns конфигурации.

    Экземпляр привязан к одному вызову PluralAffixBuilder.build и не
    разделяется между потоками: внутренний буфер переиспользуется
    для всех категорий этого вызова.
    """

    def __init__(self, symbols: LocaleSymbols):
        self._symbols = symbols
        self._buffer: list[str] = []

    def generate(
        self, config: CurrencyConfig, currency_texts: Mapping[CurrencyDisplay, str]
    ) -> AffixPair:
        """
        AffixPair для одной plural категории.

        Args:
            config: конфигурация с affix patterns (исходная или override-фрагмент)
            currency_texts: строки для каждой CurrencyDisplay

        Returns:
            AffixPair без placeholder токенов
        """
        has_negative = (
            config.negative_prefix_pattern is not None
            or config.negative_suffix_pattern is not None
        )

        positive_prefix = self._unescape(config.positive_prefix_pattern, currency_texts)
        positive_suffix = self._unescape(config.positive_suffix_pattern, currency_texts)

        if has_negative:
            negative_prefix = self._unescape(config.negative_prefix_pattern, currency_texts)
            negative_suffix = self._unescape(config.negative_suffix_pattern, currency_texts)
        else:
            # Нет negative subpattern: минус перед positive prefix
            negative_prefix = self._symbols.minus_sign + positive_prefix
            negative_suffix = positive_suffix

        if config.sign_always_shown:
            plus_sign = self._symbols.plus_sign
            if has_negative:
                positive_prefix = self._unescape(
                    config.negative_prefix_pattern, currency_texts, minus_sign=plus_sign
                )
                positive_suffix = self._unescape(
                    config.negative_suffix_pattern, currency_texts, minus_sign=plus_sign
                )
                if not (
                    has_minus_sign(config.negative_prefix_pattern)
                    or has_minus_sign(config.negative_suffix_pattern)
                ):
                    positive_prefix = plus_sign + positive_prefix
            else:
                positive_prefix = plus_sign + positive_prefix

        return AffixPair(
            positive_prefix=positive_prefix,
            positive_suffix=positive_suffix,
            negative_prefix=negative_prefix,
            negative_suffix=negative_suffix,
        )

    def _unescape(
        self,
        pattern: Optional[str],
        currency_texts: Mapping[CurrencyDisplay, str],
        minus_sign: Optional[str] = None,
    ) -> str:
        buffer = self._buffer
        buffer.clear()
        for token in tokenize_affix_pattern(pattern):
            if token.kind == TokenKind.LITERAL:
                buffer.append(token.text)
            elif token.kind == TokenKind.CURRENCY:
                buffer.append(currency_texts[token.display])
            elif token.kind == TokenKind.MINUS_SIGN:
                buffer.append(self._symbols.minus_sign if minus_sign is None else minus_sign)
            elif token.kind == TokenKind.PLUS_SIGN:
                buffer.append(self._symbols.plus_sign)
            elif token.kind == TokenKind.PERCENT:
                buffer.append(self._symbols.percent_sign)
            elif token.kind == TokenKind.PER_MILLE:
                buffer.append(self._symbols.per_mille_sign)
        return "".join(buffer)


class PluralAffixBuilder:
    """Построение PluralAffixTable для конфигурации и локали."""

    def __init__(self, resolver: CurrencyRepresentationResolver):
        """
        Args:
            resolver: Representation Resolver (stateless, можно разделять)
        """
        self.resolver = resolver

    def build(self, symbols: LocaleSymbols, config: CurrencyConfig) -> PluralAffixTable:
        """
        Affixes для всех шести plural категорий.

        Raises:
            PatternSyntaxError: Если override-шаблон CurrencyPluralInfo некорректен
        """
        generator = AffixGenerator(symbols)
        symbol = self.resolver.resolve_effective(symbols, config)
        iso_code = self.resolver.resolve_iso_code(symbols, config)
        info = config.currency_plural_info
        if info is not None:
            logger.debug("Building currency affixes from plural patterns for %s", symbols.locale)

        entries: dict[PluralCategory, AffixPair] = {}
        for plural in PLURAL_CATEGORIES:
            currency_texts = {
                CurrencyDisplay.SYMBOL: symbol,
                CurrencyDisplay.ISO_CODE: iso_code,
                CurrencyDisplay.LONG_NAME: self.resolver.resolve_long_name(
                    symbols, config, plural
                ),
            }

            if info is None:
                fragment = config
            else:
                plural_pattern = info.get_currency_plural_pattern(plural.keyword)
                # Шаблон категории заменяет affixes целиком, без принудительного плюса
                fragment = config.with_affix_patterns(
                    parse_affix_patterns(plural_pattern), sign_always_shown=False
                )

            entries[plural] = generator.generate(fragment, currency_texts)

        return PluralAffixTable(entries=entries)
