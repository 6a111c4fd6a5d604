"""
Unit тесты для Affix Template Builder.

Coverage:
- Тотальность таблицы (шесть категорий, без placeholder токенов)
- Идемпотентность
- Контракт ширины placeholder (¤ / ¤¤ / ¤¤¤ / без placeholder)
- Negative affixes (производные и явные)
- Sign always shown
- Legacy CurrencyPluralInfo override
- PatternSyntaxError для некорректного override-шаблона
"""

import pytest

from src.core.domain import (
    PLURAL_CATEGORIES,
    CurrencyConfig,
    CurrencyPluralInfo,
    CurrencyStyle,
    PluralCategory,
)
from src.core.pattern import CurrencyDisplay, PatternSyntaxError
from src.currency import AffixGenerator


def _all_strings(table):
    for _, pair in table.items():
        yield pair.positive_prefix
        yield pair.positive_suffix
        yield pair.negative_prefix
        yield pair.negative_suffix


# =============================================================================
# TABLE PROPERTIES
# =============================================================================


class TestTableProperties:
    """Общие свойства PluralAffixTable"""

    @pytest.mark.parametrize(
        "pattern",
        ["¤#,##0.00", "¤¤ #,##0.00", "#,##0.00 ¤¤¤", "¤#,##0.00;(¤¤¤ #,##0.00)"],
    )
    def test_six_entries_without_placeholders(self, builder, en_us_symbols, pattern) -> None:
        """Шесть записей, в строках нет ¤"""
        config = CurrencyConfig.from_pattern(pattern, currency="USD")
        table = builder.build(en_us_symbols, config)

        assert len(table) == 6
        assert [c for c, _ in table.items()] == list(PLURAL_CATEGORIES)
        for text in _all_strings(table):
            assert "¤" not in text

    def test_entries_not_empty(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig.from_pattern("¤#,##0.00", currency="USD")
        table = builder.build(en_us_symbols, config)
        for _, pair in table.items():
            assert pair.positive_prefix
            assert pair.negative_prefix

    def test_idempotent(self, builder, en_us_symbols) -> None:
        """Повторный вызов с той же конфигурацией даёт ту же таблицу"""
        config = CurrencyConfig.from_pattern("¤#,##0.00 ¤¤¤", currency="USD")
        assert builder.build(en_us_symbols, config) == builder.build(en_us_symbols, config)

    def test_config_not_mutated(self, builder, en_us_symbols) -> None:
        info = CurrencyPluralInfo(patterns={"other": "#0 ¤¤¤"})
        config = CurrencyConfig(currency="USD", positive_prefix_pattern="¤", currency_plural_info=info)
        builder.build(en_us_symbols, config)
        assert config.positive_prefix_pattern == "¤"
        assert config.positive_suffix_pattern is None


# =============================================================================
# PLACEHOLDER WIDTH
# =============================================================================


class TestPlaceholderWidth:
    """Контракт ширины placeholder"""

    def test_symbol(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig(currency="USD", positive_prefix_pattern="¤100")
        table = builder.build(en_us_symbols, config)
        for category in PLURAL_CATEGORIES:
            assert table.get(category).positive_prefix == "$100"

    def test_iso_code(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig(currency="USD", positive_prefix_pattern="¤¤100")
        table = builder.build(en_us_symbols, config)
        for category in PLURAL_CATEGORIES:
            assert table.get(category).positive_prefix == "USD100"

    def test_long_name_per_category(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig(currency="USD", positive_prefix_pattern="¤¤¤100")
        table = builder.build(en_us_symbols, config)
        assert table.get(PluralCategory.ONE).positive_prefix == "US dollar100"
        for category in PLURAL_CATEGORIES:
            if category != PluralCategory.ONE:
                assert table.get(category).positive_prefix == "US dollars100"

    def test_no_placeholder_is_literal_everywhere(self, builder, en_us_symbols) -> None:
        """Шаблон без placeholder — одинаковый литерал во всех категориях"""
        config = CurrencyConfig(currency="USD", positive_prefix_pattern="100")
        table = builder.build(en_us_symbols, config)
        for category in PLURAL_CATEGORIES:
            assert table.get(category).positive_prefix == "100"

    def test_iso_code_style_changes_single_placeholder(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig(
            currency="EUR", currency_style=CurrencyStyle.ISO_CODE, positive_prefix_pattern="¤"
        )
        table = builder.build(en_us_symbols, config)
        assert table.get(PluralCategory.OTHER).positive_prefix == "EUR"

    def test_quoted_placeholder_passes_through(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig(currency="USD", positive_suffix_pattern="' ¤'")
        table = builder.build(en_us_symbols, config)
        assert table.get(PluralCategory.OTHER).positive_suffix == " ¤"

    def test_locale_symbols_expanded(self, builder, en_us_symbols) -> None:
        symbols = en_us_symbols.with_overrides(percent_sign="٪", per_mille_sign="؉")
        config = CurrencyConfig(currency="USD", positive_suffix_pattern="%‰")
        table = builder.build(symbols, config)
        assert table.get(PluralCategory.OTHER).positive_suffix == "٪؉"

    def test_polish_categories(self, builder, static_data) -> None:
        symbols = static_data.get_locale_symbols("pl_PL")
        config = CurrencyConfig.from_pattern("#,##0.00 ¤¤¤")
        table = builder.build(symbols, config)
        assert table.get(PluralCategory.ONE).positive_suffix == " złoty polski"
        assert table.get(PluralCategory.FEW).positive_suffix == " złote polskie"
        assert table.get(PluralCategory.MANY).positive_suffix == " złotych polskich"
        assert table.get(PluralCategory.OTHER).positive_suffix == " złotego polskiego"


# =============================================================================
# SIGNS
# =============================================================================


class TestSigns:
    """Negative affixes и sign always shown"""

    def test_derived_negative(self, builder, en_us_symbols) -> None:
        """Нет negative subpattern → минус перед positive prefix"""
        config = CurrencyConfig.from_pattern("¤#,##0.00 ¤¤", currency="USD")
        pair = builder.build(en_us_symbols, config).get(PluralCategory.OTHER)
        assert pair.positive_prefix == "$"
        assert pair.positive_suffix == " USD"
        assert pair.negative_prefix == "-$"
        assert pair.negative_suffix == " USD"

    def test_locale_minus_sign(self, builder, en_us_symbols) -> None:
        symbols = en_us_symbols.with_overrides(minus_sign="−")
        config = CurrencyConfig.from_pattern("¤#,##0.00", currency="USD")
        pair = builder.build(symbols, config).get(PluralCategory.OTHER)
        assert pair.negative_prefix == "−$"

    def test_explicit_negative(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig.from_pattern("¤#,##0.00;(¤#,##0.00)", currency="USD")
        pair = builder.build(en_us_symbols, config).get(PluralCategory.ONE)
        assert pair.wrap("1.00") == "$1.00"
        assert pair.wrap("1.00", negative=True) == "($1.00)"

    def test_sign_always_shown_derived(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig.from_pattern("¤#,##0.00", currency="USD", sign_always_shown=True)
        pair = builder.build(en_us_symbols, config).get(PluralCategory.OTHER)
        assert pair.positive_prefix == "+$"
        assert pair.negative_prefix == "-$"

    def test_sign_always_shown_replaces_minus(self, builder, en_us_symbols) -> None:
        """Минус в negative pattern заменяется плюсом для положительных"""
        config = CurrencyConfig.from_pattern(
            "#,##0.00 ¤;#,##0.00- ¤", currency="USD", sign_always_shown=True
        )
        pair = builder.build(en_us_symbols, config).get(PluralCategory.OTHER)
        assert pair.positive_prefix == ""
        assert pair.positive_suffix == "+ $"
        assert pair.negative_suffix == "- $"

    def test_sign_always_shown_with_empty_plus_sign(self, builder, en_us_symbols) -> None:
        """Пустой plus sign локали не заменяется минусом"""
        symbols = en_us_symbols.with_overrides(plus_sign="")
        config = CurrencyConfig.from_pattern(
            "#,##0.00 ¤;#,##0.00- ¤", currency="USD", sign_always_shown=True
        )
        pair = builder.build(symbols, config).get(PluralCategory.OTHER)
        assert pair.positive_suffix == " $"
        assert pair.negative_suffix == "- $"

    def test_sign_always_shown_without_minus_token(self, builder, en_us_symbols) -> None:
        config = CurrencyConfig.from_pattern(
            "¤#,##0.00;(¤#,##0.00)", currency="USD", sign_always_shown=True
        )
        pair = builder.build(en_us_symbols, config).get(PluralCategory.OTHER)
        assert pair.positive_prefix == "+($"
        assert pair.positive_suffix == ")"


# =============================================================================
# LEGACY PLURAL INFO OVERRIDE
# =============================================================================


class TestCurrencyPluralInfoOverride:
    """Legacy путь через CurrencyPluralInfo"""

    def test_override_replaces_config_patterns(self, builder, en_us_symbols) -> None:
        """Шаблоны CurrencyPluralInfo заменяют patterns конфигурации"""
        info = CurrencyPluralInfo(patterns={"one": "#,##0.00 ¤¤¤", "other": "#,##0.00 ¤¤¤"})
        config = CurrencyConfig(
            currency="USD", positive_prefix_pattern="¤", currency_plural_info=info
        )
        table = builder.build(en_us_symbols, config)

        one = table.get(PluralCategory.ONE)
        assert one.positive_prefix == ""
        assert one.positive_suffix == " US dollar"
        assert one.negative_prefix == "-"

        other = table.get(PluralCategory.OTHER)
        assert other.positive_suffix == " US dollars"

    def test_missing_category_uses_other_pattern(self, builder, en_us_symbols) -> None:
        info = CurrencyPluralInfo(patterns={"one": "¤¤¤ #0", "other": "#0 ¤¤¤"})
        config = CurrencyConfig(currency="USD", currency_plural_info=info)
        table = builder.build(en_us_symbols, config)
        assert table.get(PluralCategory.ONE).positive_prefix == "US dollar "
        assert table.get(PluralCategory.FEW).positive_suffix == " US dollars"
        assert table.get(PluralCategory.FEW).positive_prefix == ""

    def test_override_matches_modern_path(self, builder, en_us_symbols) -> None:
        """Legacy и modern пути дают совместимый результат"""
        pattern = "#,##0.00 ¤¤¤"
        info = CurrencyPluralInfo(patterns={"other": pattern})
        legacy = builder.build(en_us_symbols, CurrencyConfig(currency="USD", currency_plural_info=info))
        modern = builder.build(en_us_symbols, CurrencyConfig.from_pattern(pattern, currency="USD"))
        assert legacy == modern

    def test_override_from_locale_data(self, builder, static_data, en_us_symbols) -> None:
        info = static_data.get_currency_plural_info("en_US")
        config = CurrencyConfig(currency="EUR", currency_plural_info=info)
        table = builder.build(en_us_symbols, config)
        assert table.apply("1.00", PluralCategory.ONE) == "1.00 euro"
        assert table.apply("2.00", PluralCategory.OTHER, negative=True) == "-2.00 euros"

    def test_override_ignores_sign_always_shown(self, builder, en_us_symbols) -> None:
        """Шаблон категории задаёт affixes целиком: плюс не добавляется"""
        info = CurrencyPluralInfo(patterns={"other": "#0 ¤¤¤"})
        config = CurrencyConfig(currency="USD", currency_plural_info=info, sign_always_shown=True)
        pair = builder.build(en_us_symbols, config).get(PluralCategory.OTHER)
        assert pair.positive_prefix == ""
        assert pair.positive_suffix == " US dollars"
        assert pair.negative_prefix == "-"
        assert config.sign_always_shown is True

    @pytest.mark.parametrize(
        "bad_pattern",
        ["#,##0.00 '¤¤¤", "#,##0.00 ¤¤¤¤", "¤¤¤", "#0;#0;#0"],
    )
    def test_malformed_override_raises(self, builder, en_us_symbols, bad_pattern) -> None:
        """Некорректный override-шаблон → PatternSyntaxError, не молчаливый результат"""
        info = CurrencyPluralInfo(patterns={"one": "#0 ¤¤¤", "other": bad_pattern})
        config = CurrencyConfig(currency="USD", currency_plural_info=info)
        with pytest.raises(PatternSyntaxError):
            builder.build(en_us_symbols, config)


# =============================================================================
# GENERATOR
# =============================================================================


class TestAffixGenerator:
    """Тесты для AffixGenerator"""

    def test_reused_across_calls(self, en_us_symbols) -> None:
        """Буфер генератора не протекает между вызовами"""
        generator = AffixGenerator(en_us_symbols)
        texts = {
            CurrencyDisplay.SYMBOL: "$",
            CurrencyDisplay.ISO_CODE: "USD",
            CurrencyDisplay.LONG_NAME: "US dollars",
        }
        first = generator.generate(CurrencyConfig(positive_prefix_pattern="¤¤¤ "), texts)
        second = generator.generate(CurrencyConfig(positive_prefix_pattern="¤"), texts)
        assert first.positive_prefix == "US dollars "
        assert second.positive_prefix == "$"
        assert second.negative_prefix == "-$"
