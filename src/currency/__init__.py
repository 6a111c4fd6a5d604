"""Currency — разрешение текстовой формы валюты, affixes и округления.

- Representation Resolver: symbol / ISO code / plural long name
- Affix Template Builder: PluralAffixTable для шести plural категорий
- Rounding Policy Resolver: fraction digits + increment по валюте и usage
"""

from .affixes import AffixGenerator, PluralAffixBuilder
from .format import CurrencyFormat, build_plural_affixes, resolve_rounding, use_currency
from .representation import CurrencyRepresentationResolver
from .rounding import (
    CurrencyRoundingResolver,
    DefaultPolicyFactory,
    default_rounding_policy,
    to_decimal,
)

__all__ = [
    # Classes
    "AffixGenerator",
    "CurrencyFormat",
    "CurrencyRepresentationResolver",
    "CurrencyRoundingResolver",
    "PluralAffixBuilder",
    # Types
    "DefaultPolicyFactory",
    # Functions
    "build_plural_affixes",
    "default_rounding_policy",
    "resolve_rounding",
    "to_decimal",
    "use_currency",
]
