"""
Test suite for currency-affix-core

Contains:
- tests/unit/          : Unit tests for pattern, domain, locale data and resolvers
"""
