"""
Core domain models, pattern primitives, and invariants.

This module contains the foundational building blocks that are independent
of locale data sources (Babel, static JSON, etc.).
"""
