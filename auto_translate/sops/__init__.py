"""
SOPs (Standard Operating Procedures) - decision logic layer

- TranslationFiller: decides which (field, locale) pairs of a record need
  translating and fills them through the injected translator
"""

from .gap_fill import (
    TranslationFiller,
    GapFillConfig,
    fill,
)

__all__ = [
    "TranslationFiller",
    "GapFillConfig",
    "fill",
]
