"""
Pacote de funções utilitárias
"""

from .text import (
    capitalize_first,
    collapse_whitespace,
    round_half_up,
    slugify,
    strip_accents,
)

__all__ = [
    'capitalize_first',
    'collapse_whitespace',
    'round_half_up',
    'slugify',
    'strip_accents',
]
