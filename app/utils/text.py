"""
Funções utilitárias de texto e números
"""

import math
import re
import unicodedata

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")
_WHITESPACE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Remove acentos mantendo as demais letras (NFD sem marcas combinantes)."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(text: str) -> str:
    """
    Converte um texto em slug ASCII separado por hífens

    Args:
        text: texto livre (ex.: 'Farinha gourmet')

    Returns:
        slug minúsculo sem acentos (ex.: 'farinha-gourmet')
    """
    slug = _NON_SLUG_CHARS.sub("-", strip_accents(text.lower()))
    return slug.strip("-")


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def round_half_up(value: float) -> int:
    """Arredonda para o inteiro mais próximo, com .5 sempre para cima."""
    return int(math.floor(value + 0.5))


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
