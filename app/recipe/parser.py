import re
from typing import List, Optional

from app.constants import (
    CUP_KEYWORDS,
    DEFAULT_EGG_NAME,
    DEFAULT_INGREDIENT_NAME,
    DEFAULT_LIQUID_NAME,
    EGG_KEYWORDS,
    GRAM_TOKEN_PATTERN,
    LIQUID_KEYWORDS,
    MILLILITER_TOKEN_PATTERN,
    NAME_CONNECTOR_PATTERN,
    SPOON_KEYWORDS,
    UNIT_WORDS_PATTERN,
    RecipeConfig,
)
from app.enum import Unit
from app.recipe.model import Ingredient
from app.utils import collapse_whitespace, round_half_up

_NUMBER = re.compile(r"\d+(?:[.,]\d+)?")
_UNIT_WORDS = re.compile(UNIT_WORDS_PATTERN, re.IGNORECASE)
_ML_TOKEN = re.compile(MILLILITER_TOKEN_PATTERN, re.IGNORECASE)
_G_TOKEN = re.compile(GRAM_TOKEN_PATTERN, re.IGNORECASE)
_CONNECTOR = re.compile(NAME_CONNECTOR_PATTERN, re.IGNORECASE)


def is_liquid(name: str) -> bool:
    n = name.lower()
    return any(word in n for word in LIQUID_KEYWORDS)


def _extract_name(raw: str) -> str:
    name = _NUMBER.sub("", raw)
    name = _UNIT_WORDS.sub("", name)
    name = collapse_whitespace(name)
    return _CONNECTOR.sub("", name).strip()


def _by_volume_or_mass(name: str, quantity: float, ml_per_unit: int, g_per_unit: int) -> Ingredient:
    if is_liquid(name):
        return Ingredient(
            name=name or DEFAULT_LIQUID_NAME,
            quantity=round_half_up(quantity * ml_per_unit),
            unit=Unit.MILLILITERS,
        )
    return Ingredient(
        name=name or DEFAULT_INGREDIENT_NAME,
        quantity=round_half_up(quantity * g_per_unit),
        unit=Unit.GRAMS,
    )


def parse_line(line: str) -> Optional[Ingredient]:
    """
    Converte uma linha livre em ingrediente estruturado

    Args:
        line: ex. '1 xícara leite', '200 g farinha', '2 ovos'

    Returns:
        Ingredient em g, ml ou unid; None para linha vazia
    """
    raw = line.strip().replace(",", ".", 1)
    if not raw:
        return None

    match = _NUMBER.search(raw)
    quantity = float(match.group(0).replace(",", ".")) if match else 1.0

    lowered = raw.lower()
    name = _extract_name(raw)

    if any(word in lowered for word in EGG_KEYWORDS):
        return Ingredient(
            name=name or DEFAULT_EGG_NAME,
            quantity=max(1, round_half_up(quantity)),
            unit=Unit.UNITS,
        )

    # 1 xícara ~ 240 ml (líquido) ou 120 g (seco)
    if any(word in lowered for word in CUP_KEYWORDS):
        return _by_volume_or_mass(name, quantity, RecipeConfig.CUP_ML, RecipeConfig.CUP_G)

    # 1 colher ~ 15 ml (líquido) ou 10 g (seco)
    if any(word in lowered for word in SPOON_KEYWORDS):
        return _by_volume_or_mass(name, quantity, RecipeConfig.SPOON_ML, RecipeConfig.SPOON_G)

    if _ML_TOKEN.search(lowered):
        return Ingredient(name=name or DEFAULT_LIQUID_NAME, quantity=round_half_up(quantity), unit=Unit.MILLILITERS)

    if _G_TOKEN.search(lowered):
        return Ingredient(name=name or DEFAULT_INGREDIENT_NAME, quantity=round_half_up(quantity), unit=Unit.GRAMS)

    multiplier = RecipeConfig.DEFAULT_MULTIPLIER
    return _by_volume_or_mass(name, quantity, multiplier, multiplier)


def parse_ingredients(text: str) -> List[Ingredient]:
    """Uma linha por ingrediente; linhas em branco são ignoradas."""
    lines = [line.strip() for line in text.splitlines()]
    parsed = (parse_line(line) for line in lines if line)
    return [ingredient for ingredient in parsed if ingredient is not None]
