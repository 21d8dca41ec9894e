"""
Estimadores de atributos da receita

Funções puras sobre a lista de ingredientes já escalada e as opções do usuário.
Nenhuma depende do resultado de outra, exceto a dificuldade (tempo + nº de passos).
"""

import re
from typing import Iterable, List, Optional

from app.constants import (
    BASE_VARIATIONS,
    DEFAULT_FINISH_STEPS,
    DEFAULT_PREP_STEP,
    DIFFICULTY_BANDS,
    EGG_NAME_PATTERN,
    EGG_STEP,
    FALLBACK_SUBSTITUTION,
    FINISH_STEPS,
    FLOUR_PATTERN,
    GENERIC_MIX_STEPS,
    PREP_STEPS,
    PROTEIN_STEP,
    RESTRICTION_SEPARATOR_PATTERN,
    SEASONING_STEP,
    STEP_PROTEIN_PATTERN,
    STYLE_VARIATIONS,
    SUBSTITUTION_RULES,
    TAG_RULES,
    TIME_ADJUSTMENTS,
    WET_DRY_STEPS,
    RecipeConfig,
)
from app.enum import Difficulty, OutputFormat, Style, Unit
from app.recipe.model import Ingredient
from app.utils import capitalize_first, collapse_whitespace, round_half_up

_FLOUR = re.compile(FLOUR_PATTERN)
_EGG_NAME = re.compile(EGG_NAME_PATTERN)
_STEP_PROTEIN = re.compile(STEP_PROTEIN_PATTERN, re.IGNORECASE)
_RESTRICTION_SEPARATOR = re.compile(RESTRICTION_SEPARATOR_PATTERN)
_SUBSTITUTION_RULES = [(re.compile(pattern), triggers, phrase) for pattern, triggers, phrase in SUBSTITUTION_RULES]
_TAG_RULES = [(tag, re.compile(pattern, re.IGNORECASE)) for tag, pattern in TAG_RULES]


def _any_name(ingredients: Iterable[Ingredient], pattern: re.Pattern) -> bool:
    return any(pattern.search(ingredient.name.lower()) for ingredient in ingredients)


def estimate_time(ingredients: List[Ingredient], style: Optional[Style] = None) -> int:
    base = RecipeConfig.BASE_MINUTES + min(
        len(ingredients) * RecipeConfig.MINUTES_PER_INGREDIENT,
        RecipeConfig.MAX_INGREDIENT_MINUTES,
    )
    if style is not None:
        base += TIME_ADJUSTMENTS.get(style, 0)
    return max(RecipeConfig.MIN_MINUTES, round_half_up(base))


def pick_difficulty(minutes: int, step_count: int) -> Difficulty:
    for max_minutes, max_steps, difficulty in DIFFICULTY_BANDS:
        if minutes <= max_minutes and step_count <= max_steps:
            return difficulty
    return Difficulty.HARD


def build_title(ingredients: List[Ingredient], style: Optional[Style] = None) -> str:
    key = ingredients[0].name if ingredients else RecipeConfig.DEFAULT_TITLE
    suffix = f" {style.value}" if style else ""
    return collapse_whitespace(f"{capitalize_first(key)}{suffix}")


def _prep_steps(utensils: Optional[str]) -> List[str]:
    available = (utensils or "").lower()
    for keywords, phrase in PREP_STEPS:
        if any(keyword in available for keyword in keywords):
            return [phrase]
    return [DEFAULT_PREP_STEP]


def _mix_steps(ingredients: List[Ingredient]) -> List[str]:
    has_liquid = any(ingredient.unit == Unit.MILLILITERS for ingredient in ingredients)
    if has_liquid and _any_name(ingredients, _FLOUR):
        return list(WET_DRY_STEPS)
    return list(GENERIC_MIX_STEPS)


def _cook_steps(ingredients: List[Ingredient]) -> List[str]:
    steps: List[str] = []
    if any(_STEP_PROTEIN.search(ingredient.name) for ingredient in ingredients):
        steps.append(PROTEIN_STEP)
    eggs = [ingredient for ingredient in ingredients if ingredient.unit == Unit.UNITS]
    if _any_name(eggs, _EGG_NAME):
        steps.append(EGG_STEP)
    steps.append(SEASONING_STEP)
    return steps


def _finish_steps(style: Optional[Style]) -> List[str]:
    return list(FINISH_STEPS.get(style, DEFAULT_FINISH_STEPS))


def build_steps(
    ingredients: List[Ingredient],
    style: Optional[Style] = None,
    output_format: Optional[OutputFormat] = None,
    utensils: Optional[str] = None,
) -> List[str]:
    steps = [
        *_prep_steps(utensils),
        *_mix_steps(ingredients),
        *_cook_steps(ingredients),
        *_finish_steps(style),
    ]
    if output_format != OutputFormat.DETAILED:
        return steps[:RecipeConfig.MAX_CONCISE_STEPS]
    return steps


def build_substitutions(ingredients: List[Ingredient], restrictions: Optional[str] = None) -> List[str]:
    # restrição precisa conter a frase literal (sem tokenizar)
    wanted = (restrictions or "").lower()
    subs: List[str] = []
    for ingredient in ingredients:
        name = ingredient.name.lower()
        for pattern, triggers, phrase in _SUBSTITUTION_RULES:
            if pattern.search(name) and any(trigger in wanted for trigger in triggers):
                subs.append(phrase)
    if not subs:
        subs.append(FALLBACK_SUBSTITUTION)
    return list(dict.fromkeys(subs))


def build_variations(style: Optional[Style] = None) -> List[str]:
    variations = list(BASE_VARIATIONS)
    if style in STYLE_VARIATIONS:
        variations.append(STYLE_VARIATIONS[style])
    return variations


def split_restrictions(restrictions: Optional[str]) -> List[str]:
    tokens = _RESTRICTION_SEPARATOR.split(restrictions or "")
    return [token.strip() for token in tokens if token.strip()]


def build_tags(
    ingredients: List[Ingredient],
    style: Optional[Style] = None,
    restrictions: Optional[str] = None,
) -> List[str]:
    tags: List[str] = []
    if style:
        tags.append(style.value)
    tags.extend(split_restrictions(restrictions))
    for tag, pattern in _TAG_RULES:
        if any(pattern.search(ingredient.name) for ingredient in ingredients):
            tags.append(tag)
    return list(dict.fromkeys(tags))
