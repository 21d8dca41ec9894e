from typing import List, Union

from app.constants import RecipeConfig
from app.recipe.model import Ingredient
from app.utils import round_half_up


def scale_factor(servings: Union[int, float]) -> float:
    """As quantidades informadas valem para 2 porções; o fator nunca fica abaixo de 0.25."""
    return max(RecipeConfig.MIN_SCALE_FACTOR, servings / RecipeConfig.BASE_SERVINGS)


def scale_ingredients(ingredients: List[Ingredient], factor: float) -> List[Ingredient]:
    return [
        ingredient.model_copy(update={"quantity": max(1, round_half_up(ingredient.quantity * factor))})
        for ingredient in ingredients
    ]
