import logging
import time
from typing import Callable, Optional

from app.constants import RecipeConfig
from app.recipe.estimators import (
    build_steps,
    build_substitutions,
    build_tags,
    build_title,
    build_variations,
    estimate_time,
    pick_difficulty,
)
from app.recipe.model import Recipe, RecipeInput
from app.recipe.parser import parse_ingredients
from app.recipe.scaler import scale_factor, scale_ingredients
from app.utils import slugify


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class RecipeGenerator:
    """Parser → scaler → estimadores → Recipe. Sem estado entre chamadas."""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.logger = logging.getLogger(__name__)
        self.clock = clock or _epoch_millis

    def generate(self, recipe_input: RecipeInput) -> Recipe:
        parsed = parse_ingredients(recipe_input.ingredients)
        factor = scale_factor(recipe_input.servings)
        scaled = scale_ingredients(parsed, factor)

        minutes = estimate_time(scaled, recipe_input.style)
        steps = build_steps(scaled, recipe_input.style, recipe_input.format, recipe_input.utensils)
        title = build_title(scaled, recipe_input.style)

        recipe = Recipe(
            id=f"{slugify(title)}-{self.clock()}",
            title=title,
            servings=recipe_input.servings,
            ingredients=scaled,
            steps=steps,
            time_minutes=minutes,
            difficulty=pick_difficulty(minutes, len(steps)),
            substitutions=build_substitutions(scaled, recipe_input.restrictions),
            variations=build_variations(recipe_input.style),
            tags=build_tags(scaled, recipe_input.style, recipe_input.restrictions),
            image_url=RecipeConfig.PRO_IMAGE_URL if recipe_input.pro else "",
        )
        self.logger.info(
            f"Receita gerada | id={recipe.id} | ingredientes={len(scaled)} | fator={factor} | passos={len(steps)}"
        )
        return recipe
