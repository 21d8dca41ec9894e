from typing import List

from app.enum import OutputFormat, Unit
from app.recipe.model import Ingredient, Recipe


def format_quantity(ingredient: Ingredient) -> str:
    if ingredient.unit == Unit.UNITS:
        return f"{ingredient.quantity} {ingredient.name}"
    return f"{ingredient.quantity} {ingredient.unit.value} {ingredient.name}"


def render_text(recipe: Recipe, output_format: OutputFormat = OutputFormat.PRINT) -> str:
    """
    Renderiza a receita em texto puro

    'impressao' usa layout compacto (sem variações e tags); o conteúdo dos passos não muda.
    """
    lines: List[str] = [
        recipe.title,
        f"{recipe.servings} porções · {recipe.time_minutes} min · {recipe.difficulty.value}",
        "",
        "Ingredientes:",
        *(f"- {format_quantity(ingredient)}" for ingredient in recipe.ingredients),
        "",
        "Modo de preparo:",
        *(f"{index}. {step}" for index, step in enumerate(recipe.steps, start=1)),
    ]

    if recipe.substitutions:
        lines += ["", "Substituições:", *(f"- {sub}" for sub in recipe.substitutions)]

    if output_format != OutputFormat.PRINT:
        lines += ["", "Variações:", *(f"- {variation}" for variation in recipe.variations)]
        if recipe.tags:
            lines += ["", "Tags: " + ", ".join(recipe.tags)]

    return "\n".join(lines) + "\n"
