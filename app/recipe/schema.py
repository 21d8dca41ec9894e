from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.constants import RecipeConfig
from app.enum import OutputFormat, Plan, Style
from app.recipe.model import Recipe, RecipeInput
from app.usage.schema import UsageSummary


class RecipeRequest(BaseModel):
    """Requisição de geração de receita"""
    ingredients: str = Field(..., description="Lista de ingredientes, um por linha")
    servings: int = Field(RecipeConfig.BASE_SERVINGS, ge=1, le=50, description="Porções")
    restrictions: Optional[str] = Field(None, max_length=500)
    utensils: Optional[str] = Field(None, max_length=500)
    style: Optional[Style] = None
    format: OutputFormat = OutputFormat.SUMMARY

    def to_input(self, plan: Plan) -> RecipeInput:
        return RecipeInput(
            ingredients=self.ingredients,
            servings=self.servings,
            restrictions=self.restrictions,
            utensils=self.utensils,
            style=self.style,
            format=self.format,
            pro=plan == Plan.PRO,
        )


class RecipeResponse(BaseModel):
    """Resposta de geração de receita"""
    recipe: Recipe
    usage: UsageSummary


class ExportRequest(BaseModel):
    """Exportação em texto puro (impressão)"""
    recipe: Recipe
    format: OutputFormat = OutputFormat.PRINT
