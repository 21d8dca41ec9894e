from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from app.constants import RecipeConfig
from app.enum import Difficulty, OutputFormat, Style, Unit


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Nome do ingrediente")
    quantity: int = Field(..., ge=0, description="Quantidade na unidade base")
    unit: Unit = Field(..., description="g, ml ou unid")


class RecipeInput(BaseModel):
    """Entrada do motor de receitas. Porções não são validadas aqui (o fator é limitado no scaler)."""
    ingredients: str = Field(..., description="Lista de ingredientes, um por linha")
    servings: Union[int, float] = Field(RecipeConfig.BASE_SERVINGS, description="Porções desejadas")
    restrictions: Optional[str] = Field(None, description="Restrições separadas por vírgula ou ponto e vírgula")
    utensils: Optional[str] = Field(None, description="Utensílios disponíveis")
    style: Optional[Style] = None
    format: Optional[OutputFormat] = None
    pro: bool = False


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    servings: Union[int, float]
    ingredients: List[Ingredient]
    steps: List[str]
    time_minutes: int = Field(..., ge=RecipeConfig.MIN_MINUTES)
    difficulty: Difficulty
    substitutions: List[str]
    variations: List[str]
    tags: List[str]
    image_url: str = ""
