from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from app.constants import UsageConfig
from app.enum import Plan
from app.recipe.model import Recipe


class AppState(BaseModel):
    """Registro mensal de uso de um dono (usuário ou cliente anônimo)"""
    plan: Plan = Plan.FREEMIUM
    free_limit: int = Field(UsageConfig.FREE_LIMIT, ge=0)
    prompts_used: int = Field(0, ge=0)
    credits: int = Field(UsageConfig.DEFAULT_CREDITS, ge=0)
    favorites: List[Recipe] = Field(default_factory=list)


class UsageSummary(BaseModel):
    plan: Plan
    free_limit: int
    prompts_used: int
    credits: int
    remaining: Optional[int] = Field(None, description="Prompts grátis restantes (None = ilimitado)")
    can_generate: bool


class FavoriteRequest(BaseModel):
    recipe: Recipe


class FavoriteResponse(BaseModel):
    recipe_id: str
    favorited: bool


class FavoritesResponse(BaseModel):
    favorites: List[Recipe]
