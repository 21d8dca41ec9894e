from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header
from fastapi.responses import PlainTextResponse

from app.container import Container
from app.identity.service import IdentityService
from app.recipe.schema import ExportRequest, RecipeRequest, RecipeResponse
from app.recipe.service import RecipeService
from app.usage.service import resolve_owner

router = APIRouter()

@router.post("/recipes", response_model=RecipeResponse)
@inject
async def generate_recipe(
    request: RecipeRequest,
    authorization: Annotated[str | None, Header()] = None,
    x_client_id: Annotated[str | None, Header(alias="X-Client-Id")] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service]),
):
    caller = await identity_service.optional_caller(authorization)
    owner = resolve_owner(caller.user.id if caller else None, x_client_id)
    return await recipe_service.generate(request, owner, caller)


@router.post("/recipes/export", response_class=PlainTextResponse)
@inject
async def export_recipe(
    request: ExportRequest,
    recipe_service: RecipeService = Depends(Provide[Container.recipe_service]),
):
    """Versão em texto puro para impressão ou cópia"""
    return PlainTextResponse(recipe_service.export(request.recipe, request.format))
