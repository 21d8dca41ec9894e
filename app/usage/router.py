import asyncio
from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header

from app.container import Container
from app.identity.service import IdentityService
from app.usage.schema import FavoriteRequest, FavoriteResponse, FavoritesResponse, UsageSummary
from app.usage.service import UsageService, resolve_owner

router = APIRouter()

@router.get("/me/usage", response_model=UsageSummary)
@inject
async def get_usage(
    authorization: Annotated[str | None, Header()] = None,
    x_client_id: Annotated[str | None, Header(alias="X-Client-Id")] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    usage_service: UsageService = Depends(Provide[Container.usage_service]),
):
    caller = await identity_service.optional_caller(authorization)
    owner = resolve_owner(caller.user.id if caller else None, x_client_id)
    state = await asyncio.to_thread(usage_service.get_state, owner, caller.user if caller else None)
    return usage_service.summary(state)


@router.get("/me/favorites", response_model=FavoritesResponse)
@inject
async def list_favorites(
    authorization: Annotated[str | None, Header()] = None,
    x_client_id: Annotated[str | None, Header(alias="X-Client-Id")] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    usage_service: UsageService = Depends(Provide[Container.usage_service]),
):
    caller = await identity_service.optional_caller(authorization)
    owner = resolve_owner(caller.user.id if caller else None, x_client_id)
    return FavoritesResponse(favorites=await asyncio.to_thread(usage_service.favorites, owner))


@router.post("/me/favorites", response_model=FavoriteResponse)
@inject
async def toggle_favorite(
    request: FavoriteRequest,
    authorization: Annotated[str | None, Header()] = None,
    x_client_id: Annotated[str | None, Header(alias="X-Client-Id")] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    usage_service: UsageService = Depends(Provide[Container.usage_service]),
):
    """Salva a receita nos favoritos, ou remove se já estiver salva"""
    caller = await identity_service.optional_caller(authorization)
    owner = resolve_owner(caller.user.id if caller else None, x_client_id)
    favorited = await asyncio.to_thread(usage_service.toggle_favorite, owner, request.recipe)
    return FavoriteResponse(recipe_id=request.recipe.id, favorited=favorited)
