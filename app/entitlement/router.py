from typing import Annotated, List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header, Query

from app.container import Container
from app.entitlement.schema import (
    AssignPlanRequest,
    AssignPlanResponse,
    BootstrapResponse,
    CreditsResponse,
    CreditsUpdateRequest,
    UserRow,
)
from app.entitlement.service import EntitlementService
from app.identity.service import IdentityService

router = APIRouter()

@router.get("/admin/pro/search", response_model=List[UserRow])
@inject
async def search_users(
    query: str = Query("", description="Trecho do e-mail"),
    authorization: Annotated[str | None, Header()] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    entitlement_service: EntitlementService = Depends(Provide[Container.entitlement_service]),
):
    caller = await identity_service.resolve_caller(authorization)
    return await entitlement_service.search_users(caller, query)


@router.post("/admin/pro/assign", response_model=AssignPlanResponse)
@inject
async def assign_plan(
    request: AssignPlanRequest,
    authorization: Annotated[str | None, Header()] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    entitlement_service: EntitlementService = Depends(Provide[Container.entitlement_service]),
):
    caller = await identity_service.resolve_caller(authorization)
    await entitlement_service.assign_plan(caller, request.user_id, request.plan)
    return AssignPlanResponse(ok=True)


@router.post("/admin/credits/update", response_model=CreditsResponse)
@inject
async def update_credits(
    request: CreditsUpdateRequest,
    authorization: Annotated[str | None, Header()] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    entitlement_service: EntitlementService = Depends(Provide[Container.entitlement_service]),
):
    caller = await identity_service.resolve_caller(authorization)
    credits = await entitlement_service.update_credits(caller, request.user_id, request.op, request.amount)
    return CreditsResponse(credits=credits)


@router.post("/admin/bootstrap", response_model=BootstrapResponse)
@inject
async def bootstrap_admin(
    authorization: Annotated[str | None, Header()] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    entitlement_service: EntitlementService = Depends(Provide[Container.entitlement_service]),
):
    """Promove o chamador a administrador quando o projeto ainda não tem nenhum"""
    caller = await identity_service.resolve_caller(authorization)
    return await entitlement_service.bootstrap_admin(caller)


@router.post("/me/credits/spend", response_model=CreditsResponse)
@inject
async def spend_credit(
    authorization: Annotated[str | None, Header()] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
    entitlement_service: EntitlementService = Depends(Provide[Container.entitlement_service]),
):
    caller = await identity_service.resolve_caller(authorization)
    return CreditsResponse(credits=await entitlement_service.spend_own_credit(caller))
