from typing import Annotated

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header

from app.container import Container
from app.identity.schema import AuthResult, CredentialsRequest, PasswordResetRequest
from app.identity.service import IdentityService

router = APIRouter(prefix="/auth")

@router.post("/sign-in", response_model=AuthResult)
@inject
async def sign_in(
    request: CredentialsRequest,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
):
    return await identity_service.sign_in(request.email, request.password)


@router.post("/sign-up", response_model=AuthResult)
@inject
async def sign_up(
    request: CredentialsRequest,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
):
    return await identity_service.sign_up(request.email, request.password)


@router.post("/password-reset", response_model=AuthResult)
@inject
async def reset_password(
    request: PasswordResetRequest,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
):
    return await identity_service.reset_password(request.email, request.redirect_to)


@router.post("/sign-out", response_model=AuthResult)
@inject
async def sign_out(
    authorization: Annotated[str | None, Header()] = None,
    identity_service: IdentityService = Depends(Provide[Container.identity_service]),
):
    return await identity_service.sign_out(authorization)
