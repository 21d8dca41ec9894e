import asyncio
import logging
import re
from typing import Optional

from app.identity.client import IdentityClient
from app.identity.exception import IdentityErrorCode, IdentityException
from app.identity.schema import AuthResult, Caller

_BEARER = re.compile(r"^Bearer(?:\s+|$)", re.IGNORECASE)


def bearer_token(authorization: Optional[str]) -> Optional[str]:
    """'Bearer abc' → 'abc'; None quando o cabeçalho está ausente ou vazio."""
    if not authorization:
        return None
    token = _BEARER.sub("", authorization.strip()).strip()
    return token or None


class IdentityService:
    def __init__(self, client: IdentityClient):
        self.logger = logging.getLogger(__name__)
        self.client = client

    async def resolve_caller(self, authorization: Optional[str]) -> Caller:
        """Valida o token do chamador. Sem token ou token inválido → 401."""
        token = bearer_token(authorization)
        if not token:
            raise IdentityException(IdentityErrorCode.UNAUTHORIZED)

        user = await asyncio.to_thread(self.client.get_user, token)
        if user is None:
            raise IdentityException(IdentityErrorCode.UNAUTHORIZED)
        return Caller(user=user, access_token=token)

    async def optional_caller(self, authorization: Optional[str]) -> Optional[Caller]:
        if not bearer_token(authorization):
            return None
        return await self.resolve_caller(authorization)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        result = await asyncio.to_thread(self.client.sign_in, email, password)
        self.logger.info(f"Login | email={email} | ok={result.ok}")
        return result

    async def sign_up(self, email: str, password: str) -> AuthResult:
        result = await asyncio.to_thread(self.client.sign_up, email, password)
        self.logger.info(f"Cadastro | email={email} | ok={result.ok}")
        return result

    async def reset_password(self, email: str, redirect_to: Optional[str] = None) -> AuthResult:
        return await asyncio.to_thread(self.client.reset_password, email, redirect_to)

    async def sign_out(self, authorization: Optional[str]) -> AuthResult:
        token = bearer_token(authorization)
        if not token:
            raise IdentityException(IdentityErrorCode.UNAUTHORIZED)
        return await asyncio.to_thread(self.client.sign_out, token)
