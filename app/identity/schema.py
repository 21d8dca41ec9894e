from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.enum import Plan


class IdentityUser(BaseModel):
    """Usuário do provedor de identidade (subconjunto do payload do Supabase Auth)"""
    id: str
    email: Optional[str] = None
    app_metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def plan(self) -> Plan:
        return Plan.PRO if self.app_metadata.get("plan") == Plan.PRO.value else Plan.FREEMIUM

    @property
    def metadata_credits(self) -> Optional[int]:
        raw = self.app_metadata.get("credits")
        if raw is None:
            return None
        if isinstance(raw, int):
            return max(0, raw)
        try:
            return max(0, int(float(raw)))
        except (TypeError, ValueError, OverflowError):
            return None

    @property
    def credits(self) -> int:
        return self.metadata_credits or 0

    @property
    def has_admin_marker(self) -> bool:
        return self.app_metadata.get("admin") is True or self.app_metadata.get("role") == "admin"


class Caller(BaseModel):
    """Usuário autenticado junto com o token usado na requisição"""
    user: IdentityUser
    access_token: str


class CredentialsRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=6)


class PasswordResetRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320)
    redirect_to: Optional[str] = Field(None, description="URL de retorno após redefinir a senha")


class AuthResult(BaseModel):
    ok: bool
    access_token: Optional[str] = None
    refresh_token: Optional[str] = None
    user: Optional[IdentityUser] = None
    message: Optional[str] = None
