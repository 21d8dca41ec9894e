from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.constants import AdminConfig
from app.enum import CreditOperation, Plan


class UserRow(BaseModel):
    id: str
    email: Optional[str] = None
    plan: Plan
    credits: int


class AssignPlanRequest(BaseModel):
    user_id: str = Field("", alias="userId")
    plan: Plan = Plan.FREEMIUM

    model_config = {"populate_by_name": True}


class AssignPlanResponse(BaseModel):
    ok: bool = True


class CreditsUpdateRequest(BaseModel):
    user_id: str = Field("", alias="userId")
    op: CreditOperation = CreditOperation.ADD
    amount: int = Field(0, le=AdminConfig.MAX_CREDITS)

    model_config = {"populate_by_name": True}


class CreditsResponse(BaseModel):
    credits: int = Field(..., ge=0)


class BootstrapResponse(BaseModel):
    ok: bool = True
    already: bool = False
