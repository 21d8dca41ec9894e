import asyncio
import logging
from typing import List

from app.constants import AdminConfig
from app.entitlement.exception import EntitlementErrorCode, EntitlementException
from app.entitlement.policy import AdminPolicy
from app.entitlement.schema import BootstrapResponse, UserRow
from app.enum import CreditOperation, Plan
from app.identity.client import IdentityClient
from app.identity.exception import IdentityException
from app.identity.schema import Caller, IdentityUser


class EntitlementService:
    """Plano e créditos guardados no app_metadata do provedor de identidade"""

    def __init__(self, client: IdentityClient, policy: AdminPolicy):
        self.logger = logging.getLogger(__name__)
        self.client = client
        self.policy = policy

    def _require_admin(self, caller: Caller) -> None:
        if not self.policy.is_admin_user(caller.user):
            self.logger.info(f"Acesso administrativo negado | user_id={caller.user.id}")
            raise EntitlementException(EntitlementErrorCode.FORBIDDEN)

    async def _get_target(self, user_id: str) -> IdentityUser:
        if not user_id:
            raise EntitlementException(EntitlementErrorCode.BAD_REQUEST)
        target = await asyncio.to_thread(self.client.get_user_by_id, user_id)
        if target is None:
            raise EntitlementException(EntitlementErrorCode.USER_NOT_FOUND)
        return target

    async def _scan_users(self, max_pages: int) -> List[IdentityUser]:
        """Percorre páginas de usuários até a última (ou até a primeira falha)."""
        users: List[IdentityUser] = []
        for page in range(1, max_pages + 1):
            try:
                batch = await asyncio.to_thread(self.client.list_users, page, AdminConfig.PAGE_SIZE)
            except IdentityException:
                break
            users.extend(batch)
            if len(batch) < AdminConfig.PAGE_SIZE:
                break
        return users

    async def search_users(self, caller: Caller, query: str) -> List[UserRow]:
        self._require_admin(caller)
        needle = (query or "").lower().strip()
        if not needle:
            return []

        users = await self._scan_users(AdminConfig.SEARCH_MAX_PAGES)
        matches = [u for u in users if needle in (u.email or "").lower()]
        return [
            UserRow(id=u.id, email=u.email, plan=u.plan, credits=u.credits)
            for u in matches[:AdminConfig.SEARCH_MAX_RESULTS]
        ]

    async def assign_plan(self, caller: Caller, user_id: str, plan: Plan) -> None:
        self._require_admin(caller)
        target = await self._get_target(user_id)

        metadata = {**target.app_metadata, "plan": plan.value}
        await asyncio.to_thread(self.client.update_app_metadata, target.id, metadata)
        self.logger.info(f"Plano atualizado | admin={caller.user.email} | user_id={target.id} | plan={plan.value}")

    async def update_credits(self, caller: Caller, user_id: str, op: CreditOperation, amount: int) -> int:
        self._require_admin(caller)
        if op == CreditOperation.ADD and not amount > 0:
            raise EntitlementException(EntitlementErrorCode.AMOUNT_MUST_BE_POSITIVE)
        if op == CreditOperation.SET and not amount >= 0:
            raise EntitlementException(EntitlementErrorCode.AMOUNT_MUST_NOT_BE_NEGATIVE)

        target = await self._get_target(user_id)
        current = target.credits

        if op == CreditOperation.ADD:
            credits = current + amount
        elif op == CreditOperation.SET:
            credits = amount
        else:
            credits = 0
        credits = min(max(0, credits), AdminConfig.MAX_CREDITS)

        metadata = {**target.app_metadata, "credits": credits}
        await asyncio.to_thread(self.client.update_app_metadata, target.id, metadata)
        self.logger.info(
            f"Créditos atualizados | admin={caller.user.email} | user_id={target.id} | op={op.value} | {current} -> {credits}"
        )
        return credits

    async def spend_own_credit(self, caller: Caller) -> int:
        """Debita um crédito do próprio usuário (mínimo 0). Sem escrita se nada mudar."""
        me = await self._get_target(caller.user.id)
        current = me.credits
        credits = max(0, current - 1)
        if credits == current:
            return current

        await asyncio.to_thread(self.client.update_app_metadata, me.id, {**me.app_metadata, "credits": credits})
        return credits

    async def bootstrap_admin(self, caller: Caller) -> BootstrapResponse:
        """Promove o chamador a admin somente se ainda não existir nenhum administrador."""
        if self.policy.is_admin_user(caller.user):
            return BootstrapResponse(ok=True, already=True)

        users = await self._scan_users(AdminConfig.BOOTSTRAP_MAX_PAGES)
        if any(self.policy.is_admin_user(u) for u in users):
            raise EntitlementException(EntitlementErrorCode.ALREADY_INITIALIZED)

        metadata = {**caller.user.app_metadata, "admin": True}
        await asyncio.to_thread(self.client.update_app_metadata, caller.user.id, metadata)
        self.logger.info(f"Primeiro administrador configurado | user_id={caller.user.id}")
        return BootstrapResponse(ok=True, already=False)
