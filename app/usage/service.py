import logging
from datetime import datetime
from typing import List, Optional, Tuple

from app.constants import UsageConfig
from app.enum import Consumption, Plan
from app.identity.schema import IdentityUser
from app.recipe.model import Recipe
from app.usage.exception import UsageErrorCode, UsageException
from app.usage.repository import UsageRepository
from app.usage.schema import AppState, UsageSummary


class UsageService:
    def __init__(self, repository: UsageRepository):
        self.logger = logging.getLogger(__name__)
        self.repository = repository

    def get_state(
        self,
        owner: str,
        user: Optional[IdentityUser] = None,
        now: Optional[datetime] = None,
    ) -> AppState:
        state = self.repository.load(owner, now)
        if user is None:
            return state
        # plano e créditos do usuário logado vêm do provedor de identidade
        credits = user.metadata_credits
        return state.model_copy(update={
            "plan": user.plan,
            "credits": state.credits if credits is None else credits,
        })

    @staticmethod
    def remaining(state: AppState) -> Optional[int]:
        if state.plan == Plan.PRO:
            return None
        return max(0, state.free_limit - state.prompts_used)

    def can_generate(self, state: AppState) -> bool:
        if state.plan == Plan.PRO:
            return True
        return self.remaining(state) > 0 or state.credits > 0

    def consume(self, state: AppState) -> Tuple[AppState, Consumption]:
        """Debita um uso: prompt grátis primeiro, depois crédito. Pro não consome nada."""
        if state.plan == Plan.PRO:
            return state, Consumption.UNLIMITED
        if self.remaining(state) > 0:
            return state.model_copy(update={"prompts_used": state.prompts_used + 1}), Consumption.FREE_PROMPT
        if state.credits > 0:
            return state.model_copy(update={"credits": state.credits - 1}), Consumption.CREDIT
        raise UsageException(UsageErrorCode.QUOTA_EXCEEDED)

    def save(self, owner: str, state: AppState, now: Optional[datetime] = None) -> None:
        self.repository.save(owner, state, now)

    def summary(self, state: AppState) -> UsageSummary:
        return UsageSummary(
            plan=state.plan,
            free_limit=state.free_limit,
            prompts_used=state.prompts_used,
            credits=state.credits,
            remaining=self.remaining(state),
            can_generate=self.can_generate(state),
        )

    def favorites(self, owner: str, now: Optional[datetime] = None) -> List[Recipe]:
        return self.repository.load(owner, now).favorites

    def toggle_favorite(self, owner: str, recipe: Recipe, now: Optional[datetime] = None) -> bool:
        """Adiciona no topo (limite de 100) ou remove se já existir. Retorna se ficou favoritada."""
        state = self.repository.load(owner, now)
        if any(favorite.id == recipe.id for favorite in state.favorites):
            favorites = [favorite for favorite in state.favorites if favorite.id != recipe.id]
            favorited = False
        else:
            favorites = [recipe, *state.favorites][:UsageConfig.MAX_FAVORITES]
            favorited = True

        self.repository.save(owner, state.model_copy(update={"favorites": favorites}), now)
        self.logger.info(f"Favorito atualizado | owner={owner} | recipe_id={recipe.id} | favorited={favorited}")
        return favorited


def resolve_owner(caller_id: Optional[str], client_id: Optional[str]) -> str:
    """Dono do registro de uso: usuário logado, senão o identificador do cliente."""
    if caller_id:
        return caller_id
    return (client_id or "").strip() or UsageConfig.DEFAULT_OWNER
