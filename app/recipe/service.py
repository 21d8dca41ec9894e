import asyncio
import logging
from typing import Optional

from app.constants import RecipeConfig
from app.entitlement.service import EntitlementService
from app.enum import Consumption, OutputFormat
from app.exception import ChefException
from app.identity.schema import Caller
from app.recipe.exception import RecipeErrorCode, RecipeException
from app.recipe.formatter import render_text
from app.recipe.generator import RecipeGenerator
from app.recipe.model import Recipe
from app.recipe.schema import RecipeRequest, RecipeResponse
from app.usage.exception import UsageErrorCode, UsageException
from app.usage.schema import AppState
from app.usage.service import UsageService


class RecipeService:
    def __init__(
        self,
        generator: RecipeGenerator,
        usage_service: UsageService,
        entitlement_service: EntitlementService,
        latency_seconds: float = RecipeConfig.LATENCY_SECONDS,
    ):
        self.logger = logging.getLogger(__name__)
        self.generator = generator
        self.usage_service = usage_service
        self.entitlement_service = entitlement_service
        self.latency_seconds = latency_seconds or 0.0

    async def _spend_remote_credit(self, caller: Caller, state: AppState) -> AppState:
        # o valor local já foi debitado; se o provedor falhar, mantém o local
        try:
            credits = await self.entitlement_service.spend_own_credit(caller)
        except ChefException as e:
            self.logger.warning(f"Falha ao debitar crédito no servidor | user_id={caller.user.id} | error={e.error_code}")
            return state
        return state.model_copy(update={"credits": credits})

    async def generate(self, request: RecipeRequest, owner: str, caller: Optional[Caller] = None) -> RecipeResponse:
        if not request.ingredients.strip():
            raise RecipeException(RecipeErrorCode.EMPTY_INGREDIENTS)

        # 1) cota do mês
        state = await asyncio.to_thread(self.usage_service.get_state, owner, caller.user if caller else None)
        if not self.usage_service.can_generate(state):
            self.logger.info(f"Cota esgotada | owner={owner} | plan={state.plan.value}")
            raise UsageException(UsageErrorCode.QUOTA_EXCEEDED)

        state, consumption = self.usage_service.consume(state)
        if consumption == Consumption.CREDIT and caller is not None:
            state = await self._spend_remote_credit(caller, state)
        await asyncio.to_thread(self.usage_service.save, owner, state)

        # 2) geração
        try:
            recipe = self.generator.generate(request.to_input(state.plan))
        except Exception as e:
            self.logger.exception(f"Falha ao gerar receita | owner={owner}")
            raise RecipeException(RecipeErrorCode.RECIPE_GENERATE_FAILED) from e

        # 3) latência simulada para a animação de carregamento do cliente
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

        self.logger.info(f"Receita entregue | owner={owner} | consumo={consumption.value} | id={recipe.id}")
        return RecipeResponse(recipe=recipe, usage=self.usage_service.summary(state))

    def export(self, recipe: Recipe, output_format: OutputFormat = OutputFormat.PRINT) -> str:
        return render_text(recipe, output_format)
