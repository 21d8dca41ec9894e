import json
import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import ValidationError

from app.constants import UsageConfig
from app.usage.schema import AppState
from app.usage.store import KeyValueStore


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


class UsageRepository:
    """Um registro por dono e por mês: '{prefixo}:{dono}:{AAAA-MM}'."""

    def __init__(self, store: KeyValueStore, prefix: str = UsageConfig.STORAGE_PREFIX):
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.prefix = prefix

    def owner_prefix(self, owner: str) -> str:
        return f"{self.prefix}:{owner}:"

    def monthly_key(self, owner: str, now: Optional[datetime] = None) -> str:
        now = now or datetime.now()
        return f"{self.owner_prefix(owner)}{now.year}-{now.month:02d}"

    def purge_stale(self, owner: str, current_key: str) -> int:
        """Remove registros de outros meses do mesmo dono. Retorna quantos foram apagados."""
        stale = [
            key for key in self.store.keys()
            if key.startswith(self.owner_prefix(owner)) and key != current_key
        ]
        for key in stale:
            self.store.delete(key)
        if stale:
            self.logger.info(f"Registros de meses anteriores removidos | owner={owner} | total={len(stale)}")
        return len(stale)

    @staticmethod
    def _coerce(data: Any) -> AppState:
        if not isinstance(data, dict):
            raise TypeError(f"registro inesperado: {type(data).__name__}")
        favorites = data.get("favorites")
        return AppState(
            plan=_or_default(data.get("plan"), AppState().plan),
            free_limit=_or_default(data.get("free_limit"), UsageConfig.FREE_LIMIT),
            prompts_used=_or_default(data.get("prompts_used"), 0),
            credits=_or_default(data.get("credits"), 0),
            favorites=favorites if isinstance(favorites, list) else [],
        )

    def load(self, owner: str, now: Optional[datetime] = None) -> AppState:
        key = self.monthly_key(owner, now)
        raw = self.store.get(key)

        if not raw:
            # mês novo: limpa meses anteriores e grava o estado padrão
            self.purge_stale(owner, key)
            state = AppState()
            self.store.set(key, state.model_dump_json())
            return state

        try:
            return self._coerce(json.loads(raw))
        except (ValueError, TypeError, ValidationError) as e:
            self.logger.warning(f"Estado de uso inválido, usando padrão | key={key} | error={e}")
            return AppState()

    def save(self, owner: str, state: AppState, now: Optional[datetime] = None) -> None:
        self.store.set(self.monthly_key(owner, now), state.model_dump_json())
