from datetime import datetime

import pytest

from app.enum import Consumption, Difficulty, Plan
from app.identity.schema import IdentityUser
from app.recipe.model import Recipe
from app.usage.exception import UsageErrorCode, UsageException
from app.usage.repository import UsageRepository
from app.usage.schema import AppState
from app.usage.service import UsageService, resolve_owner
from app.usage.store import InMemoryKeyValueStore

JANUARY = datetime(2025, 1, 15, 10, 0)
FEBRUARY = datetime(2025, 2, 1, 0, 5)


def make_recipe(recipe_id: str) -> Recipe:
    return Recipe(
        id=recipe_id,
        title="Receita",
        servings=2,
        ingredients=[],
        steps=["Sirva quente."],
        time_minutes=10,
        difficulty=Difficulty.EASY,
        substitutions=[],
        variations=[],
        tags=[],
    )


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def repository(store):
    return UsageRepository(store)


@pytest.fixture
def usage_service(repository):
    return UsageService(repository)


# --- repositório -----------------------------------------------------------

def test_monthly_key_format(repository):
    assert repository.monthly_key("user-1", JANUARY) == "v0-chef:user-1:2025-01"


def test_load_creates_default_state(repository, store):
    """Primeiro acesso do mês grava o estado padrão."""
    state = repository.load("user-1", JANUARY)

    assert state == AppState()
    assert state.free_limit == 25 and state.credits == 3
    assert store.get("v0-chef:user-1:2025-01") is not None


def test_new_month_purges_only_stale_records_of_same_owner(repository, store):
    # Given
    repository.save("user-1", AppState(prompts_used=10), JANUARY)
    repository.save("user-2", AppState(prompts_used=4), JANUARY)

    # When
    state = repository.load("user-1", FEBRUARY)

    # Then
    assert state.prompts_used == 0
    assert sorted(store.keys()) == ["v0-chef:user-1:2025-02", "v0-chef:user-2:2025-01"]


def test_load_corrupt_record_falls_back_without_overwriting(repository, store):
    """JSON inválido devolve o padrão e mantém o registro original."""
    key = repository.monthly_key("user-1", JANUARY)
    store.set(key, "{quebrado")

    assert repository.load("user-1", JANUARY) == AppState()
    assert store.get(key) == "{quebrado"


def test_load_non_object_record_falls_back(repository, store):
    store.set(repository.monthly_key("user-1", JANUARY), "[1, 2]")
    assert repository.load("user-1", JANUARY) == AppState()


def test_load_coerces_missing_fields(repository, store):
    """Campos ausentes: créditos viram 0 (não 3) e o limite grátis volta a 25."""
    store.set(repository.monthly_key("user-1", JANUARY), '{"prompts_used": 7}')

    state = repository.load("user-1", JANUARY)

    assert state.prompts_used == 7
    assert state.free_limit == 25
    assert state.credits == 0
    assert state.plan == Plan.FREEMIUM
    assert state.favorites == []


# --- cota ------------------------------------------------------------------

def test_remaining_and_can_generate(usage_service):
    assert usage_service.remaining(AppState(prompts_used=20)) == 5
    assert usage_service.remaining(AppState(prompts_used=30)) == 0
    assert usage_service.remaining(AppState(plan=Plan.PRO)) is None

    assert usage_service.can_generate(AppState(prompts_used=25, credits=1))
    assert not usage_service.can_generate(AppState(prompts_used=25, credits=0))
    assert usage_service.can_generate(AppState(plan=Plan.PRO, prompts_used=99, credits=0))


def test_consume_spends_free_prompt_first(usage_service):
    state, consumption = usage_service.consume(AppState(prompts_used=3, credits=2))

    assert consumption == Consumption.FREE_PROMPT
    assert (state.prompts_used, state.credits) == (4, 2)


def test_consume_spends_credit_after_free_prompts(usage_service):
    state, consumption = usage_service.consume(AppState(prompts_used=25, credits=2))

    assert consumption == Consumption.CREDIT
    assert (state.prompts_used, state.credits) == (25, 1)


def test_consume_pro_is_unlimited(usage_service):
    original = AppState(plan=Plan.PRO, prompts_used=25, credits=0)

    state, consumption = usage_service.consume(original)

    assert consumption == Consumption.UNLIMITED
    assert state == original


def test_consume_without_quota_raises(usage_service):
    with pytest.raises(UsageException) as exc_info:
        usage_service.consume(AppState(prompts_used=25, credits=0))

    assert exc_info.value.code == UsageErrorCode.QUOTA_EXCEEDED
    assert exc_info.value.status_code == 402


def test_free_user_generates_exactly_limit_plus_credits(usage_service):
    """25 prompts grátis + 3 créditos = 28 gerações, a 29ª falha."""
    state = AppState()
    for _ in range(28):
        state, _ = usage_service.consume(state)

    assert not usage_service.can_generate(state)
    with pytest.raises(UsageException):
        usage_service.consume(state)


def test_get_state_syncs_plan_and_credits_from_user(usage_service, repository):
    repository.save("user-1", AppState(prompts_used=2, credits=3), JANUARY)
    user = IdentityUser(id="user-1", app_metadata={"plan": "pro", "credits": "7"})

    state = usage_service.get_state("user-1", user, JANUARY)

    assert state.plan == Plan.PRO
    assert state.credits == 7
    assert state.prompts_used == 2


def test_get_state_keeps_local_credits_without_metadata(usage_service, repository):
    repository.save("user-1", AppState(credits=4), JANUARY)

    state = usage_service.get_state("user-1", IdentityUser(id="user-1"), JANUARY)

    assert state.plan == Plan.FREEMIUM
    assert state.credits == 4


def test_summary(usage_service):
    summary = usage_service.summary(AppState(prompts_used=24, credits=0))

    assert summary.remaining == 1
    assert summary.can_generate is True


# --- favoritos -------------------------------------------------------------

def test_toggle_favorite_adds_to_front_and_removes(usage_service):
    usage_service.toggle_favorite("user-1", make_recipe("a"), JANUARY)
    usage_service.toggle_favorite("user-1", make_recipe("b"), JANUARY)
    assert [r.id for r in usage_service.favorites("user-1", JANUARY)] == ["b", "a"]

    favorited = usage_service.toggle_favorite("user-1", make_recipe("a"), JANUARY)

    assert favorited is False
    assert [r.id for r in usage_service.favorites("user-1", JANUARY)] == ["b"]


def test_toggle_favorite_caps_list(usage_service, repository):
    favorites = [make_recipe(f"r{i}") for i in range(100)]
    repository.save("user-1", AppState(favorites=favorites), JANUARY)

    assert usage_service.toggle_favorite("user-1", make_recipe("novo"), JANUARY) is True

    saved = usage_service.favorites("user-1", JANUARY)
    assert len(saved) == 100
    assert saved[0].id == "novo"
    assert saved[-1].id == "r98"


def test_toggle_favorite_keeps_quota_counters(usage_service, repository):
    repository.save("user-1", AppState(prompts_used=9, credits=1), JANUARY)

    usage_service.toggle_favorite("user-1", make_recipe("a"), JANUARY)

    state = repository.load("user-1", JANUARY)
    assert (state.prompts_used, state.credits) == (9, 1)


@pytest.mark.parametrize("caller_id, client_id, expected", [
    ("user-1", "device-9", "user-1"),
    (None, " device-9 ", "device-9"),
    (None, "   ", "anonymous"),
    (None, None, "anonymous"),
])
def test_resolve_owner(caller_id, client_id, expected):
    assert resolve_owner(caller_id, client_id) == expected
