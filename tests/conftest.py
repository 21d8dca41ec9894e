from typing import Any, Dict, Iterable, List, Optional

import pytest
from dependency_injector import providers

from app.container import container
from app.entitlement.policy import AdminPolicy
from app.identity.exception import IdentityErrorCode, IdentityException
from app.identity.schema import AuthResult, Caller, IdentityUser
from app.usage.store import InMemoryKeyValueStore

ADMIN_EMAIL = "admin@chef.com"


class FakeIdentityClient:
    """Provedor de identidade em memória com a mesma interface do IdentityClient"""

    def __init__(self, users: Iterable[IdentityUser] = (), tokens: Optional[Dict[str, str]] = None):
        self.users: Dict[str, IdentityUser] = {u.id: u for u in users}
        self.tokens: Dict[str, str] = dict(tokens or {})
        self.updates: List[tuple] = []
        self.fail_listing = False

    def add(self, user: IdentityUser, token: Optional[str] = None) -> IdentityUser:
        self.users[user.id] = user
        if token:
            self.tokens[token] = user.id
        return user

    def get_user(self, access_token: str) -> Optional[IdentityUser]:
        user_id = self.tokens.get(access_token)
        return self.users.get(user_id) if user_id else None

    def get_user_by_id(self, user_id: str) -> Optional[IdentityUser]:
        return self.users.get(user_id)

    def list_users(self, page: int, per_page: int) -> List[IdentityUser]:
        if self.fail_listing:
            raise IdentityException(IdentityErrorCode.IDENTITY_REQUEST_FAILED)
        users = list(self.users.values())
        start = (page - 1) * per_page
        return users[start:start + per_page]

    def update_app_metadata(self, user_id: str, app_metadata: Dict[str, Any]) -> IdentityUser:
        user = self.users[user_id].model_copy(update={"app_metadata": dict(app_metadata)})
        self.users[user_id] = user
        self.updates.append((user_id, dict(app_metadata)))
        return user

    def sign_in(self, email: str, password: str) -> AuthResult:
        user = next((u for u in self.users.values() if u.email == email), None)
        if user is None:
            return AuthResult(ok=False, message="Invalid login credentials")
        token = f"token-{user.id}"
        self.tokens[token] = user.id
        return AuthResult(ok=True, access_token=token, user=user)

    def sign_up(self, email: str, password: str) -> AuthResult:
        user = self.add(IdentityUser(id=f"user-{len(self.users) + 1}", email=email))
        return AuthResult(ok=True, user=user)

    def reset_password(self, email: str, redirect_to: Optional[str] = None) -> AuthResult:
        return AuthResult(ok=True)

    def sign_out(self, access_token: str) -> AuthResult:
        self.tokens.pop(access_token, None)
        return AuthResult(ok=True)


@pytest.fixture
def admin_user():
    return IdentityUser(id="admin-1", email=ADMIN_EMAIL, app_metadata={})


@pytest.fixture
def regular_user():
    return IdentityUser(id="user-1", email="cliente@exemplo.com", app_metadata={"provider": "email", "credits": 5})


@pytest.fixture
def pro_user():
    return IdentityUser(id="user-pro", email="pro@exemplo.com", app_metadata={"plan": "pro", "credits": 0})


@pytest.fixture
def fake_identity(admin_user, regular_user, pro_user):
    client = FakeIdentityClient()
    client.add(admin_user, token="admin-token")
    client.add(regular_user, token="user-token")
    client.add(pro_user, token="pro-token")
    return client


@pytest.fixture
def admin_policy():
    return AdminPolicy([ADMIN_EMAIL])


@pytest.fixture
def admin_caller(admin_user):
    return Caller(user=admin_user, access_token="admin-token")


@pytest.fixture
def user_caller(regular_user):
    return Caller(user=regular_user, access_token="user-token")


@pytest.fixture
def wired_container(fake_identity):
    """Contêiner global com armazenamento em memória, identidade falsa e sem latência"""
    with container.usage_store.override(providers.Singleton(InMemoryKeyValueStore)), \
            container.identity_client.override(fake_identity), \
            container.admin_policy.override(AdminPolicy([ADMIN_EMAIL])), \
            container.config.recipe.latency_seconds.override(0.0):
        yield container
