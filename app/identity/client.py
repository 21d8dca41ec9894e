import logging
from typing import Any, Dict, List, Optional

import requests

from app.constants import IdentityConfig
from app.identity.exception import IdentityErrorCode, IdentityException
from app.identity.schema import AuthResult, IdentityUser


class IdentityClient:
    """Cliente REST mínimo do Supabase Auth (GoTrue)"""

    def __init__(
        self,
        *,
        base_url: Optional[str],
        service_role_key: Optional[str],
        anon_key: Optional[str] = None,
        timeout: float = IdentityConfig.TIMEOUT,
    ):
        self.logger = logging.getLogger(__name__)
        self.base_url = (base_url or "").rstrip("/")
        self.service_role_key = service_role_key or ""
        self.anon_key = anon_key or self.service_role_key
        self.timeout = timeout

    def _require_config(self) -> None:
        if not self.base_url or not self.service_role_key:
            raise IdentityException(IdentityErrorCode.IDENTITY_NOT_CONFIGURED)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/auth/v1{path}"

    def _service_headers(self) -> Dict[str, str]:
        return {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
        }

    def _user_headers(self, access_token: str) -> Dict[str, str]:
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token}",
        }

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            return resp.text or f"HTTP {resp.status_code}"
        if not isinstance(body, dict):
            return f"HTTP {resp.status_code}"
        return body.get("msg") or body.get("error_description") or body.get("message") or f"HTTP {resp.status_code}"

    def get_user(self, access_token: str) -> Optional[IdentityUser]:
        """Usuário dono do token; None se o token for inválido ou a chamada falhar."""
        self._require_config()
        try:
            resp = requests.get(self._url("/user"), headers=self._user_headers(access_token), timeout=self.timeout)
            resp.raise_for_status()
            return IdentityUser.model_validate(resp.json())
        except Exception as e:
            self.logger.warning(f"Falha ao validar token de acesso: {e}")
            return None

    def get_user_by_id(self, user_id: str) -> Optional[IdentityUser]:
        self._require_config()
        try:
            resp = requests.get(
                self._url(f"/admin/users/{user_id}"),
                headers=self._service_headers(),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return IdentityUser.model_validate(resp.json())
        except Exception as e:
            self.logger.warning(f"Usuário não encontrado | user_id={user_id} | error={e}")
            return None

    def list_users(self, page: int, per_page: int) -> List[IdentityUser]:
        self._require_config()
        try:
            resp = requests.get(
                self._url("/admin/users"),
                params={"page": page, "per_page": per_page},
                headers=self._service_headers(),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return [IdentityUser.model_validate(u) for u in resp.json().get("users", [])]
        except Exception as e:
            self.logger.exception(f"Falha ao listar usuários | page={page}: {e}")
            raise IdentityException(IdentityErrorCode.IDENTITY_REQUEST_FAILED) from e

    def update_app_metadata(self, user_id: str, app_metadata: Dict[str, Any]) -> IdentityUser:
        self._require_config()
        try:
            resp = requests.put(
                self._url(f"/admin/users/{user_id}"),
                json={"app_metadata": app_metadata},
                headers=self._service_headers(),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return IdentityUser.model_validate(resp.json())
        except Exception as e:
            self.logger.exception(f"Falha ao atualizar app_metadata | user_id={user_id}: {e}")
            raise IdentityException(IdentityErrorCode.IDENTITY_REQUEST_FAILED) from e

    def _post_auth(self, path: str, payload: Dict[str, Any], params: Optional[Dict[str, str]] = None) -> AuthResult:
        self._require_config()
        try:
            resp = requests.post(
                self._url(path),
                params=params,
                json=payload,
                headers={"apikey": self.anon_key},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            self.logger.warning(f"Provedor de identidade indisponível | path={path} | error={e}")
            return AuthResult(ok=False, message="Provedor de identidade indisponível.")

        if not resp.ok:
            return AuthResult(ok=False, message=self._error_message(resp))

        body = resp.json() if resp.content else {}
        user_data = body.get("user") or (body if "id" in body else None)
        return AuthResult(
            ok=True,
            access_token=body.get("access_token"),
            refresh_token=body.get("refresh_token"),
            user=IdentityUser.model_validate(user_data) if user_data else None,
        )

    def sign_in(self, email: str, password: str) -> AuthResult:
        return self._post_auth("/token", {"email": email, "password": password}, params={"grant_type": "password"})

    def sign_up(self, email: str, password: str) -> AuthResult:
        return self._post_auth("/signup", {"email": email, "password": password})

    def reset_password(self, email: str, redirect_to: Optional[str] = None) -> AuthResult:
        params = {"redirect_to": redirect_to} if redirect_to else None
        return self._post_auth("/recover", {"email": email}, params=params)

    def sign_out(self, access_token: str) -> AuthResult:
        self._require_config()
        try:
            resp = requests.post(self._url("/logout"), headers=self._user_headers(access_token), timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.warning(f"Provedor de identidade indisponível no logout: {e}")
            return AuthResult(ok=False, message="Provedor de identidade indisponível.")
        if not resp.ok:
            return AuthResult(ok=False, message=self._error_message(resp))
        return AuthResult(ok=True)
