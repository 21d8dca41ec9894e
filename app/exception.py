from enum import Enum
from typing import Any, Optional


class BusinessException(Exception):
    def __init__(self, code: Enum, *, status_code: int = 400, detail: Optional[Any] = None):
        super().__init__(getattr(code, "message", str(code)))
        self.code = code
        self.status_code = status_code
        self.detail = detail

    @property
    def error_code(self) -> str:
        return getattr(self.code, "code", getattr(self.code, "name", "UNKNOWN"))

    @property
    def error_message(self) -> str:
        return getattr(self.code, "message", str(self.code))

    def to_dict(self) -> dict:
        body = {
            "error_code": self.error_code,
            "error_message": self.error_message,
        }
        if self.detail is not None:
            body["detail"] = self.detail
        return body


class ErrorCode(Enum):
    """Código de erro no formato (code, message, status_code)."""

    def __init__(self, code: str, message: str, status_code: int = 400):
        self._code = code
        self._message = message
        self._status_code = status_code

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code


class ChefException(BusinessException):
    def __init__(self, code: Enum, *, status_code: Optional[int] = None, detail: Optional[Any] = None):
        if status_code is None:
            status_code = getattr(code, "status_code", 400)
        super().__init__(code, status_code=status_code, detail=detail)
