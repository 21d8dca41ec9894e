from app.exception import ChefException, ErrorCode


class EntitlementErrorCode(ErrorCode):
    BAD_REQUEST = ("ENTITLEMENT_001", "Requisição inválida.", 400)
    AMOUNT_MUST_BE_POSITIVE = ("ENTITLEMENT_002", "A quantidade deve ser maior que zero.", 400)
    AMOUNT_MUST_NOT_BE_NEGATIVE = ("ENTITLEMENT_003", "A quantidade não pode ser negativa.", 400)
    FORBIDDEN = ("ENTITLEMENT_004", "Acesso restrito a administradores.", 403)
    USER_NOT_FOUND = ("ENTITLEMENT_005", "Usuário não encontrado.", 404)
    ALREADY_INITIALIZED = ("ENTITLEMENT_006", "Já existe um administrador configurado.", 409)


class EntitlementException(ChefException):
    def __init__(self, code: EntitlementErrorCode):
        super().__init__(code)
        self.code = code
