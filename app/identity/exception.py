from app.exception import ChefException, ErrorCode


class IdentityErrorCode(ErrorCode):
    IDENTITY_NOT_CONFIGURED = ("IDENTITY_001", "SUPABASE_URL ou SUPABASE_SERVICE_ROLE_KEY não configurados.", 500)
    UNAUTHORIZED = ("IDENTITY_002", "Não autorizado.", 401)
    IDENTITY_REQUEST_FAILED = ("IDENTITY_003", "Falha ao comunicar com o provedor de identidade.", 502)


class IdentityException(ChefException):
    def __init__(self, code: IdentityErrorCode):
        super().__init__(code)
        self.code = code
