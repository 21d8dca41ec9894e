from app.exception import ChefException, ErrorCode


class UsageErrorCode(ErrorCode):
    QUOTA_EXCEEDED = (
        "USAGE_001",
        "Ei, chef! Você já usou seus prompts grátis. Faça upgrade para o Pro ou adicione créditos.",
        402,
    )


class UsageException(ChefException):
    def __init__(self, code: UsageErrorCode):
        super().__init__(code)
        self.code = code
