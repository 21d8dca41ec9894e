from app.exception import ChefException, ErrorCode


class RecipeErrorCode(ErrorCode):
    EMPTY_INGREDIENTS = ("RECIPE_001", "Adicione ao menos um ingrediente.", 400)
    RECIPE_GENERATE_FAILED = ("RECIPE_002", "Falha ao gerar a receita. Tente novamente.", 500)


class RecipeException(ChefException):
    def __init__(self, code: RecipeErrorCode):
        super().__init__(code)
        self.code = code
