"""
Constantes globais e tabelas de regras do gerador de receitas
"""

from app.enum import Difficulty, Style


class RecipeConfig:
    """Parâmetros do motor de receitas"""
    BASE_SERVINGS = 2
    MIN_SCALE_FACTOR = 0.25

    # Conversões aproximadas
    CUP_ML = 240
    CUP_G = 120
    SPOON_ML = 15
    SPOON_G = 10
    DEFAULT_MULTIPLIER = 100

    BASE_MINUTES = 10
    MINUTES_PER_INGREDIENT = 4
    MAX_INGREDIENT_MINUTES = 30
    MIN_MINUTES = 10

    MAX_CONCISE_STEPS = 6
    DEFAULT_TITLE = "Receita"
    PRO_IMAGE_URL = "/gourmet-food-photography.png"
    LATENCY_SECONDS = 0.5


class UsageConfig:
    """Cota mensal e armazenamento local"""
    STORAGE_PREFIX = "v0-chef"
    FREE_LIMIT = 25
    DEFAULT_CREDITS = 3
    MAX_FAVORITES = 100
    DEFAULT_OWNER = "anonymous"


class AdminConfig:
    """Administração de planos e créditos"""
    PAGE_SIZE = 50
    SEARCH_MAX_PAGES = 5
    SEARCH_MAX_RESULTS = 20
    BOOTSTRAP_MAX_PAGES = 10
    MAX_CREDITS = 1_000_000


class IdentityConfig:
    """Provedor de identidade (Supabase Auth)"""
    TIMEOUT = 10.0


# Palavras-chave do parser
LIQUID_KEYWORDS = ("água", "leite", "óleo", "caldo", "vinho", "molho", "suco", "creme", "azeite", "coco", "shoyu")
EGG_KEYWORDS = ("ovo", "ovos")
CUP_KEYWORDS = ("xícara", "xicara", "xicaras", "xícaras", "cup", "copo", "copos")
SPOON_KEYWORDS = ("colher",)

UNIT_WORDS_PATTERN = (
    r"\b(?:g|gramas?|ml|mililitros?|x[ií]c(?:ar)?as?|colher(?:es)?"
    r"|un(?:id)?|unidades?|copos?|cups?)\b"
)
MILLILITER_TOKEN_PATTERN = r"(?:(?<=\d)|\b)ml\b"
GRAM_TOKEN_PATTERN = r"(?:(?<=\d)|\b)g\b"
NAME_CONNECTOR_PATTERN = r"^(?:de|of)\s+"

DEFAULT_INGREDIENT_NAME = "ingrediente"
DEFAULT_LIQUID_NAME = "líquido"
DEFAULT_EGG_NAME = "ovo"


# Estimativa de tempo por estilo (minutos)
TIME_ADJUSTMENTS = {
    Style.QUICK: -8,
    Style.GOURMET: 15,
    Style.HEALTHY: 0,
    Style.LEFTOVERS: -4,
    Style.COMFORT: 5,
}

# (tempo máximo, passos máximos, dificuldade), avaliados em ordem
DIFFICULTY_BANDS = (
    (20, 5, Difficulty.EASY),
    (40, 9, Difficulty.MEDIUM),
)


# Passos: preparo conforme utensílio
PREP_STEPS = (
    (("airfryer", "air fryer"), "Preaqueça a airfryer a 180°C por 5 minutos."),
    (("forno",), "Preaqueça o forno a 200°C."),
)
DEFAULT_PREP_STEP = "Separe os utensílios e higienize os ingredientes."

WET_DRY_STEPS = (
    "Em uma tigela, misture os secos. Em outra, os líquidos.",
    "Incorpore os líquidos aos secos aos poucos, mexendo até ficar homogêneo.",
)
GENERIC_MIX_STEPS = (
    "Corte e organize os ingredientes conforme necessário.",
    "Aqueça uma panela média e adicione gordura (óleo/azeite).",
)

FLOUR_PATTERN = r"farinha|trigo"
STEP_PROTEIN_PATTERN = r"frango|carne|peixe|tofu|feijão"
EGG_NAME_PATTERN = r"ovo"

PROTEIN_STEP = "Doure a proteína por 3–5 minutos, tempere com sal e pimenta."
EGG_STEP = "Adicione os ovos e mexa até atingir o ponto desejado."
SEASONING_STEP = "Cozinhe por mais alguns minutos, ajustando sal e acidez a gosto."

FINISH_STEPS = {
    Style.GOURMET: (
        "Finalize com um fio de azeite e ervas frescas.",
        "Emprate com cuidado e sirva imediatamente.",
    ),
    Style.HEALTHY: ("Finalize com sementes ou folhas verdes para frescor.",),
    Style.LEFTOVERS: ("Aproveite sobras para adicionar textura (croutons, legumes assados).",),
    Style.COMFORT: ("Sirva bem quente, em porções generosas, acompanhado de pão ou arroz.",),
}
DEFAULT_FINISH_STEPS = ("Sirva quente.",)


# Substituições: (padrão do nome, restrições que ativam a regra, sugestão)
SUBSTITUTION_RULES = (
    (r"leite", ("sem lactose",), "Leite por bebida vegetal (aveia, amêndoas)."),
    (r"farinha", ("sem glúten",), "Farinha de trigo por farinha de arroz/aveia (sem glúten)."),
    (r"manteiga|queijo", ("vegano",), "Laticínios por alternativas vegetais."),
    (r"frango|carne|peixe", ("vegano", "vegetar"), "Proteína animal por grão-de-bico/tofu."),
    (r"açucar|açúcar|acucar", ("sem açúcar",), "Açúcar por eritritol ou xilitol."),
)
FALLBACK_SUBSTITUTION = "Ajuste sal e acidez com limão ou vinagre conforme o paladar."


BASE_VARIATIONS = (
    "Adicione ervas frescas (salsinha, cebolinha, coentro) no final.",
    "Inclua um toque cítrico (raspas de limão) para realçar sabores.",
)
STYLE_VARIATIONS = {
    Style.QUICK: "Use airfryer ou panela única para reduzir tempo e louça.",
    Style.GOURMET: "Finalize com manteiga noisette ou redução balsâmica.",
    Style.HEALTHY: "Troque carboidratos refinados por integrais.",
    Style.LEFTOVERS: "Transforme em recheio de sanduíche ou tortilha no dia seguinte.",
    Style.COMFORT: "Engrosse o molho com um roux leve para textura cremosa.",
}


# Tags condicionais, na ordem em que são adicionadas
TAG_RULES = (
    ("proteína", r"frango|carne|peixe"),
    ("carboidrato", r"arroz|massa|macarrão|batata|pão"),
    ("vegetais", r"legume|verdura|tomate|cenoura|abobrinha|brocolis|brócolis"),
)
RESTRICTION_SEPARATOR_PATTERN = r"[;,]"
