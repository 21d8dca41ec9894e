from enum import Enum


class Unit(str, Enum):
    GRAMS = "g"
    MILLILITERS = "ml"
    UNITS = "unid"


class Style(str, Enum):
    QUICK = "rápido"
    HEALTHY = "saudável"
    COMFORT = "comfort food"
    GOURMET = "gourmet"
    LEFTOVERS = "sobras"


class OutputFormat(str, Enum):
    SUMMARY = "resumo"
    DETAILED = "detalhado"
    PRINT = "impressao"


class Difficulty(str, Enum):
    EASY = "Fácil"
    MEDIUM = "Média"
    HARD = "Difícil"

    @property
    def rank(self) -> int:
        return list(Difficulty).index(self)


class Plan(str, Enum):
    FREEMIUM = "freemium"
    PRO = "pro"


class CreditOperation(str, Enum):
    ADD = "add"
    SET = "set"
    RESET = "reset"


class Consumption(str, Enum):
    UNLIMITED = "unlimited"
    FREE_PROMPT = "free_prompt"
    CREDIT = "credit"
