import pytest

from app.enum import Unit
from app.recipe.model import Ingredient
from app.recipe.parser import is_liquid, parse_ingredients, parse_line


@pytest.mark.parametrize("line, expected", [
    ("2 ovos", Ingredient(name="ovos", quantity=2, unit=Unit.UNITS)),
    ("200 g farinha", Ingredient(name="farinha", quantity=200, unit=Unit.GRAMS)),
    ("1 xícara leite", Ingredient(name="leite", quantity=240, unit=Unit.MILLILITERS)),
    ("1 xicara de açúcar", Ingredient(name="açúcar", quantity=120, unit=Unit.GRAMS)),
    ("2 colheres de azeite", Ingredient(name="azeite", quantity=30, unit=Unit.MILLILITERS)),
    ("3 colheres açúcar", Ingredient(name="açúcar", quantity=30, unit=Unit.GRAMS)),
    ("500 ml caldo de legumes", Ingredient(name="caldo de legumes", quantity=500, unit=Unit.MILLILITERS)),
    ("250g manteiga", Ingredient(name="manteiga", quantity=250, unit=Unit.GRAMS)),
    ("tomate", Ingredient(name="tomate", quantity=100, unit=Unit.GRAMS)),
    ("suco de laranja", Ingredient(name="suco de laranja", quantity=100, unit=Unit.MILLILITERS)),
])
def test_parse_line_known_formats(line, expected):
    """Formatos comuns devem ser normalizados para g, ml ou unid."""
    assert parse_line(line) == expected


def test_parse_line_accepts_decimal_comma():
    """Vírgula decimal vira ponto antes de extrair a quantidade."""
    assert parse_line("1,5 xícara leite") == Ingredient(name="leite", quantity=360, unit=Unit.MILLILITERS)


def test_parse_line_rounds_eggs_half_up_and_never_below_one():
    """Ovos são contados em unidades, arredondando .5 para cima e com mínimo 1."""
    assert parse_line("2.5 ovos").quantity == 3
    assert parse_line("0.2 ovo").quantity == 1


def test_parse_line_egg_takes_precedence_over_cup():
    """Palavra de ovo vence a de xícara."""
    ingredient = parse_line("1 xícara de ovos batidos")
    assert ingredient.unit == Unit.UNITS
    assert ingredient.quantity == 1


def test_parse_line_keeps_original_casing_and_matches_accents_case_insensitively():
    """Unidades são removidas sem diferenciar maiúsculas; o nome mantém a grafia original."""
    assert parse_line("1 XÍCARA Leite") == Ingredient(name="Leite", quantity=240, unit=Unit.MILLILITERS)
    assert parse_line("2 Ovos Caipira").name == "Ovos Caipira"


def test_parse_line_does_not_treat_words_starting_with_g_as_grams():
    """'gengibre' não é o token 'g'; cai na heurística padrão (x100)."""
    assert parse_line("1 gengibre") == Ingredient(name="gengibre", quantity=100, unit=Unit.GRAMS)


@pytest.mark.parametrize("line, expected_name", [
    ("3", "ingrediente"),
    ("2 xícaras", "ingrediente"),
    ("200 ml", "líquido"),
])
def test_parse_line_uses_placeholder_when_name_is_empty(line, expected_name):
    """Nome vazio é substituído por um genérico coerente com a unidade."""
    assert parse_line(line).name == expected_name


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_parse_line_blank_returns_none(line):
    """Linha vazia não gera ingrediente."""
    assert parse_line(line) is None


@pytest.mark.parametrize("line", [
    "x", "!!", "1", "0 g sal", "12 unid limão", "meia cebola", "3 copos água", "1 cup milk", "abc 4,2 def",
])
def test_parse_line_is_total_over_non_empty_input(line):
    """Qualquer linha não vazia vira ingrediente com nome e quantidade válidos."""
    ingredient = parse_line(line)

    assert ingredient is not None
    assert ingredient.name
    if ingredient.unit == Unit.UNITS:
        assert ingredient.quantity >= 1
    else:
        assert ingredient.quantity >= 0


def test_parse_ingredients_skips_blank_lines():
    """Linhas em branco entre ingredientes são ignoradas."""
    # Given
    text = "2 ovos\n\n   \n200 g farinha\r\n1 xícara leite\n"

    # When
    ingredients = parse_ingredients(text)

    # Then
    assert [i.name for i in ingredients] == ["ovos", "farinha", "leite"]


def test_is_liquid_matches_substrings():
    assert is_liquid("Leite de coco")
    assert is_liquid("molho shoyu")
    assert not is_liquid("farinha")
