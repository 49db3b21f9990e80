from cookmind.models.recipe import Recipe
from cookmind.models.substitution import Substitution
from cookmind.services.recipe_adapter import adapt_recipe, apply_substitutions


STEPS = [
    "Kook de pasta 10 minuten.",
    "Voeg de Room en het spek toe.",
    "Serveer met extra room.",
]


def test_no_substitutions_returns_copy():
    result = apply_substitutions(STEPS, [])
    assert result == STEPS
    assert result is not STEPS


def test_replaces_case_insensitive():
    result = apply_substitutions(STEPS, [Substitution(original="room", substitute="kokosmelk")])
    assert result == [
        "Kook de pasta 10 minuten.",
        "Voeg de kokosmelk en het spek toe.",
        "Serveer met extra kokosmelk.",
    ]


def test_adjustments_appended_to_every_step():
    sub = Substitution(original="spek", substitute="ham", adjustments="bak 2 minuten korter")
    result = apply_substitutions(STEPS, [sub])
    assert result[1] == "Voeg de Room en het ham toe. (bak 2 minuten korter)"
    assert all(step.endswith("(bak 2 minuten korter)") for step in result)


def test_substitutions_applied_in_order():
    subs = [
        Substitution(original="room", substitute="zure room"),
        Substitution(original="pasta", substitute="rijst"),
    ]
    result = apply_substitutions(STEPS, subs)
    assert result[0] == "Kook de rijst 10 minuten."
    assert result[2] == "Serveer met extra zure room."


def test_regex_characters_are_literal():
    steps = ["Gebruik verse tomaten (meer) naar smaak."]
    sub = Substitution(original="verse tomaten (meer)", substitute="paprikapuree")
    assert apply_substitutions(steps, [sub]) == ["Gebruik paprikapuree naar smaak."]


def test_adapt_recipe_renames_ingredients_and_keeps_original():
    recipe = Recipe(
        id=7,
        title="Pasta met room",
        prep_time=20,
        ingredients=[
            {"name": "pasta", "amount": 200, "unit": "gram"},
            {"name": "Room", "amount": 2, "unit": "dl"},
        ],
        steps=STEPS,
    )

    adapted = adapt_recipe(recipe, [Substitution(original="room", substitute="kokosmelk")])

    assert adapted.ingredient_names == ["pasta", "kokosmelk"]
    assert adapted.ingredients[1].amount == 2
    assert adapted.steps[1] == "Voeg de kokosmelk en het spek toe."
    assert adapted.id == 7
    assert recipe.ingredient_names == ["pasta", "Room"]
    assert recipe.steps == STEPS
