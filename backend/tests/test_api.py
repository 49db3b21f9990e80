from fastapi.testclient import TestClient

from cookmind.main import app
from cookmind.utils.constants import FALLBACK_SUGGESTION


client = TestClient(app)


def test_root_and_health():
    res = client.get("/")
    assert res.status_code == 200
    assert res.json()["status"] == "running"

    res = client.get("/health")
    assert res.status_code == 200
    data = res.json()
    assert data["status"] == "healthy"
    assert data["substitution_entries"] > 0


def test_match_with_suggestions():
    res = client.post(
        "/match",
        json={
            "recipe_ingredients": ["pasta", "kipfilet", "room", "saffraan"],
            "inventory": ["Volkoren pasta"],
        },
    )
    assert res.status_code == 200
    data = res.json()
    assert data["score"] == 25
    assert data["level"] == "low"
    assert data["matched"] == ["pasta"]
    assert data["missing"] == ["kipfilet", "room", "saffraan"]

    # only the first two missing ingredients are looked up
    suggestions = data["suggestions"]
    assert [s["ingredient"] for s in suggestions] == ["kipfilet", "room"]
    assert suggestions[0]["substitutes"] == ["varkenshaas", "tofu", "kalkoenfilet"]
    assert suggestions[0]["found"] is True


def test_match_empty_recipe():
    res = client.post("/match", json={"recipe_ingredients": [], "inventory": ["pasta"]})
    assert res.status_code == 200
    assert res.json()["score"] == 0


def test_match_rejects_unsafe_names():
    res = client.post(
        "/match",
        json={"recipe_ingredients": ["<script>alert(1)</script>"], "inventory": []},
    )
    assert res.status_code == 400


def test_substitutions_found_and_fallback():
    res = client.post("/substitutions", json={"ingredient": "Parmezaanse Kaas"})
    assert res.status_code == 200
    data = res.json()
    assert data["found"] is True
    assert data["options"] == ["pecorino", "cheddar", "mozzarella"]

    res = client.post("/substitutions", json={"ingredient": "saffraan"})
    data = res.json()
    assert data["found"] is False
    assert data["substitutes"] == []
    assert data["options"] == [FALLBACK_SUGGESTION]


def test_substitutions_restricted_to_inventory():
    res = client.post(
        "/substitutions",
        json={"ingredient": "spek", "inventory": ["gerookte ham", "kaas"]},
    )
    data = res.json()
    assert data["substitutes"] == ["ham"]
    assert data["found"] is True

    res = client.post("/substitutions", json={"ingredient": "spek", "inventory": ["kaas"]})
    data = res.json()
    assert data["found"] is False
    assert data["options"] == [FALLBACK_SUGGESTION]


def test_explanation():
    res = client.post("/explanation", json={"original": "room", "substitute": "kokosmelk"})
    assert res.status_code == 200
    data = res.json()
    assert "kokosmelk" in data["explanation"]
    assert "room" in data["explanation"]
    assert data["confidence"] == 85
    assert data["time_adjustment_minutes"] == 2


def test_explanation_requires_both_names():
    res = client.post("/explanation", json={"original": "room"})
    assert res.status_code == 422


def test_rank_recipes():
    recipes = [
        {"id": 1, "title": "Risotto", "prep_time": 40, "tags": ["vegetarisch"],
         "ingredients": [{"name": "risottorijst"}, {"name": "parmezaanse kaas"}]},
        {"id": 2, "title": "Carbonara", "prep_time": 20,
         "ingredients": [{"name": "pasta"}, {"name": "spek"}]},
    ]
    res = client.post(
        "/recipes/rank",
        json={"recipes": recipes, "inventory": ["pasta", "spek", "risottorijst"]},
    )
    assert res.status_code == 200
    data = res.json()
    assert [item["recipe"]["id"] for item in data] == [2, 1]
    assert data[0]["match"]["level"] == "full"
    assert data[1]["match"]["missing"] == ["parmezaanse kaas"]

    res = client.post(
        "/recipes/rank",
        json={"recipes": recipes, "inventory": ["pasta"], "filters": {"vegetarian": True}},
    )
    assert [item["recipe"]["id"] for item in res.json()] == [1]


def test_adapt_recipe():
    recipe = {
        "id": 3,
        "title": "Curry",
        "prep_time": 25,
        "ingredients": [{"name": "kokosmelk", "amount": 400, "unit": "ml"}],
        "steps": ["Giet de kokosmelk erbij."],
    }
    res = client.post(
        "/recipes/adapt",
        json={
            "recipe": recipe,
            "substitutions": [{"original": "kokosmelk", "substitute": "room"}],
        },
    )
    assert res.status_code == 200
    data = res.json()
    assert data["steps"] == ["Giet de room erbij."]
    assert data["ingredients"][0]["name"] == "room"


def test_parse_timer():
    res = client.post("/timers/parse", json={"step": "Laat 1 uur en 5 minuten garen"})
    assert res.status_code == 200
    data = res.json()
    assert data["timer"]["seconds"] == 3900
    assert data["display"] == "1:05:00"

    res = client.post("/timers/parse", json={"step": "Snijd de ui."})
    data = res.json()
    assert data["timer"] is None
    assert data["display"] is None


def test_match_accepts_names_with_equals_sign():
    res = client.post(
        "/match",
        json={"recipe_ingredients": ["bonen=400g"], "inventory": ["bonen"]},
    )
    assert res.status_code == 200
    assert res.json()["score"] == 100

    res = client.post(
        "/match",
        json={"recipe_ingredients": ["onclick=alert(1)"], "inventory": []},
    )
    assert res.status_code == 400


def test_match_reports_basic_inventory_variants():
    res = client.post(
        "/match",
        json={
            "recipe_ingredients": ["pasta", "Zonnebloemolie", "saffraan"],
            "inventory": ["pasta", "Olijfolie"],
        },
    )
    assert res.status_code == 200
    data = res.json()
    assert data["score"] == 33
    assert data["missing"] == ["Zonnebloemolie", "saffraan"]
    assert data["basic_variants"] == {"Zonnebloemolie": "Olijfolie"}


def test_basic_inventory_and_variant_check():
    res = client.get("/inventory/basic")
    assert res.status_code == 200
    assert [item["name"] for item in res.json()] == ["Zout", "Peper", "Boter", "Olijfolie"]

    res = client.post(
        "/inventory/variant-check",
        json={"ingredient": "Margarine", "inventory": ["roomboter"]},
    )
    assert res.status_code == 200
    assert res.json() == {"is_variant": True, "basic_item": "Boter", "variant": "Margarine"}

    res = client.post("/inventory/variant-check", json={"ingredient": "Margarine"})
    assert res.json()["is_variant"] is False


def test_tag_product():
    res = client.post("/products/tag", json={"product_name": "AH Biologisch Rode Paprika"})
    assert res.status_code == 200
    assert res.json() == {"product_name": "AH Biologisch Rode Paprika", "tag": "paprika"}

    res = client.post(
        "/products/tag",
        json={"product_name": "Onbekend product", "categories": ["en:fish, zalm"]},
    )
    assert res.json()["tag"] == "zalm"

    res = client.post("/products/tag", json={"product_name": "AH ui"})
    assert res.json()["tag"] is None

    res = client.post("/products/tag", json={"product_name": "<script>x</script>"})
    assert res.status_code == 400
