"""Tests for the grocery list, prep and ingredient API routes."""

import pytest
from fastapi.testclient import TestClient

from conftest import make_line
from mealprep.config import Settings
from mealprep.main import app


@pytest.fixture
def client():
    """Test client for the API."""
    return TestClient(app)


class TestGroceryListRoute:
    """Tests for POST /api/v1/grocery-list."""

    def test_generates_grouped_list(self, client, garlic_recipe, weeknight_recipe):
        response = client.post(
            "/api/v1/grocery-list",
            json={"recipes": [garlic_recipe, weeknight_recipe]},
        )
        assert response.status_code == 200

        grocery_list = response.json()["groceryList"]
        produce = grocery_list["Produce Section"]
        assert [item["name"] for item in produce] == ["garlic", "red bell pepper", "zucchini"]
        assert produce[0] == {
            "id": 10,
            "name": "garlic",
            "storeSection": "PRODUCE",
            "quantity": 2.0,
            "unit": "cloves",
        }
        assert grocery_list["Meat & Seafood Aisle"][0]["unit"] == "lbs"

    def test_prefer_metric_override(self, client, weeknight_recipe):
        response = client.post(
            "/api/v1/grocery-list",
            json={"recipes": [weeknight_recipe], "preferMetric": True},
        )
        chicken = response.json()["groceryList"]["Meat & Seafood Aisle"][0]
        assert chicken["quantity"] == 905.0
        assert chicken["unit"] == "g"

    def test_configured_default_preference(self, client, weeknight_recipe, monkeypatch):
        monkeypatch.setattr(
            "mealprep.routers.grocery_list.get_settings",
            lambda: Settings(prefer_metric=True),
        )
        response = client.post("/api/v1/grocery-list", json={"recipes": [weeknight_recipe]})
        flour = response.json()["groceryList"]["Bread or Bakery Aisle"][0]
        assert flour["unit"] == "ml"

    def test_malformed_lines_do_not_fail_request(self, client, garlic_recipe):
        bad = {"ingredients": [make_line(1, "salt", None, "tsp", store_section="SPICES"), "junk"]}
        response = client.post("/api/v1/grocery-list", json={"recipes": [bad, garlic_recipe]})
        assert response.status_code == 200
        assert list(response.json()["groceryList"]) == ["Produce Section"]

    def test_infinite_quantity_does_not_fail_request(self, client):
        body = (
            '{"recipes": [{"ingredients": ['
            '{"id": 1, "name": "flour", "quantity": Infinity, "unit": "cup", "storeSection": "BAKING"},'
            '{"id": 10, "name": "garlic", "quantity": 2, "unit": "clove", "storeSection": "PRODUCE"}'
            "]}]}"
        )
        response = client.post(
            "/api/v1/grocery-list",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 200
        assert list(response.json()["groceryList"]) == ["Produce Section"]

    def test_empty_recipes_rejected(self, client):
        response = client.post("/api/v1/grocery-list", json={"recipes": []})
        assert response.status_code == 400


class TestPrepFormatRoute:
    """Tests for POST /api/v1/preps/format."""

    def test_formats_recipes(self, client, weeknight_recipe):
        response = client.post("/api/v1/preps/format", json={"recipes": [weeknight_recipe]})
        assert response.status_code == 200

        [recipe] = response.json()["recipes"]
        assert recipe["totalTime"] == 55
        assert recipe["ingredientCount"] == 7
        flour = next(i for i in recipe["ingredients"] if i["name"] == "all-purpose flour")
        assert flour["formattedQuantity"] == "2 cups"


class TestIngredientRoutes:
    """Tests for the single-ingredient normalize and display routes."""

    def test_normalize_volume(self, client):
        response = client.post("/api/v1/ingredients/normalize", json={"quantity": 2, "unit": "cup"})
        assert response.status_code == 200
        assert response.json() == {
            "quantity": 2.0,
            "unit": "cup",
            "unitClass": "volume",
            "normalizedQuantity": 32.0,
            "normalizedUnit": "tbsp",
            "converted": True,
            "reason": None,
        }

    def test_normalize_count_falls_back_to_raw(self, client):
        response = client.post("/api/v1/ingredients/normalize", json={"quantity": 3, "unit": "clove"})
        data = response.json()
        assert data["converted"] is False
        assert data["unitClass"] == "count"
        assert data["normalizedQuantity"] is None
        assert data["normalizedUnit"] == "clove"

    def test_normalize_rejects_non_positive_quantity(self, client):
        response = client.post("/api/v1/ingredients/normalize", json={"quantity": 0, "unit": "cup"})
        assert response.status_code == 422

    def test_display_normalized(self, client):
        response = client.post(
            "/api/v1/ingredients/display",
            json={"quantity": 3, "unit": "cup", "normalizedQuantity": 48, "normalizedUnit": "tbsp"},
        )
        assert response.json() == {
            "displayQuantity": 3.0,
            "displayUnit": "cups",
            "formattedQuantity": "3 cups",
        }

    def test_display_metric(self, client):
        response = client.post(
            "/api/v1/ingredients/display",
            json={"quantity": 1, "unit": "kg", "normalizedQuantity": 35.274, "normalizedUnit": "oz", "preferMetric": True},
        )
        assert response.json()["formattedQuantity"] == "1 kg"

    def test_display_without_unit(self, client):
        response = client.post("/api/v1/ingredients/display", json={"quantity": 2})
        assert response.json() == {
            "displayQuantity": 2.0,
            "displayUnit": None,
            "formattedQuantity": None,
        }
