"""Tests for the shopping list API routes."""

import pytest
from fastapi.testclient import TestClient

from grocerylist.main import app


@pytest.fixture
def client():
    """Test client for the API."""
    return TestClient(app)


class TestCreateShoppingList:
    """Tests for POST /api/v1/shopping-list/."""

    def test_builds_list(self, client, meal_plan):
        """Test building a list from a meal plan."""
        response = client.post("/api/v1/shopping-list/", json={"meal_plan": meal_plan})
        assert response.status_code == 200

        data = response.json()
        assert data["meal_items_count"] == 10
        assert data["custom_items_count"] == 0
        assert data["total_count"] == 10
        assert data["items"][0] == {"name": "Flour", "amount": "2 cups"}
        assert {"name": "Salt", "amount": "1 tsp + to taste"} in data["items"]

    def test_custom_items_appended(self, client, snack_recipe):
        """Test that custom items follow the meal items."""
        response = client.post(
            "/api/v1/shopping-list/",
            json={
                "meal_plan": {"2026-10-20": {"snacks": [snack_recipe]}},
                "custom_items": ["Dish soap"],
            },
        )
        assert response.status_code == 200
        assert response.json()["items"] == [
            {"name": "Apple", "amount": "1"},
            {"name": "Peanut butter", "amount": "2 tbsp"},
            {"name": "Dish soap", "amount": "1 piece"},
        ]

    def test_today_prunes_past_days(self, client, pasta_recipe, snack_recipe):
        """Test that days before 'today' are ignored when it is given."""
        plan = {
            "2026-10-18": {"dinner": pasta_recipe},
            "2026-10-19": {"snacks": [snack_recipe]},
        }
        response = client.post(
            "/api/v1/shopping-list/",
            json={"meal_plan": plan, "today": "2026-10-19", "plan_id": "plan-1"},
        )
        assert response.status_code == 200
        assert [item["name"] for item in response.json()["items"]] == ["Apple", "Peanut butter"]

    def test_empty_body(self, client):
        """Test that an empty request gives an empty list."""
        response = client.post("/api/v1/shopping-list/", json={})
        assert response.status_code == 200
        assert response.json() == {
            "items": [],
            "meal_items_count": 0,
            "custom_items_count": 0,
            "total_count": 0,
        }

    def test_sloppy_plan_is_tolerated(self, client):
        """Test that malformed plan contents do not fail the request."""
        plan = {
            "2026-10-20": {"dinner": {"ingredients": [None, {"name": ""}, {"name": "Rice"}]}},
            "2026-10-21": "nothing planned",
        }
        response = client.post("/api/v1/shopping-list/", json={"meal_plan": plan})
        assert response.status_code == 200
        assert response.json()["items"] == [{"name": "Rice", "amount": "1 piece"}]

    def test_plan_must_be_object(self, client):
        """Test that a non-object meal plan is rejected by validation."""
        response = client.post("/api/v1/shopping-list/", json={"meal_plan": ["2026-10-20"]})
        assert response.status_code == 422


class TestExportShoppingList:
    """Tests for POST /api/v1/shopping-list/export."""

    def test_export_text(self, client, snack_recipe):
        """Test exporting the list as plain text."""
        response = client.post(
            "/api/v1/shopping-list/export",
            json={
                "meal_plan": {"2026-10-20": {"lunch": snack_recipe}},
                "custom_items": ["Napkins"],
            },
        )
        assert response.status_code == 200
        assert response.json() == {
            "text": "• Apple - 1\n• Peanut butter - 2 tbsp\n• Napkins - 1 piece",
            "total_count": 3,
        }


class TestRoutes:
    """Tests for the published route table."""

    def test_shopping_list_paths(self):
        """Test that both routes are published with a POST operation."""
        paths = app.openapi()["paths"]
        assert "post" in paths["/api/v1/shopping-list/"]
        assert "post" in paths["/api/v1/shopping-list/export"]

    def test_export_schema_fields(self):
        """Test that the export response carries the text and the item count."""
        schema = app.openapi()["components"]["schemas"]["ShoppingListExportResponse"]
        assert set(schema["properties"]) == {"text", "total_count"}
