"""Pytest configuration and shared fixtures."""

import pytest

# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def pancakes_recipe():
    """Breakfast recipe with common baking ingredients."""
    return {
        "id": "recipe-pancakes",
        "name": "Fluffy Pancakes",
        "ingredients": [
            {"name": "Flour", "amount": "2 cups"},
            {"name": "Milk", "amount": "1 1/2 cups"},
            {"name": "Eggs", "amount": "2 large"},
            {"name": "Salt", "amount": "to taste"},
        ],
    }


@pytest.fixture
def pasta_recipe():
    """Dinner recipe that overlaps with the pancakes on salt."""
    return {
        "id": "recipe-pasta",
        "name": "Tomato Pasta",
        "ingredients": [
            {"name": "Spaghetti", "amount": "500g"},
            {"name": "Tomato", "amount": "3"},
            {"name": "Garlic", "amount": "2 cloves"},
            {"name": "Salt", "amount": "1 tsp"},
            {"name": "Olive oil", "amount": "2 tbsp"},
        ],
    }


@pytest.fixture
def salad_recipe():
    """Lunch recipe with sloppy ingredient data."""
    return {
        "id": "recipe-salad",
        "name": "Summer Salad",
        "ingredients": [
            {"name": "tomato ", "amount": "2"},
            {"name": "", "amount": "1 cup"},
            None,
            {"name": "Olive Oil", "amount": 3},
            {"amount": "1 tsp"},
            {"name": "undefined", "amount": "1"},
        ],
    }


@pytest.fixture
def snack_recipe():
    """Small snack recipe."""
    return {
        "id": "recipe-snack",
        "name": "Apple Slices",
        "ingredients": [
            {"name": "Apple", "amount": "1"},
            {"name": "Peanut butter", "amount": "2 tbsp"},
        ],
    }


# =============================================================================
# Meal Plan Fixtures
# =============================================================================


@pytest.fixture
def meal_plan(pancakes_recipe, pasta_recipe, salad_recipe, snack_recipe):
    """Two-day meal plan covering every slot type."""
    return {
        "2026-10-21": {
            "dinner": pasta_recipe,
            "snacks": [snack_recipe],
        },
        "2026-10-20": {
            "breakfast": pancakes_recipe,
            "lunch": salad_recipe,
            "snacks": [snack_recipe, snack_recipe],
        },
    }


@pytest.fixture
def empty_meal_plan():
    """Meal plan with days but no assigned recipes."""
    return {
        "2026-10-20": {},
        "2026-10-21": {"breakfast": None, "lunch": None, "dinner": None, "snacks": []},
    }
