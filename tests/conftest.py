"""
Shared fixtures: a few dishes of every type and two stocked stations.
"""

import pytest

from bistro.core.station_manager import StationManager
from bistro.domain.dish import Appetizer, Dessert, Dish, MainCourse, SideDish
from bistro.domain.ingredient import Ingredient
from bistro.domain.station import KitchenStation
from bistro.domain.types import (
    CookingMethod,
    CuisineType,
    FlavorProfile,
    ServingStyle,
    SideDishCategory,
)


@pytest.fixture
def pasta() -> Dish:
    return Dish(
        name="Pasta Primavera",
        ingredients=[
            Ingredient(name="Pasta", quantity=0, required_quantity=1, price=1.2),
            Ingredient(name="Zucchini", quantity=0, required_quantity=1, price=0.8),
        ],
        prep_time=25,
        price=12.5,
        cuisine_type=CuisineType.ITALIAN,
    )


@pytest.fixture
def appetizer() -> Appetizer:
    return Appetizer(
        name="Spicy Bites",
        ingredients=["Chicken", "Flour", "Beef", "Pepper", "Pork", "Bread"],
        prep_time=20,
        price=8.0,
        cuisine_type=CuisineType.MEXICAN,
        serving_style=ServingStyle.FAMILY_STYLE,
        spiciness_level=3,
        vegetarian=False,
    )


@pytest.fixture
def dessert() -> Dessert:
    return Dessert(
        name="Nut Cake",
        ingredients=["Flour", "Almonds", "Eggs", "Sugar", "Milk", "Walnuts"],
        prep_time=50,
        price=6.75,
        cuisine_type=CuisineType.FRENCH,
        flavor_profile=FlavorProfile.SWEET,
        sweetness_level=2,
        contains_nuts=True,
    )


@pytest.fixture
def main_course() -> MainCourse:
    return MainCourse(
        name="Steak Frites",
        ingredients=["Beef", "Butter", "Potato", "Cheese"],
        prep_time=45,
        price=22.0,
        cuisine_type=CuisineType.FRENCH,
        cooking_method=CookingMethod.GRILLED,
        protein_type="Beef",
        side_dishes=[
            SideDish(name="Fries", category=SideDishCategory.STARCHES),
            SideDish(name="Green Salad", category=SideDishCategory.SALAD),
            SideDish(name="Baguette", category=SideDishCategory.BREAD),
        ],
        gluten_free=False,
    )


@pytest.fixture
def stocked_station(pasta) -> KitchenStation:
    station = KitchenStation("Pasta")
    station.assign_dish_to_station(pasta)
    station.replenish_station_ingredients(
        Ingredient(name="Pasta", quantity=4, required_quantity=2, price=1.2)
    )
    station.replenish_station_ingredients(
        Ingredient(name="Zucchini", quantity=2, required_quantity=1, price=0.8)
    )
    return station


@pytest.fixture
def manager(stocked_station, dessert) -> StationManager:
    pastry = KitchenStation("Pastry")
    pastry.assign_dish_to_station(dessert)
    pastry.replenish_station_ingredients(
        Ingredient(name="Flour", quantity=10, required_quantity=1)
    )

    manager = StationManager()
    manager.add_station(stocked_station)
    manager.add_station(pastry)
    manager.add_station(KitchenStation("Grill"))
    return manager
