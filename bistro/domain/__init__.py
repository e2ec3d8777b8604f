"""
Domain objects for Bistro.

The domain layer holds the core business objects: ingredients, dishes
(appetizers, main courses, desserts) and kitchen stations.  Records are
pydantic models, stateful containers are plain dataclasses, to ease
unit testing and avoid any side effects.
"""

from .types import CuisineType, ServingStyle, FlavorProfile, CookingMethod, SideDishCategory
from .ingredient import Ingredient
from .dish import Appetizer, Dessert, DietaryRequest, Dish, MainCourse, SideDish
from .station import KitchenStation

__all__ = [
    "CuisineType",
    "ServingStyle",
    "FlavorProfile",
    "CookingMethod",
    "SideDishCategory",
    "Ingredient",
    "Dish",
    "Appetizer",
    "Dessert",
    "MainCourse",
    "SideDish",
    "DietaryRequest",
    "KitchenStation",
]
