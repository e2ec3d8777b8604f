"""Plats de la carte : Dish et ses sous-types (entrée, plat, dessert)."""

import logging
from typing import ClassVar, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bistro.data.dietary import (
    DAIRY_AND_EGG,
    GLUTEN_CONTAINING,
    GLUTEN_SIDE_CATEGORIES,
    LOW_SODIUM_SPICINESS_STEP,
    LOW_SUGAR_SWEETNESS_STEP,
    NON_VEGETARIAN,
    NUTS,
    PLANT_PROTEIN,
    VEGETARIAN_SUBSTITUTES,
)
from bistro.data.kitchen_params import (
    ELABORATE_MIN_INGREDIENTS,
    ELABORATE_MIN_PREP_MINUTES,
    UNKNOWN_NAME,
)
from bistro.domain.ingredient import Ingredient
from bistro.domain.types import (
    COOKING_METHOD_LABELS,
    FLAVOR_PROFILE_LABELS,
    SERVING_STYLE_LABELS,
    SIDE_DISH_CATEGORY_LABELS,
    CookingMethod,
    CuisineType,
    FlavorProfile,
    ServingStyle,
    SideDishCategory,
)
from bistro.rules.dietary import (
    lower_level,
    strip_ingredients,
    strip_side_dishes,
    substitute_ingredients,
)

logger = logging.getLogger(__name__)


def is_valid_name(name: str) -> bool:
    """True when every character is an ASCII letter or whitespace (empty is valid)."""
    return all(c.isascii() and (c.isalpha() or c.isspace()) for c in name)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


class DietaryRequest(BaseModel):
    """Demande d'adaptation alimentaire appliquée à un plat ou à toute la cuisine."""

    vegetarian: bool = False
    vegan: bool = False
    gluten_free: bool = False
    nut_free: bool = False
    low_sodium: bool = False
    low_sugar: bool = False


class Dish(BaseModel):
    """Base dish: validated name, ingredients, prep time, price, cuisine.

    Assigning an invalid name (anything but letters and spaces) at any
    time stores ``"UNKNOWN"`` instead.  Two dishes are equal when name,
    cuisine, prep time and price match; ingredients are not compared.
    """

    model_config = ConfigDict(validate_assignment=True)

    DISH_TYPE: ClassVar[str] = "DISH"

    name: str = UNKNOWN_NAME
    ingredients: List[Ingredient] = Field(default_factory=list)
    prep_time: int = 0
    price: float = 0.0
    cuisine_type: CuisineType = CuisineType.OTHER

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value):
        if isinstance(value, str) and is_valid_name(value):
            return value
        logger.debug("Invalid dish name %r, falling back to %s", value, UNKNOWN_NAME)
        return UNKNOWN_NAME

    @field_validator("ingredients", mode="before")
    @classmethod
    def _coerce_ingredient_names(cls, value):
        # Ingredient names alone (menu CSV) become zero-stock records
        if isinstance(value, (list, tuple)):
            return [Ingredient(name=item) if isinstance(item, str) else item for item in value]
        return value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dish):
            return NotImplemented
        return (
            self.name == other.name
            and self.cuisine_type == other.cuisine_type
            and self.prep_time == other.prep_time
            and self.price == other.price
        )

    __hash__ = None

    def ingredient_names(self) -> List[str]:
        return [ingredient.name for ingredient in self.ingredients]

    def is_elaborate(self) -> bool:
        return (
            len(self.ingredients) >= ELABORATE_MIN_INGREDIENTS
            and self.prep_time >= ELABORATE_MIN_PREP_MINUTES
        )

    def detail_lines(self) -> List[str]:
        return [
            f"Dish Name: {self.name}",
            f"Ingredients: {', '.join(self.ingredient_names())}",
            f"Preparation Time: {self.prep_time} minutes",
            f"Price: ${self.price:.2f}",
            f"Cuisine Type: {self.cuisine_type.value}",
        ]

    def display(self) -> None:
        print("\n".join(self.detail_lines()))

    def dietary_accommodations(self, request: DietaryRequest) -> None:
        """A plain dish has no dietary rules."""


class Appetizer(Dish):
    DISH_TYPE: ClassVar[str] = "APPETIZER"

    serving_style: ServingStyle = ServingStyle.PLATED
    spiciness_level: int = 0
    vegetarian: bool = False

    def detail_lines(self) -> List[str]:
        return super().detail_lines() + [
            f"Serving Style: {SERVING_STYLE_LABELS[self.serving_style]}",
            f"Spiciness Level: {self.spiciness_level}",
            f"Vegetarian: {_yes_no(self.vegetarian)}",
        ]

    def dietary_accommodations(self, request: DietaryRequest) -> None:
        """
        - vegetarian : Beans / Mushrooms remplacent les deux premières viandes, le reste est retiré
        - low_sodium : piquant -2 (min 0)
        - gluten_free : retrait des ingrédients avec gluten
        """
        if request.vegetarian:
            self.vegetarian = True
            self.ingredients = substitute_ingredients(
                self.ingredients, NON_VEGETARIAN, VEGETARIAN_SUBSTITUTES
            )
        if request.low_sodium:
            self.spiciness_level = lower_level(
                self.spiciness_level, LOW_SODIUM_SPICINESS_STEP
            )
        if request.gluten_free:
            self.ingredients = strip_ingredients(self.ingredients, GLUTEN_CONTAINING)


class Dessert(Dish):
    DISH_TYPE: ClassVar[str] = "DESSERT"

    flavor_profile: FlavorProfile = FlavorProfile.SWEET
    sweetness_level: int = 0
    contains_nuts: bool = False

    def detail_lines(self) -> List[str]:
        return super().detail_lines() + [
            f"Flavor Profile: {FLAVOR_PROFILE_LABELS[self.flavor_profile]}",
            f"Sweetness Level: {self.sweetness_level}",
            f"Contains Nuts: {_yes_no(self.contains_nuts)}",
        ]

    def dietary_accommodations(self, request: DietaryRequest) -> None:
        if request.nut_free:
            self.contains_nuts = False
            self.ingredients = strip_ingredients(self.ingredients, NUTS)
        if request.low_sugar:
            self.sweetness_level = lower_level(
                self.sweetness_level, LOW_SUGAR_SWEETNESS_STEP
            )
        if request.vegan:
            self.ingredients = strip_ingredients(self.ingredients, DAIRY_AND_EGG)


class SideDish(BaseModel):
    name: str
    category: SideDishCategory


class MainCourse(Dish):
    DISH_TYPE: ClassVar[str] = "MAINCOURSE"

    cooking_method: CookingMethod = CookingMethod.GRILLED
    protein_type: str = UNKNOWN_NAME
    side_dishes: List[SideDish] = Field(default_factory=list)
    gluten_free: bool = False

    def add_side_dish(self, side_dish: SideDish) -> None:
        self.side_dishes.append(side_dish)

    def detail_lines(self) -> List[str]:
        sides = ", ".join(
            f"{side.name} (Category: {SIDE_DISH_CATEGORY_LABELS[side.category]})"
            for side in self.side_dishes
        )
        return super().detail_lines() + [
            f"Cooking Method: {COOKING_METHOD_LABELS[self.cooking_method]}",
            f"Protein Type: {self.protein_type}",
            f"Side Dishes: {sides}",
            f"Gluten-Free: {_yes_no(self.gluten_free)}",
        ]

    def dietary_accommodations(self, request: DietaryRequest) -> None:
        if request.vegetarian:
            self.protein_type = PLANT_PROTEIN
            self.ingredients = substitute_ingredients(
                self.ingredients, NON_VEGETARIAN, VEGETARIAN_SUBSTITUTES
            )
        if request.vegan:
            self.protein_type = PLANT_PROTEIN
            self.ingredients = strip_ingredients(self.ingredients, DAIRY_AND_EGG)
        if request.gluten_free:
            self.gluten_free = True
            self.side_dishes = strip_side_dishes(
                self.side_dishes, GLUTEN_SIDE_CATEGORIES
            )
