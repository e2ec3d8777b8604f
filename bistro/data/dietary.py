"""
Dietary rule tables (exact, case-sensitive ingredient names).
"""

from typing import Tuple

NON_VEGETARIAN: Tuple[str, ...] = (
    "Meat",
    "Chicken",
    "Fish",
    "Beef",
    "Pork",
    "Lamb",
    "Shrimp",
    "Bacon",
)

# The first non-vegetarian ingredient becomes Beans, the second Mushrooms,
# any further ones are dropped.
VEGETARIAN_SUBSTITUTES: Tuple[str, ...] = ("Beans", "Mushrooms")

GLUTEN_CONTAINING: Tuple[str, ...] = (
    "Wheat",
    "Flour",
    "Bread",
    "Pasta",
    "Barley",
    "Rye",
    "Oats",
    "Crust",
)

NUTS: Tuple[str, ...] = (
    "Almonds",
    "Walnuts",
    "Pecans",
    "Hazelnuts",
    "Peanuts",
    "Cashews",
    "Pistachios",
)

DAIRY_AND_EGG: Tuple[str, ...] = ("Milk", "Eggs", "Cheese", "Butter", "Cream", "Yogurt")

# Side dish categories (SideDishCategory values) removed for gluten-free requests
GLUTEN_SIDE_CATEGORIES: Tuple[str, ...] = ("GRAIN", "PASTA", "BREAD", "STARCHES")

PLANT_PROTEIN = "Tofu"

LOW_SODIUM_SPICINESS_STEP = 2
LOW_SUGAR_SWEETNESS_STEP = 3
