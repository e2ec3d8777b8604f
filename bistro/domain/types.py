# bistro/domain/types.py
from enum import Enum
from typing import Dict


class CuisineType(str, Enum):
    # Values double as report labels ("ITALIAN: 2")
    ITALIAN = "ITALIAN"
    MEXICAN = "MEXICAN"
    CHINESE = "CHINESE"
    INDIAN = "INDIAN"
    AMERICAN = "AMERICAN"
    FRENCH = "FRENCH"
    OTHER = "OTHER"


class ServingStyle(str, Enum):
    PLATED = "PLATED"
    FAMILY_STYLE = "FAMILY_STYLE"
    BUFFET = "BUFFET"


class FlavorProfile(str, Enum):
    SWEET = "SWEET"
    BITTER = "BITTER"
    SOUR = "SOUR"
    SALTY = "SALTY"
    UMAMI = "UMAMI"


class CookingMethod(str, Enum):
    GRILLED = "GRILLED"
    BAKED = "BAKED"
    BOILED = "BOILED"
    FRIED = "FRIED"
    STEAMED = "STEAMED"
    RAW = "RAW"


class SideDishCategory(str, Enum):
    GRAIN = "GRAIN"
    PASTA = "PASTA"
    LEGUME = "LEGUME"
    BREAD = "BREAD"
    SALAD = "SALAD"
    SOUP = "SOUP"
    STARCHES = "STARCHES"
    VEGETABLE = "VEGETABLE"


# ---------- Libellés d'affichage ----------

SERVING_STYLE_LABELS: Dict[ServingStyle, str] = {
    ServingStyle.PLATED: "Plated",
    ServingStyle.FAMILY_STYLE: "Family Style",
    ServingStyle.BUFFET: "Buffet",
}

FLAVOR_PROFILE_LABELS: Dict[FlavorProfile, str] = {
    FlavorProfile.SWEET: "Sweet",
    FlavorProfile.BITTER: "Bitter",
    FlavorProfile.SOUR: "Sour",
    FlavorProfile.SALTY: "Salty",
    FlavorProfile.UMAMI: "Umami",
}

COOKING_METHOD_LABELS: Dict[CookingMethod, str] = {
    CookingMethod.GRILLED: "Grilled",
    CookingMethod.BAKED: "Baked",
    CookingMethod.BOILED: "Boiled",
    CookingMethod.FRIED: "Fried",
    CookingMethod.STEAMED: "Steamed",
    CookingMethod.RAW: "Raw",
}

SIDE_DISH_CATEGORY_LABELS: Dict[SideDishCategory, str] = {
    SideDishCategory.GRAIN: "Grain",
    SideDishCategory.PASTA: "Pasta",
    SideDishCategory.LEGUME: "Legume",
    SideDishCategory.BREAD: "Bread",
    SideDishCategory.SALAD: "Salad",
    SideDishCategory.SOUP: "Soup",
    SideDishCategory.STARCHES: "Starches",
    SideDishCategory.VEGETABLE: "Vegetable",
}


def parse_cuisine(text: str) -> CuisineType:
    """Exact upper-case match; anything else falls back to OTHER.

    >>> parse_cuisine("FRENCH")
    <CuisineType.FRENCH: 'FRENCH'>
    >>> parse_cuisine("french")
    <CuisineType.OTHER: 'OTHER'>
    """
    try:
        return CuisineType(text)
    except ValueError:
        return CuisineType.OTHER
