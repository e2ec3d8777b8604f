"""
Chargement de la carte depuis un fichier CSV.

Format (la première ligne est un en-tête ignoré) ::

    DISHTYPE,name,ing1;ing2;...,prepTime,price,CUISINE,attr1;attr2;...

Attributs par type de plat :

- APPETIZER  : style;spiciness;vegetarian
- MAINCOURSE : method;protein;side1:CATEGORY|side2:CATEGORY;glutenFree
- DESSERT    : flavor;sweetness;nuts
"""

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Union

from pydantic import ValidationError

from bistro.domain.dish import Appetizer, Dessert, Dish, MainCourse, SideDish
from bistro.domain.types import (
    CookingMethod,
    FlavorProfile,
    ServingStyle,
    SideDishCategory,
    parse_cuisine,
)

logger = logging.getLogger(__name__)

_ITEM_SEP = ";"
_SIDE_SEP = "|"
_SIDE_FIELD_SEP = ":"
_TRUE = "true"


def _split(field: str, sep: str = _ITEM_SEP) -> List[str]:
    return [part for part in field.split(sep) if part != ""] if field else []


def _serving_style(text: str) -> ServingStyle:
    if text in (ServingStyle.FAMILY_STYLE.value, ServingStyle.BUFFET.value):
        return ServingStyle(text)
    return ServingStyle.PLATED


def _flavor_profile(text: str) -> FlavorProfile:
    try:
        return FlavorProfile(text)
    except ValueError:
        return FlavorProfile.SWEET


def _cooking_method(text: str) -> CookingMethod:
    try:
        return CookingMethod(text)
    except ValueError:
        logger.warning("Unknown cooking method %r, using GRILLED", text)
        return CookingMethod.GRILLED


def _side_dishes(field: str) -> List[SideDish]:
    """'Rice:GRAIN|Salad:SALAD' -> [SideDish(Rice, GRAIN), SideDish(Salad, SALAD)]"""
    sides: List[SideDish] = []
    for chunk in _split(field, _SIDE_SEP):
        name, _, category = chunk.partition(_SIDE_FIELD_SEP)
        sides.append(SideDish(name=name, category=SideDishCategory(category)))
    return sides


def _appetizer(common: dict, attrs: Sequence[str]) -> Appetizer:
    return Appetizer(
        **common,
        serving_style=_serving_style(attrs[0]),
        spiciness_level=int(attrs[1]),
        vegetarian=attrs[2] == _TRUE,
    )


def _main_course(common: dict, attrs: Sequence[str]) -> MainCourse:
    return MainCourse(
        **common,
        cooking_method=_cooking_method(attrs[0]),
        protein_type=attrs[1],
        side_dishes=_side_dishes(attrs[2]),
        gluten_free=attrs[3] == _TRUE,
    )


def _dessert(common: dict, attrs: Sequence[str]) -> Dessert:
    return Dessert(
        **common,
        flavor_profile=_flavor_profile(attrs[0]),
        sweetness_level=int(attrs[1]),
        contains_nuts=attrs[2] == _TRUE,
    )


DISH_BUILDERS: Dict[str, Callable[[dict, Sequence[str]], Dish]] = {
    Appetizer.DISH_TYPE: _appetizer,
    MainCourse.DISH_TYPE: _main_course,
    Dessert.DISH_TYPE: _dessert,
}


def parse_dish_row(row: Sequence[str]) -> Optional[Dish]:
    """Build one dish from a CSV row; None for an unknown dish type.

    Raises IndexError / ValueError on missing or malformed columns.
    The attribute column keeps empty items (``"FRIED;Beef;;false"`` means
    no side dishes).
    """
    dish_type, name, ingredients, prep_time, price, cuisine = row[:6]
    attrs = row[6].split(_ITEM_SEP) if len(row) > 6 else []

    builder = DISH_BUILDERS.get(dish_type)
    if builder is None:
        logger.warning("Unknown dish type %r for %r, row skipped", dish_type, name)
        return None

    common = {
        "name": name,
        "ingredients": _split(ingredients),
        "prep_time": int(prep_time),
        "price": float(price),
        "cuisine_type": parse_cuisine(cuisine),
    }
    return builder(common, attrs)


def load_dishes_csv(filepath: Union[str, Path]) -> List[Dish]:
    """Charge les plats d'un fichier CSV de carte.

    Paramètres
    ----------
    filepath : str | Path
        Chemin vers le fichier CSV (en-tête sur la première ligne).

    Retour
    ------
    List[Dish]
        Les plats dans l'ordre du fichier (lignes de type inconnu ignorées).

    Lève
    ----
    FileNotFoundError
        Si le fichier n'existe pas.
    ValueError
        À la première ligne mal formée (colonne manquante, nombre invalide,
        catégorie d'accompagnement inconnue) ; le chargement s'arrête là.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Menu CSV file not found: {path}")

    dishes: List[Dish] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            try:
                dish = parse_dish_row(row)
            except (IndexError, ValueError, ValidationError) as e:
                raise ValueError(f"Invalid dish row at {path}:{reader.line_num}: {e}") from e
            if dish is not None:
                dishes.append(dish)

    logger.info("Loaded %d dishes from %s", len(dishes), path)
    return dishes
