"""
Règles de substitution / suppression pour les demandes alimentaires.

Les fonctions sont pures : elles renvoient de nouvelles listes et ne
modifient jamais celles reçues.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Sequence

# Pas d'import du package domain à l'exécution (domain.dish importe ce module)
if TYPE_CHECKING:
    from bistro.domain.ingredient import Ingredient


def substitute_ingredients(
    ingredients: Sequence[Ingredient],
    disallowed: Iterable[str],
    substitutes: Sequence[str],
) -> List[Ingredient]:
    """Replace disallowed ingredients in order, drop the overflow.

    The n-th disallowed ingredient found is renamed to ``substitutes[n]``
    (quantities and price are kept); once the substitutes are exhausted
    the remaining disallowed ingredients are removed.

    Example
    -------
    >>> from bistro.domain.ingredient import Ingredient
    >>> ings = [Ingredient(name=n) for n in ("Chicken", "Rice", "Beef", "Pork")]
    >>> [i.name for i in substitute_ingredients(ings, {"Chicken", "Beef", "Pork"}, ("Beans", "Mushrooms"))]
    ['Beans', 'Rice', 'Mushrooms']
    """
    banned = set(disallowed)
    result: List[Ingredient] = []
    occurrence = 0
    for ingredient in ingredients:
        if ingredient.name not in banned:
            result.append(ingredient)
            continue
        if occurrence < len(substitutes):
            result.append(
                ingredient.model_copy(update={"name": substitutes[occurrence]})
            )
        occurrence += 1
    return result


def strip_ingredients(
    ingredients: Sequence[Ingredient], disallowed: Iterable[str]
) -> List[Ingredient]:
    """Drop every ingredient whose name is disallowed."""
    banned = set(disallowed)
    return [ingredient for ingredient in ingredients if ingredient.name not in banned]


def strip_side_dishes(side_dishes: Sequence, categories: Iterable[str]) -> list:
    banned = {getattr(category, "value", category) for category in categories}
    return [side for side in side_dishes if side.category.value not in banned]


def lower_level(level: int, step: int) -> int:
    """Decrease an intensity level (spiciness, sweetness), floor at 0."""
    return max(0, int(level) - int(step))
