import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import numpy as np

from bistro.data.kitchen_params import RELEASE_ALL_CUISINES, RELEASE_ALL_PREP_TIME
from bistro.domain.dish import DietaryRequest, Dish
from bistro.domain.types import CuisineType
from bistro.utils import round_half_up

logger = logging.getLogger(__name__)


class Kitchen:
    """
    Sac de plats avec statistiques agrégées.

    La somme des temps de préparation et le nombre de plats « élaborés »
    (>= 5 ingrédients et >= 60 min) sont tenus à jour à chaque ajout/retrait.
    Chaque plat garde sa contribution (temps, élaboré) telle qu'enregistrée
    à l'ajout : un plat modifié ensuite (il est partagé avec les postes)
    retire exactement ce qu'il avait ajouté.
    """

    def __init__(self, dishes: Union[List[Dish], None] = None) -> None:
        self._items: List[Dish] = []
        # (prep_time, elaborate) recorded at insertion, parallel to _items
        self._contributions: List[Tuple[int, bool]] = []
        self._total_prep_time = 0
        self._count_elaborate = 0
        for dish in dishes or []:
            self.new_order(dish)

    @classmethod
    def from_csv(cls, filename: Union[str, Path]) -> "Kitchen":
        """Build a kitchen from a menu CSV file (see ``core.csv_loader``)."""
        from bistro.core.csv_loader import load_dishes_csv

        return cls(load_dishes_csv(filename))

    # -------- Conteneur --------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._items)

    def __contains__(self, dish: object) -> bool:
        return any(item == dish for item in self._items)

    def get_current_size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def get_items(self) -> List[Dish]:
        return list(self._items)

    # -------- Ajout / retrait --------

    def new_order(self, dish: Dish) -> bool:
        """Add the dish unless an equal one is already in the kitchen."""
        if dish in self:
            logger.debug("Dish %s already in the kitchen", dish.name)
            return False
        self._items.append(dish)
        contribution = (dish.prep_time, dish.is_elaborate())
        self._contributions.append(contribution)
        self._total_prep_time += contribution[0]
        self._count_elaborate += int(contribution[1])
        return True

    def serve_dish(self, dish: Dish) -> bool:
        """Remove the first dish equal to ``dish``."""
        for index, item in enumerate(self._items):
            if item == dish:
                self._remove_at(index)
                return True
        return False

    def _remove_at(self, index: int) -> Dish:
        dish = self._items.pop(index)
        prep_time, elaborate = self._contributions.pop(index)
        self._total_prep_time -= prep_time
        self._count_elaborate -= int(elaborate)
        return dish

    # -------- Statistiques --------

    def get_prep_time_sum(self) -> int:
        if not self._items:
            return 0
        return self._total_prep_time

    def calculate_avg_prep_time(self) -> int:
        """Average prep time rounded to the nearest integer (0 when empty)."""
        if not self._items:
            return 0
        prep_times = np.array([prep for prep, _ in self._contributions], dtype=float)
        return int(round_half_up(float(prep_times.mean())))

    def elaborate_dish_count(self) -> int:
        if not self._items:
            return 0
        return self._count_elaborate

    def calculate_elaborate_percentage(self) -> float:
        """Share of elaborate dishes in percent, rounded to 2 decimals."""
        if not self._items:
            return 0.0
        return round_half_up(self._count_elaborate / len(self._items) * 100.0, 2)

    def tally_cuisine_types(self, cuisine_type: Union[str, CuisineType]) -> int:
        """Count dishes of the given cuisine (exact upper-case label)."""
        label = getattr(cuisine_type, "value", cuisine_type)
        return sum(1 for dish in self._items if dish.cuisine_type.value == label)

    # -------- Libérations groupées --------

    def _release_where(self, predicate) -> int:
        indexes = [i for i, dish in enumerate(self._items) if predicate(dish)]
        for index in reversed(indexes):
            self._remove_at(index)
        return len(indexes)

    def release_dishes_below_prep_time(self, prep_time: int = RELEASE_ALL_PREP_TIME) -> int:
        """
        Retire les plats dont le temps de préparation est < prep_time.
        prep_time == 0 : retire tout ; prep_time négatif : ignoré.
        Retourne le nombre de plats retirés.
        """
        if prep_time < 0:
            return 0
        if prep_time == RELEASE_ALL_PREP_TIME:
            count = self._release_where(lambda dish: True)
        else:
            count = self._release_where(lambda dish: dish.prep_time < prep_time)
        logger.info("Released %d dishes below %d minutes", count, prep_time)
        return count

    def release_dishes_of_cuisine_type(
        self, cuisine_type: Union[str, CuisineType] = RELEASE_ALL_CUISINES
    ) -> int:
        """
        Retire les plats de la cuisine donnée ("ALL" : tout).
        Une cuisine inconnue ne retire rien.
        """
        label = getattr(cuisine_type, "value", cuisine_type)
        if label == RELEASE_ALL_CUISINES:
            count = self._release_where(lambda dish: True)
        else:
            count = self._release_where(lambda dish: dish.cuisine_type.value == label)
        logger.info("Released %d dishes of cuisine %s", count, label)
        return count

    # -------- Rapport / carte --------

    def kitchen_report(self) -> str:
        """Seven cuisine tallies, then average prep time and elaborate share.

        >>> print(Kitchen().kitchen_report())  # doctest: +NORMALIZE_WHITESPACE
        ITALIAN: 0
        MEXICAN: 0
        CHINESE: 0
        INDIAN: 0
        AMERICAN: 0
        FRENCH: 0
        OTHER: 0
        <BLANKLINE>
        AVERAGE PREP TIME: 0
        ELABORATE DISHES: 0.00%
        """
        lines = [
            f"{cuisine.value}: {self.tally_cuisine_types(cuisine)}"
            for cuisine in CuisineType
        ]
        lines.append("")
        lines.append(f"AVERAGE PREP TIME: {self.calculate_avg_prep_time()}")
        lines.append(f"ELABORATE DISHES: {self.calculate_elaborate_percentage():.2f}%")
        return "\n".join(lines)

    def dietary_adjustment(self, request: DietaryRequest) -> None:
        """Apply the request to every dish in the kitchen."""
        for dish in self._items:
            dish.dietary_accommodations(request)
        # ingredient lists may have shrunk: record the new contributions
        self._contributions = [(dish.prep_time, dish.is_elaborate()) for dish in self._items]
        self._total_prep_time = sum(prep for prep, _ in self._contributions)
        self._count_elaborate = sum(1 for _, elaborate in self._contributions if elaborate)

    def display_menu(self) -> None:
        for dish in self._items:
            dish.display()
