# bistro/core/station_manager.py

import logging
from typing import Iterator, List, Optional

from bistro.domain.dish import Dish
from bistro.domain.ingredient import Ingredient
from bistro.domain.station import KitchenStation

logger = logging.getLogger(__name__)


class StationManager:
    """
    Ordered collection of KitchenStation objects.

    Insertion order matters (stations can be moved to the front).  All
    lookups are linear scans by station name; the first match wins.
    Removing a station only unlinks it: dishes shared with other
    stations stay valid.
    """

    def __init__(self) -> None:
        self._stations: List[KitchenStation] = []

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[KitchenStation]:
        return iter(self._stations)

    # --- Registry ---

    def get_stations(self) -> List[KitchenStation]:
        return list(self._stations)

    def station_names(self) -> List[str]:
        return [station.name for station in self._stations]

    def add_station(self, station: KitchenStation) -> bool:
        self._stations.append(station)
        logger.info("Station %s added (%d stations)", station.name, len(self._stations))
        return True

    def _index_of(self, station_name: str) -> Optional[int]:
        for index, station in enumerate(self._stations):
            if station.name == station_name:
                return index
        return None

    def find_station(self, station_name: str) -> Optional[KitchenStation]:
        index = self._index_of(station_name)
        return self._stations[index] if index is not None else None

    def remove_station(self, station_name: str) -> bool:
        index = self._index_of(station_name)
        if index is None:
            return False
        self._stations.pop(index)
        logger.info("Station %s removed", station_name)
        return True

    def move_station_to_front(self, station_name: str) -> bool:
        index = self._index_of(station_name)
        if index is None:
            return False
        self._stations.insert(0, self._stations.pop(index))
        return True

    def merge_stations(self, station_name1: str, station_name2: str) -> bool:
        """Fold every station named ``station_name2`` into station 1.

        Dishes of the merged stations are assigned to station 1 (same-name
        dishes are skipped) and their stock is replenished into station 1
        (quantities add up); the merged stations leave the list.  Both names
        must resolve to existing, distinct stations.
        """
        station1 = self.find_station(station_name1)
        station2 = self.find_station(station_name2)
        if station1 is None or station2 is None or station1 is station2:
            return False

        merged = [
            station
            for station in self._stations
            if station.name == station_name2 and station is not station1
        ]
        merged_ids = {id(station) for station in merged}
        self._stations = [s for s in self._stations if id(s) not in merged_ids]
        for station in merged:
            for dish in station.get_dishes():
                station1.assign_dish_to_station(dish)
            for ingredient in station.get_ingredients_stock():
                station1.replenish_station_ingredients(ingredient)

        logger.info(
            "%d station(s) %s merged into %s", len(merged), station_name2, station_name1
        )
        return True

    # --- Routage vers un poste ---

    def assign_dish_to_station(self, station_name: str, dish: Dish) -> bool:
        station = self.find_station(station_name)
        if station is None:
            logger.warning("Cannot assign %s: unknown station %s", dish.name, station_name)
            return False
        return station.assign_dish_to_station(dish)

    def replenish_ingredient_at_station(
        self, station_name: str, ingredient: Ingredient
    ) -> bool:
        station = self.find_station(station_name)
        if station is None:
            logger.warning(
                "Cannot replenish %s: unknown station %s", ingredient.name, station_name
            )
            return False
        station.replenish_station_ingredients(ingredient)
        return True

    def can_complete_order(self, dish_name: str) -> bool:
        """True as soon as one station can complete the order."""
        return any(station.can_complete_order(dish_name) for station in self._stations)

    def prepare_dish_at_station(self, station_name: str, dish_name: str) -> bool:
        station = self.find_station(station_name)
        if station is None:
            logger.warning("Cannot prepare %s: unknown station %s", dish_name, station_name)
            return False
        return station.prepare_dish(dish_name)
