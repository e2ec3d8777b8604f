import logging
from dataclasses import dataclass, field
from typing import List, Optional

from bistro.data.kitchen_params import UNKNOWN_NAME
from bistro.domain.dish import Dish
from bistro.domain.ingredient import Ingredient

logger = logging.getLogger(__name__)


@dataclass
class KitchenStation:
    """
    Poste de cuisine :
      - dishes            -> plats que le poste sait préparer (références partagées)
      - ingredients_stock -> stock d'ingrédients, unique par nom
    """

    name: str = UNKNOWN_NAME
    dishes: List[Dish] = field(default_factory=list)
    ingredients_stock: List[Ingredient] = field(default_factory=list)

    def get_dishes(self) -> List[Dish]:
        return list(self.dishes)

    def get_ingredients_stock(self) -> List[Ingredient]:
        return list(self.ingredients_stock)

    # -------- Lookups --------

    def find_dish(self, dish_name: str) -> Optional[Dish]:
        for dish in self.dishes:
            if dish.name == dish_name:
                return dish
        return None

    def find_stock(self, ingredient_name: str) -> Optional[Ingredient]:
        for stock in self.ingredients_stock:
            if stock.name == ingredient_name:
                return stock
        return None

    # -------- Plats / stock --------

    def assign_dish_to_station(self, dish: Dish) -> bool:
        """Add the dish unless one with the same name is already assigned."""
        if self.find_dish(dish.name) is not None:
            logger.debug("Station %s already has dish %s", self.name, dish.name)
            return False
        self.dishes.append(dish)
        logger.debug("Dish %s assigned to station %s", dish.name, self.name)
        return True

    def replenish_station_ingredients(self, ingredient: Ingredient) -> None:
        """
        Ajoute la quantité à la ligne de stock existante, sinon ajoute une copie
        de l'ingrédient (l'objet de l'appelant n'est jamais partagé avec le stock).
        """
        stock = self.find_stock(ingredient.name)
        if stock is not None:
            stock.quantity += ingredient.quantity
        else:
            self.ingredients_stock.append(ingredient.model_copy())
        logger.debug(
            "Station %s replenished %s (+%d)",
            self.name,
            ingredient.name,
            ingredient.quantity,
        )

    # -------- Commandes --------

    def can_complete_order(self, dish_name: str) -> bool:
        """True if the dish is assigned and every ingredient is in stock.

        Each dish ingredient must have a stock line with the same name, and
        that stock line must hold at least its own ``required_quantity``.
        A dish without ingredients cannot be completed.
        """
        dish = self.find_dish(dish_name)
        if dish is None or not dish.ingredients:
            return False

        for ingredient in dish.ingredients:
            found = False
            for stock in self.ingredients_stock:
                if stock.name != ingredient.name:
                    continue
                if stock.quantity < stock.required_quantity:
                    return False
                found = True
            if not found:
                return False
        return True

    def prepare_dish(self, dish_name: str) -> bool:
        """
        Prépare le plat si possible : chaque ligne de stock utilisée perd son
        required_quantity, et les lignes tombées exactement à 0 sont retirées.
        """
        if not self.can_complete_order(dish_name):
            logger.info("Station %s cannot prepare %s", self.name, dish_name)
            return False

        dish = self.find_dish(dish_name)
        for ingredient in dish.ingredients:
            depleted = set()
            for stock in self.ingredients_stock:
                if stock.name == ingredient.name:
                    stock.quantity -= stock.required_quantity
                    if stock.quantity == 0:
                        depleted.add(id(stock))
            if depleted:
                self.ingredients_stock = [
                    stock
                    for stock in self.ingredients_stock
                    if id(stock) not in depleted
                ]

        logger.info("Station %s prepared %s", self.name, dish_name)
        return True
