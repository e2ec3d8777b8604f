# smoke_run.py
"""
Test rapide : charge la carte, répartit les plats sur trois postes, prépare,
fusionne, réordonne et affiche l'état des postes à chaque étape.
"""

from bistro.core.kitchen import Kitchen
from bistro.core.station_manager import StationManager
from bistro.domain.ingredient import Ingredient
from bistro.domain.station import KitchenStation
from bistro.settings import get_settings
from bistro.ui.reports import print_stations

kitchen = Kitchen.from_csv(get_settings().menu_csv)

# Création de 3 postes
manager = StationManager()
for name in ("Grill", "Wok", "Pastry"):
    manager.add_station(KitchenStation(name))

# Attribution des plats selon la cuisine / le type
for dish in kitchen:
    if dish.DISH_TYPE == "DESSERT":
        manager.assign_dish_to_station("Pastry", dish)
    elif dish.cuisine_type.value in ("CHINESE", "INDIAN"):
        manager.assign_dish_to_station("Wok", dish)
    else:
        manager.assign_dish_to_station("Grill", dish)

# Seed du stock : 6 unités, 2 par préparation
for station in manager:
    for dish in station.get_dishes():
        for ingredient in dish.ingredients:
            station.replenish_station_ingredients(
                Ingredient(name=ingredient.name, quantity=6, required_quantity=2)
            )

print_stations(manager)

# Trois services de la même commande : le troisième vide le stock
for service in range(1, 4):
    ok = manager.prepare_dish_at_station("Wok", "Kung Pao Chicken")
    print(f"Service {service} Kung Pao Chicken: {ok}")
print(f"Encore possible ? {manager.can_complete_order('Kung Pao Chicken')}")

manager.merge_stations("Grill", "Wok")
manager.move_station_to_front("Pastry")
print(f"Ordre des postes : {manager.station_names()}")
print_stations(manager)
