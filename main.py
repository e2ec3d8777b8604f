import logging

from bistro.core.kitchen import Kitchen
from bistro.core.station_manager import StationManager
from bistro.domain.dish import DietaryRequest
from bistro.domain.ingredient import Ingredient
from bistro.domain.station import KitchenStation
from bistro.settings import get_settings
from bistro.ui.console_style import status
from bistro.ui.reports import print_kitchen_report, print_menu, print_stations


def run():
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format=settings.log_format)

    kitchen = Kitchen.from_csv(settings.menu_csv)
    print_menu(kitchen)
    print_kitchen_report(kitchen)

    # Répartition des plats sur deux postes
    manager = StationManager()
    manager.add_station(KitchenStation("Grill"))
    manager.add_station(KitchenStation("Pastry"))
    for dish in kitchen:
        station = "Pastry" if dish.DISH_TYPE == "DESSERT" else "Grill"
        manager.assign_dish_to_station(station, dish)

    for dish in kitchen:
        for ingredient in dish.ingredients:
            target = "Pastry" if dish.DISH_TYPE == "DESSERT" else "Grill"
            manager.replenish_ingredient_at_station(
                target,
                Ingredient(name=ingredient.name, quantity=4, required_quantity=2, price=1.5),
            )
    print_stations(manager)

    for dish_name in ("Tiramisu", "Lasagna", "Pancakes"):
        ok = manager.can_complete_order(dish_name)
        print(f"{dish_name}: {status('OK' if ok else 'impossible', ok)}")

    manager.merge_stations("Grill", "Pastry")
    manager.prepare_dish_at_station("Grill", "Tiramisu")
    print_stations(manager)

    kitchen.dietary_adjustment(DietaryRequest(vegetarian=True, gluten_free=True))
    print_kitchen_report(kitchen)


if __name__ == "__main__":
    run()
