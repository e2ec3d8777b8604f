# bistro/ui/reports.py

from bistro.core.kitchen import Kitchen
from bistro.core.station_manager import StationManager
from bistro.domain.station import KitchenStation
from bistro.ui.console_style import bold, cyan, stock_level


# ---------- Helpers de formatage ----------


def format_price(x: float) -> str:
    """Format a float as a dollar amount with two decimals.

    >>> format_price(8.8)
    '$8.80'
    """
    return f"${float(x):.2f}"


def _bar(current: int, maxv: int, width: int = 12, fill_char: str = "█") -> str:
    """Text gauge of ``current`` against ``maxv`` (blank when maxv <= 0)."""
    if maxv <= 0:
        return " " * width
    ratio = max(0.0, min(1.0, float(current) / float(maxv)))
    n = int(round(ratio * width))
    return fill_char * n + " " * (width - n)


# ---------- Cuisine ----------


def print_menu(kitchen: Kitchen) -> None:
    print(bold(f"\n🍽️  Carte ({len(kitchen)} plats)"))
    print("═" * 40)
    for dish in kitchen:
        dish.display()
        print("-" * 40)


def print_kitchen_report(kitchen: Kitchen) -> None:
    print(bold("\n📊 Kitchen report"))
    print("═" * 40)
    print(kitchen.kitchen_report())
    print("═" * 40)


# ---------- Postes ----------


def format_station(station: KitchenStation) -> str:
    """Multi-line summary: dishes, then stock lines with a fill gauge.

    Stock lines are coloured by how many portions of their own
    required quantity are left (see ``stock_level``).
    """
    lines = [cyan(f"[{station.name}]")]
    dish_names = ", ".join(dish.name for dish in station.dishes) or "—"
    lines.append(f"  Dishes: {dish_names}")

    stock = station.get_ingredients_stock()
    if not stock:
        lines.append("  Stock: —")
        return "\n".join(lines)

    top = max(item.quantity for item in stock)
    lines.append("  Stock:")
    for item in stock:
        text = f"{item.name} x {item.quantity} (needs {item.required_quantity})"
        lines.append(
            f"    {_bar(item.quantity, top)} "
            f"{stock_level(text, item.quantity, item.required_quantity)}"
        )
    return "\n".join(lines)


def print_stations(manager: StationManager) -> None:
    print(bold(f"\n👨‍🍳 Stations ({len(manager)})"))
    print("═" * 40)
    for station in manager:
        print(format_station(station))
