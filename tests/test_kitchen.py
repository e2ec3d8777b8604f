"""
Tests for Kitchen: orders, statistics, group releases and the report.
"""

import pytest

from bistro.core.kitchen import Kitchen
from bistro.domain.dish import DietaryRequest, Dish
from bistro.domain.types import CuisineType
from bistro.utils import round_half_up


def _dish(name, prep_time, cuisine=CuisineType.OTHER, n_ingredients=1, price=10.0):
    return Dish(
        name=name,
        ingredients=[f"Item {chr(65 + i)}" for i in range(n_ingredients)],
        prep_time=prep_time,
        price=price,
        cuisine_type=cuisine,
    )


@pytest.fixture
def kitchen() -> Kitchen:
    return Kitchen(
        [
            _dish("Soup", 20, CuisineType.FRENCH),
            _dish("Stew", 90, CuisineType.FRENCH, n_ingredients=6),
            _dish("Tacos", 15, CuisineType.MEXICAN),
            _dish("Curry", 45, CuisineType.INDIAN, n_ingredients=5),
        ]
    )


class TestOrders:
    def test_new_order_rejects_equal_dish(self, kitchen):
        assert kitchen.new_order(_dish("Soup", 20, CuisineType.FRENCH, n_ingredients=3)) is False
        assert kitchen.get_current_size() == 4
        assert kitchen.new_order(_dish("Soup", 25, CuisineType.FRENCH)) is True
        assert kitchen.get_current_size() == 5

    def test_serve_dish(self, kitchen):
        assert kitchen.serve_dish(_dish("Stew", 90, CuisineType.FRENCH)) is True
        assert kitchen.get_current_size() == 3
        assert kitchen.get_prep_time_sum() == 80
        assert kitchen.elaborate_dish_count() == 0
        assert kitchen.serve_dish(_dish("Stew", 90, CuisineType.FRENCH)) is False

    def test_empty_kitchen(self):
        kitchen = Kitchen()
        assert kitchen.is_empty()
        assert kitchen.calculate_avg_prep_time() == 0
        assert kitchen.calculate_elaborate_percentage() == 0.0

    def test_contains_uses_equality(self, kitchen):
        assert _dish("Tacos", 15, CuisineType.MEXICAN) in kitchen
        assert _dish("Tacos", 15, CuisineType.OTHER) not in kitchen


class TestStatistics:
    def test_sum_and_average(self, kitchen):
        assert kitchen.get_prep_time_sum() == 170
        # 42.5 rounds up
        assert kitchen.calculate_avg_prep_time() == 43

    def test_single_elaborate_dish(self):
        kitchen = Kitchen([_dish("Roast", 60, n_ingredients=5)])
        assert kitchen.elaborate_dish_count() == 1
        assert kitchen.calculate_elaborate_percentage() == 100.0

    def test_elaborate_percentage(self, kitchen):
        assert kitchen.elaborate_dish_count() == 1
        assert kitchen.calculate_elaborate_percentage() == 25.0

    def test_percentage_two_decimals(self):
        kitchen = Kitchen(
            [
                _dish("Roast", 60, n_ingredients=5),
                _dish("Salad", 5),
                _dish("Toast", 3),
            ]
        )
        assert kitchen.calculate_elaborate_percentage() == 33.33

    def test_tally_accepts_enum_or_label(self, kitchen):
        assert kitchen.tally_cuisine_types(CuisineType.FRENCH) == 2
        assert kitchen.tally_cuisine_types("MEXICAN") == 1
        assert kitchen.tally_cuisine_types("mexican") == 0
        assert kitchen.tally_cuisine_types("THAI") == 0

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3.0
        assert round_half_up(33.333333, 2) == 33.33


class TestRecordedTotals:
    def test_prep_time_changed_after_adding(self):
        dish = _dish("Gratin", 30)
        kitchen = Kitchen([dish])
        dish.prep_time = 10
        assert kitchen.serve_dish(dish) is True
        assert kitchen.is_empty()
        assert kitchen.get_prep_time_sum() == 0
        assert kitchen.calculate_avg_prep_time() == 0

    def test_average_uses_recorded_prep_times(self):
        dish = _dish("Gratin", 30)
        kitchen = Kitchen([dish, _dish("Salad", 10)])
        dish.prep_time = 100
        assert kitchen.get_prep_time_sum() == 40
        assert kitchen.calculate_avg_prep_time() == 20

    def test_dish_no_longer_elaborate_when_served(self, dessert):
        dessert.prep_time = 60
        kitchen = Kitchen([dessert])
        assert kitchen.elaborate_dish_count() == 1
        dessert.dietary_accommodations(DietaryRequest(nut_free=True))
        assert not dessert.is_elaborate()
        assert kitchen.serve_dish(dessert) is True
        assert kitchen.elaborate_dish_count() == 0

        kitchen.new_order(_dish("Toast", 5))
        assert kitchen.elaborate_dish_count() == 0
        assert kitchen.calculate_elaborate_percentage() == 0.0

    def test_release_uses_recorded_values(self):
        stew = _dish("Stew", 90, n_ingredients=6)
        kitchen = Kitchen([stew, _dish("Soup", 20)])
        stew.ingredients = stew.ingredients[:2]
        assert kitchen.release_dishes_below_prep_time(100) == 2
        assert kitchen.get_prep_time_sum() == 0
        assert kitchen.elaborate_dish_count() == 0


class TestReleases:
    def test_below_prep_time(self, kitchen):
        assert kitchen.release_dishes_below_prep_time(30) == 2
        assert [d.name for d in kitchen] == ["Stew", "Curry"]
        assert kitchen.get_prep_time_sum() == 135

    def test_zero_releases_everything(self, kitchen):
        assert kitchen.release_dishes_below_prep_time(0) == 4
        assert kitchen.is_empty()
        assert kitchen.get_prep_time_sum() == 0
        assert kitchen.elaborate_dish_count() == 0

    def test_default_releases_everything(self, kitchen):
        assert kitchen.release_dishes_below_prep_time() == 4
        assert kitchen.is_empty()

    def test_negative_is_ignored(self, kitchen):
        assert kitchen.release_dishes_below_prep_time(-5) == 0
        assert len(kitchen) == 4

    def test_of_cuisine_type(self, kitchen):
        assert kitchen.release_dishes_of_cuisine_type("FRENCH") == 2
        assert kitchen.tally_cuisine_types("FRENCH") == 0
        assert kitchen.elaborate_dish_count() == 0
        assert kitchen.release_dishes_of_cuisine_type(CuisineType.INDIAN) == 1
        assert [d.name for d in kitchen] == ["Tacos"]

    def test_all_cuisines(self, kitchen):
        assert kitchen.release_dishes_of_cuisine_type() == 4
        assert kitchen.is_empty()

    def test_unknown_cuisine_releases_nothing(self, kitchen):
        assert kitchen.release_dishes_of_cuisine_type("THAI") == 0
        assert len(kitchen) == 4


class TestReport:
    def test_report_text(self, kitchen):
        assert kitchen.kitchen_report() == "\n".join(
            [
                "ITALIAN: 0",
                "MEXICAN: 1",
                "CHINESE: 0",
                "INDIAN: 1",
                "AMERICAN: 0",
                "FRENCH: 2",
                "OTHER: 0",
                "",
                "AVERAGE PREP TIME: 43",
                "ELABORATE DISHES: 25.00%",
            ]
        )

    def test_display_menu(self, kitchen, capsys):
        kitchen.display_menu()
        out = capsys.readouterr().out
        assert out.count("Dish Name:") == 4
        assert "Dish Name: Curry" in out


class TestDietaryAdjustment:
    def test_applies_to_every_dish(self, appetizer, dessert):
        kitchen = Kitchen([appetizer, dessert])
        kitchen.dietary_adjustment(DietaryRequest(low_sodium=True, low_sugar=True))
        assert appetizer.spiciness_level == 1
        assert dessert.sweetness_level == 0

    def test_elaborate_count_follows_ingredients(self, dessert):
        dessert.prep_time = 60
        kitchen = Kitchen([dessert])
        assert kitchen.elaborate_dish_count() == 1
        kitchen.dietary_adjustment(DietaryRequest(nut_free=True))
        assert dessert.ingredient_names() == ["Flour", "Eggs", "Sugar", "Milk"]
        assert kitchen.elaborate_dish_count() == 0
        assert kitchen.calculate_elaborate_percentage() == 0.0
