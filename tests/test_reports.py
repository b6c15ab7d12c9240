"""Tests for dashboard statistics and price trends."""
from datetime import datetime, timedelta
import pytest
from brewhouse.db.models import BrewingSchedule, Equipment, IngredientPriceHistory, InventoryItem
from brewhouse.services.reports import (
    compute_stats,
    end_of_week,
    inventory_by_category,
    price_trend,
    stock_status,
    stock_status_counts,
)


@pytest.mark.parametrize("quantity, minimum, expected", [
    (5, 20, "critical"),
    (75, 100, "warning"),
    (8, 15, "warning"),
    (24, 10, "good"),
    (100, 100, "good"),
    (0, None, "good"),
    (3, 0, "good"),
])
def test_stock_status(quantity, minimum, expected):
    assert stock_status(quantity, minimum) == expected


def test_end_of_week_is_next_sunday():
    wednesday = datetime(2026, 10, 14, 9, 30)
    assert end_of_week(wednesday) == datetime(2026, 10, 18, 9, 30)

    sunday = datetime(2026, 10, 18, 9, 30)
    assert end_of_week(sunday) == datetime(2026, 10, 25, 9, 30)


def test_compute_stats():
    now = datetime(2026, 10, 14, 12, 0)
    items = [
        InventoryItem(name="Cascade", quantity=5, minimum_quantity=20, unit="kg"),
        InventoryItem(name="Pilsner Malt", quantity=75, minimum_quantity=100, unit="kg"),
        InventoryItem(name="Yeast", quantity=24, minimum_quantity=10, unit="packs"),
    ]
    equipment = [
        Equipment(name="Mash Tun", type="mash tun", status="active"),
        Equipment(name="Kettle", type="kettle", status="Active"),
        Equipment(name="Fermenter", type="fermenter", status="maintenance"),
    ]
    schedules = [
        BrewingSchedule(title="A", status="In progress", start_date=now - timedelta(days=2), end_date=now),
        BrewingSchedule(title="B", status="scheduled", start_date=now + timedelta(days=1), end_date=now + timedelta(days=2)),
        BrewingSchedule(title="C", status="Scheduled", start_date=now + timedelta(days=10), end_date=now + timedelta(days=12)),
    ]

    stats = compute_stats(items, equipment, schedules, now=now)

    assert stats.batches_in_process == 1
    assert stats.total_inventory_items == 3
    assert stats.low_stock_items == 2
    assert stats.equipment_utilization == 66
    assert stats.maintenance_needed == 1
    assert stats.scheduled_brews == 2
    assert stats.this_week_brews == 1


def test_compute_stats_without_equipment():
    stats = compute_stats([], [], [])
    assert stats.equipment_utilization == 0
    assert stats.total_inventory_items == 0


def _price(value: float, day: int) -> IngredientPriceHistory:
    return IngredientPriceHistory(price=value, date=datetime(2026, 1, day))


def test_price_trend_increasing_uses_date_order():
    trend = price_trend([_price(12.0, 20), _price(10.0, 1), _price(11.0, 10)])

    assert trend.trend == "increasing"
    assert trend.oldest_price == 10.0
    assert trend.newest_price == 12.0
    assert trend.percentage == 20.0


def test_price_trend_decreasing():
    trend = price_trend([_price(9.0, 1), _price(6.0, 2)])
    assert trend.trend == "decreasing"
    assert trend.percentage == 33.3


def test_price_trend_needs_two_entries():
    assert price_trend([]).trend == "stable"
    single = price_trend([_price(4.0, 1)])
    assert single.trend == "stable"
    assert single.percentage == 0.0
    assert single.entries == 1


def test_inventory_groupings():
    items = [
        InventoryItem(name="Cascade", category="Hops", quantity=5, minimum_quantity=20, unit="kg"),
        InventoryItem(name="Saaz", category="Hops", quantity=30, minimum_quantity=15, unit="kg"),
        InventoryItem(name="Mystery", quantity=1, unit="kg"),
    ]

    assert inventory_by_category(items) == {"Hops": 2, "Uncategorized": 1}
    assert stock_status_counts(items) == {"critical": 1, "warning": 0, "good": 2}
