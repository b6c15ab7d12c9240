"""Dashboard statistics and price-trend reporting."""
from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Iterable, Optional, Sequence
from sqlalchemy import select
from sqlalchemy.orm import Session
from brewhouse.db.models import BrewingSchedule, Equipment, IngredientPriceHistory, InventoryItem

STOCK_CRITICAL = "critical"
STOCK_WARNING = "warning"
STOCK_GOOD = "good"

# below this fraction of the minimum an item is critical rather than a warning
CRITICAL_FRACTION = 0.5


def stock_status(quantity: float, minimum_quantity: Optional[float]) -> str:
    if not minimum_quantity:
        return STOCK_GOOD
    if quantity < minimum_quantity * CRITICAL_FRACTION:
        return STOCK_CRITICAL
    if quantity < minimum_quantity:
        return STOCK_WARNING
    return STOCK_GOOD


def end_of_week(now: datetime) -> datetime:
    """The coming Sunday at the same time of day (a week ahead on Sundays)."""
    days_since_sunday = (now.weekday() + 1) % 7
    return now + timedelta(days=7 - days_since_sunday)


def _status_is(value: Optional[str], expected: str) -> bool:
    return (value or "").strip().lower() == expected


@dataclass(frozen=True)
class DashboardStats:
    batches_in_process: int
    total_inventory_items: int
    low_stock_items: int
    equipment_utilization: int
    maintenance_needed: int
    scheduled_brews: int
    this_week_brews: int


def compute_stats(
    items: Sequence[InventoryItem],
    equipment: Sequence[Equipment],
    schedules: Sequence[BrewingSchedule],
    now: Optional[datetime] = None,
) -> DashboardStats:
    now = now or datetime.utcnow()
    week_end = end_of_week(now)

    low_stock = sum(
        1 for item in items
        if stock_status(item.quantity, item.minimum_quantity) in (STOCK_CRITICAL, STOCK_WARNING)
    )
    active = sum(1 for e in equipment if _status_is(e.status, "active"))
    utilization = active * 100 // len(equipment) if equipment else 0

    return DashboardStats(
        batches_in_process=sum(1 for s in schedules if _status_is(s.status, "in progress")),
        total_inventory_items=len(items),
        low_stock_items=low_stock,
        equipment_utilization=utilization,
        maintenance_needed=sum(1 for e in equipment if _status_is(e.status, "maintenance")),
        scheduled_brews=sum(1 for s in schedules if _status_is(s.status, "scheduled")),
        this_week_brews=sum(1 for s in schedules if now <= s.start_date <= week_end),
    )


def load_stats(db: Session, brewery_id: str, now: Optional[datetime] = None) -> DashboardStats:
    items = db.scalars(select(InventoryItem).where(InventoryItem.brewery_id == brewery_id)).all()
    equipment = db.scalars(select(Equipment).where(Equipment.brewery_id == brewery_id)).all()
    schedules = db.scalars(select(BrewingSchedule).where(BrewingSchedule.brewery_id == brewery_id)).all()
    return compute_stats(items, equipment, schedules, now=now)


@dataclass(frozen=True)
class PriceTrend:
    entries: int
    oldest_price: Optional[float]
    newest_price: Optional[float]
    trend: str
    percentage: float


def price_trend(entries: Iterable[IngredientPriceHistory]) -> PriceTrend:
    """Compare the oldest and newest price by date.

    Percentage is the absolute change relative to the oldest price, rounded to
    one decimal place.
    """
    ordered = sorted(entries, key=lambda e: e.date)
    if len(ordered) < 2:
        price = ordered[0].price if ordered else None
        return PriceTrend(len(ordered), price, price, "stable", 0.0)

    oldest = ordered[0].price
    newest = ordered[-1].price
    difference = newest - oldest
    percentage = abs(difference / oldest) * 100 if oldest else 0.0

    if difference > 0:
        trend = "increasing"
    elif difference < 0:
        trend = "decreasing"
    else:
        trend = "stable"
    return PriceTrend(len(ordered), oldest, newest, trend, round(percentage, 1))


def inventory_by_category(items: Iterable[InventoryItem]) -> Dict[str, int]:
    return dict(Counter(item.category or "Uncategorized" for item in items))


def stock_status_counts(items: Iterable[InventoryItem]) -> Dict[str, int]:
    counts = {STOCK_CRITICAL: 0, STOCK_WARNING: 0, STOCK_GOOD: 0}
    for item in items:
        counts[stock_status(item.quantity, item.minimum_quantity)] += 1
    return counts
