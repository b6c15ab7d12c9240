from pydantic import BaseModel
from typing import Dict


class StatsResponse(BaseModel):
    batches_in_process: int
    total_inventory_items: int
    low_stock_items: int
    equipment_utilization: int
    maintenance_needed: int
    scheduled_brews: int
    this_week_brews: int


class StockStatusCounts(BaseModel):
    critical: int = 0
    warning: int = 0
    good: int = 0


class CategoryCounts(BaseModel):
    categories: Dict[str, int]
