from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session
from brewhouse.api.deps import get_brewery_id
from brewhouse.db.session import get_db
from brewhouse.db.models import InventoryItem
from brewhouse.schemas.reports import CategoryCounts, StatsResponse, StockStatusCounts
from brewhouse.services.reports import inventory_by_category, load_stats, stock_status_counts

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
def get_stats(brewery_id: str = Depends(get_brewery_id), db: Session = Depends(get_db)):
    stats = load_stats(db, brewery_id)
    return StatsResponse(**stats.__dict__)


def _inventory(db: Session, brewery_id: str):
    return db.scalars(select(InventoryItem).where(InventoryItem.brewery_id == brewery_id)).all()


@router.get("/reports/inventory-by-category", response_model=CategoryCounts)
def get_inventory_by_category(brewery_id: str = Depends(get_brewery_id), db: Session = Depends(get_db)):
    return CategoryCounts(categories=inventory_by_category(_inventory(db, brewery_id)))


@router.get("/reports/stock-status", response_model=StockStatusCounts)
def get_stock_status(brewery_id: str = Depends(get_brewery_id), db: Session = Depends(get_db)):
    return StockStatusCounts(**stock_status_counts(_inventory(db, brewery_id)))
