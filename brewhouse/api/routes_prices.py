import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from brewhouse.api.crud import update_changes
from brewhouse.api.deps import get_brewery_id
from brewhouse.db.session import get_db
from brewhouse.db.models import IngredientPriceHistory, InventoryItem
from brewhouse.repos.scoped_repo import BreweryScopedRepo
from brewhouse.schemas.prices import PriceEntryCreate, PriceEntryOut, PriceEntryUpdate, PriceTrendResponse
from brewhouse.services.reports import price_trend

log = logging.getLogger(__name__)

router = APIRouter(prefix="/price-history")


def _prices(brewery_id: str = Depends(get_brewery_id), db: Session = Depends(get_db)) -> BreweryScopedRepo:
    return BreweryScopedRepo(IngredientPriceHistory, db, brewery_id)


def _require_ingredient(repo: BreweryScopedRepo, ingredient_id: int) -> None:
    items = BreweryScopedRepo(InventoryItem, repo.db, repo.brewery_id)
    if not items.get(ingredient_id):
        raise HTTPException(status_code=404, detail="Inventory item not found")


@router.get("", response_model=List[PriceEntryOut])
def list_price_history(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    repo: BreweryScopedRepo = Depends(_prices),
):
    return repo.list(limit=limit, offset=offset, order_by=IngredientPriceHistory.date.desc())


@router.get("/ingredient/{ingredient_id}", response_model=List[PriceEntryOut])
def list_ingredient_prices(ingredient_id: int, repo: BreweryScopedRepo = Depends(_prices)):
    _require_ingredient(repo, ingredient_id)
    return repo.list(limit=1000, order_by=IngredientPriceHistory.date.asc(), ingredient_id=ingredient_id)


@router.get("/ingredient/{ingredient_id}/trend", response_model=PriceTrendResponse)
def get_ingredient_trend(ingredient_id: int, repo: BreweryScopedRepo = Depends(_prices)):
    _require_ingredient(repo, ingredient_id)
    entries = repo.list(limit=1000, order_by=IngredientPriceHistory.date.asc(), ingredient_id=ingredient_id)
    trend = price_trend(entries)
    return PriceTrendResponse(
        ingredient_id=ingredient_id,
        entries=trend.entries,
        oldest_price=trend.oldest_price,
        newest_price=trend.newest_price,
        trend=trend.trend,
        percentage=trend.percentage,
    )


@router.get("/{entry_id}", response_model=PriceEntryOut)
def get_price_entry(entry_id: int, repo: BreweryScopedRepo = Depends(_prices)):
    entry = repo.get(entry_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Price history entry not found")
    return entry


@router.post("", response_model=PriceEntryOut, status_code=201)
def add_price_entry(req: PriceEntryCreate, repo: BreweryScopedRepo = Depends(_prices)):
    _require_ingredient(repo, req.ingredient_id)
    entry = repo.create(req.model_dump())
    log.info("Recorded price %.2f for ingredient %s", entry.price, entry.ingredient_id,
             extra={"brewery_id": repo.brewery_id})
    return entry


@router.put("/{entry_id}", response_model=PriceEntryOut)
def update_price_entry(entry_id: int, req: PriceEntryUpdate, repo: BreweryScopedRepo = Depends(_prices)):
    changes = update_changes(IngredientPriceHistory, req)
    if "ingredient_id" in changes:
        _require_ingredient(repo, changes["ingredient_id"])
    entry = repo.patch(entry_id, changes)
    if not entry:
        raise HTTPException(status_code=404, detail="Price history entry not found")
    return entry


@router.delete("/{entry_id}", status_code=204)
def delete_price_entry(entry_id: int, repo: BreweryScopedRepo = Depends(_prices)):
    if not repo.delete(entry_id):
        raise HTTPException(status_code=404, detail="Price history entry not found")
    return None
