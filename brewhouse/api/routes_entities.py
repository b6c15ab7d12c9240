from fastapi import APIRouter, HTTPException
from brewhouse.api.crud import build_crud_router
from brewhouse.db.models import BrewingSchedule, Equipment, IngredientSource, InventoryItem, Recipe
from brewhouse.schemas.equipment import EquipmentCreate, EquipmentOut, EquipmentUpdate
from brewhouse.schemas.inventory import InventoryItemCreate, InventoryItemOut, InventoryItemUpdate
from brewhouse.schemas.recipes import RecipeCreate, RecipeOut, RecipeUpdate
from brewhouse.schemas.schedules import BrewingScheduleCreate, BrewingScheduleOut, BrewingScheduleUpdate
from brewhouse.schemas.sources import IngredientSourceCreate, IngredientSourceOut, IngredientSourceUpdate


def _check_schedule_dates(existing: BrewingSchedule, changes: dict) -> None:
    start = changes.get("start_date", existing.start_date)
    end = changes.get("end_date", existing.end_date)
    if end < start:
        raise HTTPException(status_code=400, detail="end_date must not be before start_date")


router = APIRouter()
router.include_router(
    build_crud_router(
        model=InventoryItem,
        create_schema=InventoryItemCreate,
        update_schema=InventoryItemUpdate,
        out_schema=InventoryItemOut,
        label="Inventory item",
    ),
    prefix="/inventory",
    tags=["inventory"],
)
router.include_router(
    build_crud_router(
        model=Equipment,
        create_schema=EquipmentCreate,
        update_schema=EquipmentUpdate,
        out_schema=EquipmentOut,
        label="Equipment",
    ),
    prefix="/equipment",
    tags=["equipment"],
)
router.include_router(
    build_crud_router(
        model=Recipe,
        create_schema=RecipeCreate,
        update_schema=RecipeUpdate,
        out_schema=RecipeOut,
        label="Recipe",
    ),
    prefix="/recipes",
    tags=["recipes"],
)
router.include_router(
    build_crud_router(
        model=BrewingSchedule,
        create_schema=BrewingScheduleCreate,
        update_schema=BrewingScheduleUpdate,
        out_schema=BrewingScheduleOut,
        label="Brewing schedule",
        check_update=_check_schedule_dates,
    ),
    prefix="/schedules",
    tags=["schedules"],
)
router.include_router(
    build_crud_router(
        model=IngredientSource,
        create_schema=IngredientSourceCreate,
        update_schema=IngredientSourceUpdate,
        out_schema=IngredientSourceOut,
        label="Ingredient source",
    ),
    prefix="/ingredient-sources",
    tags=["ingredient-sources"],
)
