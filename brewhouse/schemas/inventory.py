from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import Optional
from datetime import datetime
from brewhouse.schemas.types import UtcDateTime
from brewhouse.services.reports import stock_status


class InventoryItemCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Cascade Hops"])
    category: Optional[str] = Field(default=None, max_length=100, examples=["Hops"])
    quantity: float = Field(..., ge=0)
    minimum_quantity: Optional[float] = Field(default=None, ge=0)
    unit: str = Field(..., min_length=1, max_length=30, examples=["kg"])
    location: Optional[str] = None
    expiration_date: Optional[UtcDateTime] = None
    cost: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    barcode: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class InventoryItemUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, max_length=100)
    quantity: Optional[float] = Field(default=None, ge=0)
    minimum_quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=30)
    location: Optional[str] = None
    expiration_date: Optional[UtcDateTime] = None
    cost: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    barcode: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class InventoryItemOut(InventoryItemCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @computed_field
    @property
    def stock_status(self) -> str:
        return stock_status(self.quantity, self.minimum_quantity)
