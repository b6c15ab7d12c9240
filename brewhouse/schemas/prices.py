from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional
from datetime import datetime
from brewhouse.schemas.types import UtcDateTime


class PriceEntryCreate(BaseModel):
    ingredient_id: int
    price: float = Field(..., ge=0)
    supplier: Optional[str] = None
    date: UtcDateTime
    notes: Optional[str] = None


class PriceEntryUpdate(BaseModel):
    ingredient_id: Optional[int] = None
    price: Optional[float] = Field(default=None, ge=0)
    supplier: Optional[str] = None
    date: Optional[UtcDateTime] = None
    notes: Optional[str] = None


class PriceEntryOut(PriceEntryCreate):
    id: int
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PriceTrendResponse(BaseModel):
    ingredient_id: int
    entries: int
    oldest_price: Optional[float] = None
    newest_price: Optional[float] = None
    trend: Literal["increasing", "decreasing", "stable"]
    percentage: float
