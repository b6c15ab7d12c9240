from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from brewhouse.schemas.types import UtcDateTime


class EquipmentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Fermenter #1"])
    type: str = Field(..., min_length=1, max_length=100, examples=["fermenter"])
    capacity: Optional[str] = Field(default=None, examples=["10 bbl"])
    status: str = Field(default="available", max_length=30)
    utilization: Optional[int] = Field(default=None, ge=0, le=100)
    location: Optional[str] = None
    purchase_date: Optional[UtcDateTime] = None
    last_maintenance: Optional[UtcDateTime] = None
    next_maintenance: Optional[UtcDateTime] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class EquipmentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    type: Optional[str] = Field(default=None, min_length=1, max_length=100)
    capacity: Optional[str] = None
    status: Optional[str] = Field(default=None, max_length=30)
    utilization: Optional[int] = Field(default=None, ge=0, le=100)
    location: Optional[str] = None
    purchase_date: Optional[UtcDateTime] = None
    last_maintenance: Optional[UtcDateTime] = None
    next_maintenance: Optional[UtcDateTime] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class EquipmentOut(EquipmentCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
