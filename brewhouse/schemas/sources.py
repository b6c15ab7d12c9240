from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class IngredientSourceCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Cascade"])
    type: str = Field(..., min_length=1, max_length=50, examples=["hops"])
    supplier: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1, max_length=200, examples=["Yakima Valley, WA"])
    contact: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class IngredientSourceUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    type: Optional[str] = Field(default=None, min_length=1, max_length=50)
    supplier: Optional[str] = Field(default=None, min_length=1, max_length=200)
    location: Optional[str] = Field(default=None, min_length=1, max_length=200)
    contact: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class IngredientSourceOut(IngredientSourceCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
