from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any, List
from datetime import datetime


class RecipeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Hazy IPA"])
    style: str = Field(..., min_length=1, max_length=100, examples=["New England IPA"])
    batch_size: float = Field(..., gt=0)
    target_abv: Optional[float] = Field(default=None, ge=0, le=100)
    target_ibu: Optional[int] = Field(default=None, ge=0)
    ingredients: List[Dict[str, Any]] = Field(..., examples=[[{"name": "Pale Malt", "amount": 5, "unit": "kg"}]])
    instructions: str = Field(..., min_length=1)
    fermentation_temp: Optional[str] = None
    fermentation_time: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class RecipeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    style: Optional[str] = Field(default=None, min_length=1, max_length=100)
    batch_size: Optional[float] = Field(default=None, gt=0)
    target_abv: Optional[float] = Field(default=None, ge=0, le=100)
    target_ibu: Optional[int] = Field(default=None, ge=0)
    ingredients: Optional[List[Dict[str, Any]]] = None
    instructions: Optional[str] = Field(default=None, min_length=1)
    fermentation_temp: Optional[str] = None
    fermentation_time: Optional[str] = None
    notes: Optional[str] = None
    image_url: Optional[str] = None


class RecipeOut(RecipeCreate):
    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
