from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional
from datetime import datetime
from brewhouse.schemas.types import UtcDateTime


class BrewingScheduleCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200, examples=["Batch #42 - Hazy IPA"])
    description: Optional[str] = None
    recipe_id: Optional[int] = None
    equipment_id: Optional[int] = None
    start_date: UtcDateTime
    end_date: UtcDateTime
    status: str = Field(default="scheduled", max_length=30)
    batch_size: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BrewingScheduleUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    recipe_id: Optional[int] = None
    equipment_id: Optional[int] = None
    start_date: Optional[UtcDateTime] = None
    end_date: Optional[UtcDateTime] = None
    status: Optional[str] = Field(default=None, max_length=30)
    batch_size: Optional[float] = Field(default=None, gt=0)
    notes: Optional[str] = None


class BrewingScheduleOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    recipe_id: Optional[int] = None
    equipment_id: Optional[int] = None
    start_date: datetime
    end_date: datetime
    status: str
    batch_size: Optional[float] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
