from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime
from brewhouse.core.security import MIN_PASSWORD_LENGTH


class SignupUser(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH)


class SignupBrewery(BaseModel):
    name: str = Field(..., min_length=1, max_length=200, examples=["Hop Valley Brewing"])
    type: str = Field(..., min_length=1, max_length=50, examples=["microbrewery"])
    location: str = Field(..., min_length=1, max_length=200)
    founded_year: Optional[int] = Field(default=None, ge=1000, le=3000)
    website: Optional[str] = None
    phone: Optional[str] = None
    brewing_capacity: Optional[str] = None
    specialties: Optional[str] = None


class SignupRequest(BaseModel):
    user: SignupUser
    brewery: SignupBrewery


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class BreweryOut(BaseModel):
    id: str
    name: str
    type: str
    location: str
    founded_year: Optional[int] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    brewing_capacity: Optional[str] = None
    specialties: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class UserOut(BaseModel):
    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    brewery_id: Optional[str] = None
    profile_image_url: Optional[str] = None
    brewery: Optional[BreweryOut] = None

    model_config = ConfigDict(from_attributes=True)
