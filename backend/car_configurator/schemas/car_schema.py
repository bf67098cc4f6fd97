from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal

from .customization_schema import Customization


class CarBase(BaseModel):
    name: str = Field(..., max_length=100, description="Model name")
    year: int = Field(..., description="Model year")
    base_price: Decimal = Field(..., max_digits=12, decimal_places=2, description="Base price before options")
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=255)


class CarCreate(CarBase):
    """Schema for adding a new car model"""
    pass


class CarUpdate(CarBase):
    """Schema for replacing a car model; every field is written"""
    pass


class CarSummary(BaseModel):
    """Schema for the catalog listing"""
    id: int
    name: str
    year: int
    base_price: Decimal
    image_url: Optional[str] = None

    class Config:
        from_attributes = True


class Car(CarBase):
    """Schema for reading a car model (output)"""
    id: int

    class Config:
        from_attributes = True


class CarDetail(Car):
    """Car model together with the options offered for it"""
    available_customizations: List[Customization] = []


class Message(BaseModel):
    message: str
