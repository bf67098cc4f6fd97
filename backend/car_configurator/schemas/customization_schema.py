from pydantic import BaseModel, Field
from typing import Optional
from decimal import Decimal


class Customization(BaseModel):
    """Schema for reading a customization option (output)"""
    id: int
    category: str = Field(..., description="Option group: Exterior Color, Wheel Style, Interior Trim")
    option_name: str
    price_adjustment: Decimal = Field(..., description="Added to the model's base price when selected")
    image_url: Optional[str] = None

    class Config:
        from_attributes = True
