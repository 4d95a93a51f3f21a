from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel


class DiscountCreate(BaseModel):
    title: Optional[str] = None
    # kept loose so "12.5" from a form post is validated by the service
    percentage: Optional[Union[float, str]] = None
    product_id: Optional[str] = None


class DiscountResponse(BaseModel):
    id: int
    shop: str
    title: str
    percentage: float
    product_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
