from typing import List

from pydantic import BaseModel


class VariantOptionResponse(BaseModel):
    id: str
    title: str


class ProductOptionResponse(BaseModel):
    id: str
    title: str
    handle: str
    variants: List[VariantOptionResponse] = []
