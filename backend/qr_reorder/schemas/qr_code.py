from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class QRCodeCreate(BaseModel):
    title: Optional[str] = None
    # "<productId>|<productVariantId>|<productHandle>" as packed by the picker
    product_variant: Optional[str] = None


class QRCodeRecord(BaseModel):
    id: int
    shop: str
    title: str
    product_id: str
    product_handle: str
    product_variant_id: str
    destination: str
    scans: int = 0
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EnrichedQRCode(QRCodeRecord):
    qr_image: str
    product_title: Optional[str] = None
    product_image: Optional[str] = None
    price: Optional[str] = None
