from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from ..core.db import Base

DESTINATION_CHECKOUT = "checkout"

# Upper bound of the Integer primary key; larger ids cannot exist
MAX_QR_CODE_ID = 2**31 - 1


class QRCode(Base):
    __tablename__ = "qr_codes"

    # --- Identity ---
    id = Column(Integer, primary_key=True, index=True)
    shop = Column(String(255), nullable=False, index=True)
    title = Column(String(255), nullable=False)

    # --- Shopify references (GraphQL gids + handle) ---
    product_id = Column(String(255), nullable=False, index=True)
    product_handle = Column(String(255), nullable=False)
    product_variant_id = Column(String(255), nullable=False)

    # --- Where a scan lands; only "checkout" for now ---
    destination = Column(String(20), nullable=False, default=DESTINATION_CHECKOUT)

    # --- Scan counter, only ever incremented ---
    scans = Column(Integer, nullable=False, default=0, server_default="0")

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return (
            f"<QRCode(id={self.id}, shop='{self.shop}', "
            f"variant='{self.product_variant_id}', scans={self.scans})>"
        )
