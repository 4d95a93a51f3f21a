from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.sql import func

from ..core.db import Base


class ProductDiscount(Base):
    __tablename__ = "product_discounts"

    id = Column(Integer, primary_key=True, index=True)
    shop = Column(String(255), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    percentage = Column(Float, nullable=False)
    product_id = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<ProductDiscount(id={self.id}, title='{self.title}', pct={self.percentage})>"
