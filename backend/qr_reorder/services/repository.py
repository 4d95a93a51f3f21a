"""SQLAlchemy-backed stores for QR codes and product discounts.

The QR code core only relies on the methods below, so tests (or another
backend) can swap in any object with the same surface.
"""
from typing import List, Optional, Protocol

from sqlalchemy import update
from sqlalchemy.orm import Session

from ..models.discount import ProductDiscount
from ..models.qr_code import QRCode, DESTINATION_CHECKOUT


class QRCodeStore(Protocol):
    def get(self, qr_code_id: int) -> Optional[QRCode]: ...

    def list_for_shop(self, shop: str) -> List[QRCode]: ...

    def first_for_product(
        self, shop: str, product_id: Optional[str] = None, product_handle: Optional[str] = None
    ) -> Optional[QRCode]: ...

    def create(self, **fields) -> QRCode: ...

    def increment_scans(self, qr_code_id: int) -> None: ...


class QRCodeRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, qr_code_id: int) -> Optional[QRCode]:
        return self.db.query(QRCode).filter(QRCode.id == qr_code_id).first()

    def list_for_shop(self, shop: str) -> List[QRCode]:
        return (
            self.db.query(QRCode)
            .filter(QRCode.shop == shop)
            .order_by(QRCode.id.desc())
            .all()
        )

    def first_for_product(
        self, shop: str, product_id: Optional[str] = None, product_handle: Optional[str] = None
    ) -> Optional[QRCode]:
        if not product_id and not product_handle:
            raise ValueError("product_id or product_handle is required")

        query = self.db.query(QRCode).filter(QRCode.shop == shop)
        if product_id:
            query = query.filter(QRCode.product_id == product_id)
        if product_handle:
            query = query.filter(QRCode.product_handle == product_handle)
        return query.order_by(QRCode.id.desc()).first()

    def create(
        self,
        shop: str,
        title: str,
        product_id: str,
        product_handle: str,
        product_variant_id: str,
        destination: str = DESTINATION_CHECKOUT,
    ) -> QRCode:
        qr_code = QRCode(
            shop=shop,
            title=title,
            product_id=product_id,
            product_handle=product_handle,
            product_variant_id=product_variant_id,
            destination=destination,
            scans=0,
        )
        self.db.add(qr_code)
        self.db.commit()
        self.db.refresh(qr_code)
        return qr_code

    def increment_scans(self, qr_code_id: int) -> None:
        # Single UPDATE ... SET scans = scans + 1; row atomicity is the store's
        self.db.execute(
            update(QRCode)
            .where(QRCode.id == qr_code_id)
            .values(scans=QRCode.scans + 1)
        )
        self.db.commit()


class DiscountRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, discount_id: int) -> Optional[ProductDiscount]:
        return self.db.query(ProductDiscount).filter(ProductDiscount.id == discount_id).first()

    def list_for_shop(self, shop: str) -> List[ProductDiscount]:
        return (
            self.db.query(ProductDiscount)
            .filter(ProductDiscount.shop == shop)
            .order_by(ProductDiscount.id.desc())
            .all()
        )

    def create(self, shop: str, title: str, percentage: float, product_id: str) -> ProductDiscount:
        discount = ProductDiscount(
            shop=shop, title=title, percentage=percentage, product_id=product_id
        )
        self.db.add(discount)
        self.db.commit()
        self.db.refresh(discount)
        return discount
