# Request-scoped collaborators; tests swap these via app.dependency_overrides
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from .config import settings
from .db import get_db
from .qr_utils import QRImageGenerator
from ..services.repository import DiscountRepository, QRCodeRepository
from ..services.shopify import ShopifyAdminClient


def get_qr_code_store(db: Session = Depends(get_db)) -> QRCodeRepository:
    return QRCodeRepository(db)


def get_discount_repo(db: Session = Depends(get_db)) -> DiscountRepository:
    return DiscountRepository(db)


def get_qr_generator() -> QRImageGenerator:
    return QRImageGenerator(settings.SHOPIFY_APP_URL)


def get_shop(x_shopify_shop_domain: str | None = Header(default=None)) -> str:
    if not x_shopify_shop_domain or not x_shopify_shop_domain.strip():
        raise HTTPException(status_code=400, detail="Missing X-Shopify-Shop-Domain header")
    return x_shopify_shop_domain.strip()


def get_product_source(shop: str = Depends(get_shop)) -> ShopifyAdminClient:
    return ShopifyAdminClient(
        shop=shop,
        access_token=settings.SHOPIFY_ACCESS_TOKEN,
        api_version=settings.SHOPIFY_API_VERSION,
        timeout=settings.SHOPIFY_TIMEOUT_SECONDS,
    )
