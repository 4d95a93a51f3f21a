# qr_reorder/routers/app_qrcodes.py
# Admin JSON API behind the embedded app; the shop comes from the
# X-Shopify-Shop-Domain header.
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_201_CREATED

from ..core.deps import get_product_source, get_qr_code_store, get_qr_generator, get_shop
from ..core.exceptions import InvalidQRCodeId, InvalidSelection
from ..core.qr_utils import QRImageGenerator
from ..schemas.product import ProductOptionResponse
from ..schemas.qr_code import EnrichedQRCode, QRCodeCreate, QRCodeRecord
from ..services import qr_codes
from ..services.repository import QRCodeRepository
from ..services.shopify import ShopifyAdminClient

router = APIRouter(prefix="/app", tags=["Admin / QR Codes"])


@router.get("/qrcodes", response_model=List[EnrichedQRCode])
async def list_qr_codes(
    shop: str = Depends(get_shop),
    store: QRCodeRepository = Depends(get_qr_code_store),
    source: ShopifyAdminClient = Depends(get_product_source),
    generator: QRImageGenerator = Depends(get_qr_generator),
):
    return await qr_codes.get_qr_codes(store, shop, source, generator)


@router.get("/qrcodes/{qr_code_id}", response_model=EnrichedQRCode)
async def get_qr_code(
    qr_code_id: str,
    shop: str = Depends(get_shop),
    store: QRCodeRepository = Depends(get_qr_code_store),
    source: ShopifyAdminClient = Depends(get_product_source),
    generator: QRImageGenerator = Depends(get_qr_generator),
):
    try:
        pk = qr_codes.parse_qr_code_id(qr_code_id)
    except InvalidQRCodeId as e:
        raise HTTPException(status_code=400, detail=str(e))

    enriched = await qr_codes.get_qr_code(store, pk, source, generator, shop=shop)
    if enriched is None:
        raise HTTPException(status_code=404, detail="QR code not found")
    return enriched


@router.post("/qrcodes", response_model=QRCodeRecord, status_code=HTTP_201_CREATED)
def create_qr_code(
    payload: QRCodeCreate,
    shop: str = Depends(get_shop),
    store: QRCodeRepository = Depends(get_qr_code_store),
):
    try:
        return qr_codes.create_qr_code(store, shop, payload.title, payload.product_variant)
    except InvalidSelection as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/products", response_model=List[ProductOptionResponse])
async def list_product_options(source: ShopifyAdminClient = Depends(get_product_source)):
    return await source.list_products()
