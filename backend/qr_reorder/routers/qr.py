# qr_reorder/routers/qr.py
# Public routes hit by customers and theme blocks; no admin session here.
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse, Response
from starlette.status import HTTP_302_FOUND

from ..core.deps import get_qr_code_store, get_qr_generator
from ..core.exceptions import InvalidQRCodeId, QRCodeNotFound
from ..core.qr_utils import QRImageGenerator
from ..services import qr_codes
from ..services.repository import QRCodeRepository

router = APIRouter(prefix="/qrcodes", tags=["QR Codes"])


# -----------------------------------------------------
# Customer scan -> pre-filled cart
# -----------------------------------------------------
@router.get("/{qr_code_id}/scan")
def scan_qr_code(qr_code_id: str, store: QRCodeRepository = Depends(get_qr_code_store)):
    try:
        pk = qr_codes.parse_qr_code_id(qr_code_id)
    except InvalidQRCodeId as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        destination = qr_codes.scan(store, pk)
    except QRCodeNotFound:
        raise HTTPException(status_code=404, detail="QR code not found")

    return RedirectResponse(url=destination, status_code=HTTP_302_FOUND)


# -----------------------------------------------------
# PNG for the storefront theme block
# -----------------------------------------------------
@router.get("/image")
def qr_code_image(
    shop: Optional[str] = Query(default=None),
    product_handle: Optional[str] = Query(default=None, alias="productHandle"),
    product_id: Optional[str] = Query(default=None, alias="productId"),
    store: QRCodeRepository = Depends(get_qr_code_store),
    generator: QRImageGenerator = Depends(get_qr_generator),
):
    if not shop or not (product_handle or product_id):
        raise HTTPException(status_code=400, detail="Missing shop or productHandle/productId")

    qr_code = qr_codes.get_qr_code_for_product(
        store, shop, product_id=product_id, product_handle=product_handle
    )
    if qr_code is None:
        raise HTTPException(status_code=404, detail="No QR code found for this product")

    return Response(content=generator.png_bytes(qr_code.id), media_type="image/png")
