"""QR code core: enrichment, destination resolution, scan recording, creation."""

import asyncio
import logging
import re
from typing import List, Optional

from ..core.exceptions import (
    InvalidQRCodeId,
    InvalidSelection,
    MalformedVariantId,
    QRCodeNotFound,
)
from ..core.qr_utils import QRImageGenerator
from ..models.qr_code import QRCode, DESTINATION_CHECKOUT, MAX_QR_CODE_ID
from ..schemas.qr_code import EnrichedQRCode, QRCodeRecord
from .repository import QRCodeStore
from .shopify import ProductDataSource

logger = logging.getLogger(__name__)

VARIANT_GID_RE = re.compile(r"gid://shopify/ProductVariant/([0-9]+)")
QR_CODE_ID_RE = re.compile(r"[0-9]+")
DEFAULT_TITLE = "QR reorder"


# -----------------------------------------------------
# Lookup
# -----------------------------------------------------
def parse_qr_code_id(raw: Optional[str]) -> int:
    """Path segment -> integer id. Raises InvalidQRCodeId."""
    if raw is None or not str(raw).strip():
        raise InvalidQRCodeId("Missing QR code id")
    raw = str(raw).strip()
    if not QR_CODE_ID_RE.fullmatch(raw):
        raise InvalidQRCodeId("Invalid QR code id")
    return int(raw)


def get_qr_code_record(store: QRCodeStore, qr_code_id: int) -> Optional[QRCode]:
    if not 0 < qr_code_id <= MAX_QR_CODE_ID:
        return None
    return store.get(qr_code_id)


def get_qr_code_for_product(
    store: QRCodeStore,
    shop: str,
    product_id: Optional[str] = None,
    product_handle: Optional[str] = None,
) -> Optional[QRCode]:
    """Newest QR code of ``shop`` for a product, by id or by handle."""
    return store.first_for_product(shop, product_id=product_id, product_handle=product_handle)


# -----------------------------------------------------
# Destination
# -----------------------------------------------------
def get_destination_url(qr_code) -> str:
    """Cart permalink adding one unit of the QR code's variant.

    Every code goes straight to a pre-filled cart, so a label printed on the
    package is a one-tap reorder.
    """
    match = VARIANT_GID_RE.search(qr_code.product_variant_id or "")
    if not match:
        raise MalformedVariantId(
            f"Unrecognized product variant ID: {qr_code.product_variant_id!r}"
        )
    return f"https://{qr_code.shop}/cart/{match.group(1)}:1"


# -----------------------------------------------------
# Scans
# -----------------------------------------------------
def record_scan(store: QRCodeStore, qr_code) -> None:
    store.increment_scans(qr_code.id)


def scan(store: QRCodeStore, qr_code_id: int) -> str:
    """Resolve the redirect target for a scan and count it.

    The counter is bumped before the redirect is returned; a row whose variant
    id cannot be resolved is not counted.
    """
    qr_code = get_qr_code_record(store, qr_code_id)
    if qr_code is None:
        raise QRCodeNotFound(f"QR code {qr_code_id} not found")

    destination = get_destination_url(qr_code)
    record_scan(store, qr_code)
    logger.info("Scan recorded for QR %s -> %s", qr_code.id, destination)
    return destination


# -----------------------------------------------------
# Enrichment
# -----------------------------------------------------
async def supplement_qr_code(
    qr_code,
    source: ProductDataSource,
    generator: QRImageGenerator,
) -> EnrichedQRCode:
    """Join a stored row with live Shopify data and a fresh QR image.

    The remote query and the image run concurrently. A product deleted
    upstream leaves the product fields as None.
    """
    image, product = await asyncio.gather(
        generator.data_url_async(qr_code.id),
        source.fetch_product(qr_code.product_id, qr_code.product_variant_id),
    )
    if product is None:
        logger.warning(
            "Product %s for QR %s not found on %s", qr_code.product_id, qr_code.id, qr_code.shop
        )

    record = QRCodeRecord.model_validate(qr_code)
    return EnrichedQRCode(
        **record.model_dump(),
        qr_image=image,
        product_title=product.title if product else None,
        product_image=product.image_url if product else None,
        price=product.price if product else None,
    )


async def get_qr_code(
    store: QRCodeStore,
    qr_code_id: int,
    source: ProductDataSource,
    generator: QRImageGenerator,
    shop: Optional[str] = None,
) -> Optional[EnrichedQRCode]:
    """One enriched QR code; a row owned by another ``shop`` counts as missing."""
    qr_code = get_qr_code_record(store, qr_code_id)
    if qr_code is None or (shop is not None and qr_code.shop != shop):
        return None
    return await supplement_qr_code(qr_code, source, generator)


async def get_qr_codes(
    store: QRCodeStore,
    shop: str,
    source: ProductDataSource,
    generator: QRImageGenerator,
) -> List[EnrichedQRCode]:
    """All QR codes of a shop, newest first, enriched one remote call each."""
    qr_codes = store.list_for_shop(shop)
    if not qr_codes:
        return []
    return list(
        await asyncio.gather(
            *(supplement_qr_code(qr_code, source, generator) for qr_code in qr_codes)
        )
    )


# -----------------------------------------------------
# Creation
# -----------------------------------------------------
def parse_selection(selection: Optional[str]):
    """Split the picker value ``productId|variantId|handle``."""
    if not selection or not selection.strip():
        raise InvalidSelection("Please select a product variant.")

    parts = [p.strip() for p in selection.split("|")]
    if len(parts) != 3 or not all(parts):
        raise InvalidSelection("Product variant selection is incomplete.")
    return tuple(parts)


def create_qr_code(
    store: QRCodeStore,
    shop: str,
    title: Optional[str],
    selection: Optional[str],
) -> QRCode:
    product_id, product_variant_id, product_handle = parse_selection(selection)
    qr_code = store.create(
        shop=shop,
        title=(title or "").strip() or DEFAULT_TITLE,
        product_id=product_id,
        product_handle=product_handle,
        product_variant_id=product_variant_id,
        destination=DESTINATION_CHECKOUT,
    )
    logger.info("QR %s created for %s on %s", qr_code.id, product_variant_id, shop)
    return qr_code
