# qr_reorder/core/qr_utils.py
import base64
import logging
from io import BytesIO
from urllib.parse import urljoin

import qrcode
from starlette.concurrency import run_in_threadpool

from .exceptions import AppUrlNotConfigured

logger = logging.getLogger(__name__)

QR_BOX_SIZE = 10
QR_BORDER = 4
QR_IMAGE_FORMAT = "PNG"
DATA_URL_PREFIX = "data:image/png;base64,"


# -----------------------------------------------------
# Scan URL helpers
# -----------------------------------------------------
def scan_path(qr_code_id: int) -> str:
    return f"/qrcodes/{qr_code_id}/scan"


def decode_data_url(data_url: str) -> bytes:
    """Turn ``data:image/png;base64,...`` back into raw PNG bytes."""
    _, _, payload = data_url.partition(",")
    return base64.b64decode(payload)


# -----------------------------------------------------
# QR image generator
# -----------------------------------------------------
class QRImageGenerator:
    """Renders the scan URL of a QR code row as a PNG.

    ``app_url`` is the public base URL of this app. It is checked when an
    image is requested, so a misconfigured deployment still boots but fails
    loudly on every image.
    """

    def __init__(self, app_url: str | None):
        self.app_url = app_url

    def scan_url(self, qr_code_id: int) -> str:
        if not self.app_url:
            raise AppUrlNotConfigured("SHOPIFY_APP_URL is not configured")
        return urljoin(self.app_url, scan_path(qr_code_id))

    def png_bytes(self, qr_code_id: int) -> bytes:
        url = self.scan_url(qr_code_id)
        qr = qrcode.QRCode(
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=QR_BOX_SIZE,
            border=QR_BORDER,
        )
        qr.add_data(url)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white")

        buf = BytesIO()
        img.save(buf, format=QR_IMAGE_FORMAT)
        logger.debug("QR generated for %s", url)
        return buf.getvalue()

    def data_url(self, qr_code_id: int) -> str:
        """Base64 data URL, ready for an ``<img src>``."""
        encoded = base64.b64encode(self.png_bytes(qr_code_id)).decode()
        return f"{DATA_URL_PREFIX}{encoded}"

    async def data_url_async(self, qr_code_id: int) -> str:
        # PNG encoding is CPU work; keep it off the event loop
        return await run_in_threadpool(self.data_url, qr_code_id)
