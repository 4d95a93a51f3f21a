from .qr_code import QRCode
from .discount import ProductDiscount

__all__ = ["QRCode", "ProductDiscount"]
