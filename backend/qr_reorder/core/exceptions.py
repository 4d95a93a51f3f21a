"""Error taxonomy shared by services and routers.

Bad-request and not-found errors are translated to HTTP responses by the
routers. ``MalformedVariantId`` and ``AppUrlNotConfigured`` are never caught:
they abort the request.
"""


class QRCodeNotFound(LookupError):
    """No QR code row matches the requested identity."""


class InvalidQRCodeId(ValueError):
    """QR code id is missing or not numeric."""


class InvalidSelection(ValueError):
    """Product/variant picker value is missing or incomplete."""


class InvalidDiscount(ValueError):
    """Discount form values are missing or not numeric."""


class MalformedVariantId(AssertionError):
    """Stored variant id does not look like gid://shopify/ProductVariant/<n>."""


class AppUrlNotConfigured(RuntimeError):
    """SHOPIFY_APP_URL is not set, so scan URLs cannot be built."""


class ShopifyAPIError(Exception):
    """Error from the Shopify Admin API."""

    def __init__(self, message: str, status_code: int | None = None, errors: list | None = None):
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message)
