"""Async client for the Shopify Admin GraphQL API.

Only the two queries the app needs: product data for enriching QR codes,
and the product/variant list for the creation picker.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Protocol

import httpx

from ..core.exceptions import ShopifyAPIError

logger = logging.getLogger(__name__)

PRODUCT_DATA_QUERY = """
query ProductData($id: ID!, $variantId: ID!) {
  product(id: $id) {
    title
    featuredImage {
      url
    }
  }
  productVariant(id: $variantId) {
    price
  }
}
"""

PRODUCT_OPTIONS_QUERY = """
query ReorderProductsForQR($first: Int!, $variants: Int!) {
  products(first: $first) {
    edges {
      node {
        id
        title
        handle
        variants(first: $variants) {
          edges {
            node {
              id
              title
            }
          }
        }
      }
    }
  }
}
"""


@dataclass
class ProductData:
    """Live product fields shown next to a QR code; any may be missing."""

    title: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[str] = None


@dataclass
class VariantOption:
    id: str
    title: str


@dataclass
class ProductOption:
    id: str
    title: str
    handle: str
    variants: List[VariantOption] = field(default_factory=list)


class ProductDataSource(Protocol):
    async def fetch_product(self, product_id: str, variant_id: str) -> Optional[ProductData]: ...


class ShopifyAdminClient:
    def __init__(
        self,
        shop: str,
        access_token: str,
        api_version: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.shop = shop
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self.transport = transport

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop}/admin/api/{self.api_version}/graphql.json"

    def _get_async_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            headers={
                "X-Shopify-Access-Token": self.access_token,
                "Content-Type": "application/json",
            },
        )

    async def graphql(self, query: str, variables: Optional[dict] = None) -> dict:
        """Run one query and return its ``data`` object."""
        payload = {"query": query, "variables": variables or {}}
        try:
            async with self._get_async_client() as client:
                response = await client.post(self.endpoint, json=payload)
        except httpx.HTTPError as e:
            logger.error("Shopify request to %s failed: %s", self.shop, e)
            raise ShopifyAPIError(f"Shopify request failed: {e}") from e

        if response.status_code != 200:
            logger.error("Shopify returned %s for %s", response.status_code, self.shop)
            raise ShopifyAPIError(
                f"Shopify returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ShopifyAPIError("Shopify returned a non-JSON body") from e

        data = body.get("data")
        errors = body.get("errors")
        if data is None:
            logger.error("Shopify GraphQL errors for %s: %s", self.shop, errors)
            raise ShopifyAPIError("Shopify GraphQL error", errors=errors if isinstance(errors, list) else [])

        # partial results: fields that failed come back null
        if errors:
            logger.warning("Shopify GraphQL partial errors for %s: %s", self.shop, errors)
        return data

    async def fetch_product(self, product_id: str, variant_id: str) -> Optional[ProductData]:
        data = await self.graphql(
            PRODUCT_DATA_QUERY, {"id": product_id, "variantId": variant_id}
        )
        product = data.get("product")
        variant = data.get("productVariant")
        if product is None and variant is None:
            return None

        product = product or {}
        image = product.get("featuredImage") or {}
        return ProductData(
            title=product.get("title"),
            image_url=image.get("url"),
            price=_as_text((variant or {}).get("price")),
        )

    async def list_products(self, first: int = 20, variants: int = 10) -> List[ProductOption]:
        data = await self.graphql(
            PRODUCT_OPTIONS_QUERY, {"first": first, "variants": variants}
        )
        edges = ((data.get("products") or {}).get("edges")) or []

        products = []
        for edge in edges:
            node = edge.get("node") or {}
            variant_edges = ((node.get("variants") or {}).get("edges")) or []
            products.append(
                ProductOption(
                    id=node.get("id"),
                    title=node.get("title"),
                    handle=node.get("handle"),
                    variants=[
                        VariantOption(id=v["node"]["id"], title=v["node"]["title"])
                        for v in variant_edges
                    ],
                )
            )
        return products


def _as_text(value: Any) -> Optional[str]:
    # Money scalar arrives as a string; older API versions sent a number
    if value is None:
        return None
    return str(value)
