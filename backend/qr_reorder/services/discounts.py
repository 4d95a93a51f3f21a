import logging
import math
from typing import List, Optional, Union

from ..core.exceptions import InvalidDiscount
from ..models.discount import ProductDiscount
from .repository import DiscountRepository

logger = logging.getLogger(__name__)


def _parse_percentage(value: Union[float, str, None]) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidDiscount("percentage is required")
    try:
        pct = float(value)
    except (TypeError, ValueError):
        raise InvalidDiscount("percentage must be a number")
    if math.isnan(pct) or math.isinf(pct):
        raise InvalidDiscount("percentage must be a number")
    return pct


def create_product_discount(
    repo: DiscountRepository,
    shop: Optional[str],
    title: Optional[str],
    percentage: Union[float, str, None],
    product_id: Optional[str],
) -> ProductDiscount:
    if not shop:
        raise InvalidDiscount("shop is required")
    if not title or not title.strip():
        raise InvalidDiscount("title is required")
    if not product_id:
        raise InvalidDiscount("productId is required")

    pct = _parse_percentage(percentage)
    discount = repo.create(shop=shop, title=title.strip(), percentage=pct, product_id=product_id)
    logger.info("Discount %s (%s%%) created for %s on %s", discount.id, pct, product_id, shop)
    return discount


def list_product_discounts(repo: DiscountRepository, shop: str) -> List[ProductDiscount]:
    return repo.list_for_shop(shop)
