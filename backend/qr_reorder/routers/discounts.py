from typing import List

from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_201_CREATED

from ..core.deps import get_discount_repo, get_shop
from ..core.exceptions import InvalidDiscount
from ..schemas.discount import DiscountCreate, DiscountResponse
from ..services import discounts
from ..services.repository import DiscountRepository

router = APIRouter(prefix="/app/discounts", tags=["Admin / Discounts"])


@router.post("", response_model=DiscountResponse, status_code=HTTP_201_CREATED)
def create_discount(
    payload: DiscountCreate,
    shop: str = Depends(get_shop),
    repo: DiscountRepository = Depends(get_discount_repo),
):
    try:
        return discounts.create_product_discount(
            repo, shop, payload.title, payload.percentage, payload.product_id
        )
    except InvalidDiscount as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=List[DiscountResponse])
def list_discounts(shop: str = Depends(get_shop), repo: DiscountRepository = Depends(get_discount_repo)):
    return discounts.list_product_discounts(repo, shop)
