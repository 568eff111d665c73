from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.schemas.catalog.catalog_schemas import CartAdd, CartState
from app.services.catalog.cart_service import add_to_cart, load_cart
from app.utils.get_user import get_current_owner
from app.utils.response import APIResponse, success_response

router = APIRouter(prefix="/cart", tags=["Cart"])


@router.get("/", response_model=APIResponse[CartState])
async def get_cart_api(
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    cart = await load_cart(db, owner_id)
    return success_response("Cart fetched successfully", cart)


@router.post("/items", response_model=APIResponse[CartState])
async def add_to_cart_api(
    payload: CartAdd,
    db: AsyncSession = Depends(get_db),
    owner_id: str = Depends(get_current_owner),
):
    cart = await add_to_cart(db, owner_id, payload)
    return success_response("Item added to cart", cart)
