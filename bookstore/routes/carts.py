"""
购物车路由
"""
from fastapi import APIRouter, Depends

from ..dependencies import get_cart_service
from ..schemas import CartItemRequest, CartItemUpdateRequest, CartResponse
from ..services import CartService

router = APIRouter(prefix="/customers/{customer_id}/cart", tags=["cart"])


@router.get("", response_model=CartResponse)
async def get_cart(customer_id: int, service: CartService = Depends(get_cart_service)):
    """获取购物车"""
    return CartResponse.model_validate(await service.get_cart(customer_id))


@router.post("/items", response_model=CartResponse)
async def add_cart_item(
    customer_id: int,
    request: CartItemRequest,
    service: CartService = Depends(get_cart_service),
):
    """加入购物车"""
    cart = await service.add_cart_item(customer_id, request.book_id, request.quantity)
    return CartResponse.model_validate(cart)


@router.put("/items/{book_id}", response_model=CartResponse)
async def update_cart_item(
    customer_id: int,
    book_id: int,
    request: CartItemUpdateRequest,
    service: CartService = Depends(get_cart_service),
):
    """更新购物车条目数量"""
    cart = await service.update_cart_item(customer_id, book_id, request.quantity)
    return CartResponse.model_validate(cart)


@router.delete("/items/{book_id}", response_model=CartResponse)
async def remove_cart_item(customer_id: int, book_id: int, service: CartService = Depends(get_cart_service)):
    """移除购物车条目"""
    return CartResponse.model_validate(await service.remove_cart_item(customer_id, book_id))
