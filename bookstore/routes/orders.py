"""
订单路由
"""
from typing import List

from fastapi import APIRouter, Depends, status

from ..dependencies import get_checkout_service
from ..schemas import OrderResponse
from ..services import CheckoutService

router = APIRouter(prefix="/customers/{customer_id}/orders", tags=["orders"])


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(customer_id: int, service: CheckoutService = Depends(get_checkout_service)):
    """用购物车下单"""
    return OrderResponse.model_validate(await service.create_order(customer_id))


@router.get("", response_model=List[OrderResponse])
async def list_customer_orders(customer_id: int, service: CheckoutService = Depends(get_checkout_service)):
    orders = await service.get_customer_orders(customer_id)
    return [OrderResponse.model_validate(order) for order in orders]


@router.get("/{order_id}", response_model=OrderResponse)
async def get_customer_order(
    customer_id: int,
    order_id: int,
    service: CheckoutService = Depends(get_checkout_service),
):
    return OrderResponse.model_validate(await service.get_customer_order(customer_id, order_id))
