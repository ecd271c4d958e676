"""
客户路由
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_customer_service
from ..schemas import CustomerRequest, CustomerResponse
from ..services import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(request: CustomerRequest, service: CustomerService = Depends(get_customer_service)):
    """创建客户"""
    customer = await service.create_customer(request.model_dump(exclude={"id"}))
    return CustomerResponse.model_validate(customer)


@router.get("", response_model=List[CustomerResponse])
async def list_customers(service: CustomerService = Depends(get_customer_service)):
    return [CustomerResponse.model_validate(c) for c in await service.list_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    return CustomerResponse.model_validate(await service.get_customer(customer_id))


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: int,
    request: CustomerRequest,
    service: CustomerService = Depends(get_customer_service),
):
    """更新客户"""
    customer = await service.update_customer(customer_id, request.model_dump(exclude={"id"}))
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    """删除客户（连同购物车和订单）"""
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
