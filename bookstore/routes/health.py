"""
健康检查路由
"""
from fastapi import APIRouter, Depends

from ..dependencies import ServiceContainer, get_services

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(services: ServiceContainer = Depends(get_services)):
    """健康检查接口"""
    return {"status": "healthy", "data": services.store.stats()}
