"""
书籍路由
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_catalog_service
from ..schemas import BookRequest, BookResponse
from ..services import CatalogService

router = APIRouter(prefix="/books", tags=["books"])


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def create_book(request: BookRequest, service: CatalogService = Depends(get_catalog_service)):
    """创建书籍"""
    book = await service.create_book(request.model_dump(exclude={"id"}))
    return BookResponse.model_validate(book)


@router.get("", response_model=List[BookResponse])
async def list_books(service: CatalogService = Depends(get_catalog_service)):
    """获取书籍列表"""
    return [BookResponse.model_validate(book) for book in await service.list_books()]


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(book_id: int, service: CatalogService = Depends(get_catalog_service)):
    """获取单本书籍"""
    return BookResponse.model_validate(await service.get_book(book_id))


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int,
    request: BookRequest,
    service: CatalogService = Depends(get_catalog_service),
):
    """更新书籍"""
    book = await service.update_book(book_id, request.model_dump(exclude={"id"}))
    return BookResponse.model_validate(book)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_book(book_id: int, service: CatalogService = Depends(get_catalog_service)):
    """删除书籍"""
    await service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
