"""
作者路由
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..dependencies import get_catalog_service
from ..schemas import AuthorRequest, AuthorResponse, BookResponse
from ..services import CatalogService

router = APIRouter(prefix="/authors", tags=["authors"])


@router.post("", response_model=AuthorResponse, status_code=status.HTTP_201_CREATED)
async def create_author(request: AuthorRequest, service: CatalogService = Depends(get_catalog_service)):
    """创建作者（可指定ID）"""
    author = await service.create_author(request.model_dump())
    return AuthorResponse.model_validate(author)


@router.get("", response_model=List[AuthorResponse])
async def list_authors(service: CatalogService = Depends(get_catalog_service)):
    return [AuthorResponse.model_validate(author) for author in await service.list_authors()]


@router.get("/{author_id}", response_model=AuthorResponse)
async def get_author(author_id: int, service: CatalogService = Depends(get_catalog_service)):
    return AuthorResponse.model_validate(await service.get_author(author_id))


@router.put("/{author_id}", response_model=AuthorResponse)
async def update_author(
    author_id: int,
    request: AuthorRequest,
    service: CatalogService = Depends(get_catalog_service),
):
    """更新作者"""
    author = await service.update_author(author_id, request.model_dump(exclude={"id"}))
    return AuthorResponse.model_validate(author)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_author(author_id: int, service: CatalogService = Depends(get_catalog_service)):
    """删除作者（仍有书籍时返回400）"""
    await service.delete_author(author_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{author_id}/books", response_model=List[BookResponse])
async def list_books_by_author(author_id: int, service: CatalogService = Depends(get_catalog_service)):
    """获取作者的全部书籍"""
    books = await service.list_books_by_author(author_id)
    return [BookResponse.model_validate(book) for book in books]
