# -*- coding: utf-8 -*-
"""
Item Router - 상품 API 엔드포인트
"""

from fastapi import APIRouter, Query, status

from jpashop.adapters.database.models.item import AlbumModel, BookModel, ItemType, MovieModel
from jpashop.application.common.dependencies import ItemServiceDep
from jpashop.application.common.dto import IdResponseDTO, ResponseDTO
from jpashop.application.common.exceptions import ResourceNotFoundError
from jpashop.application.domain.item.dto import (
    AlbumCreateRequestDTO,
    BookCreateRequestDTO,
    ItemListResponseDTO,
    ItemResponseDTO,
    ItemUpdateRequestDTO,
    MovieCreateRequestDTO,
)

router = APIRouter()


@router.post(
    "/books",
    response_model=ResponseDTO[IdResponseDTO],
    status_code=status.HTTP_201_CREATED,
    summary="도서 등록",
)
async def create_book(
    request: BookCreateRequestDTO, service: ItemServiceDep
) -> ResponseDTO[IdResponseDTO]:
    """도서 등록"""
    item_id = await service.save_item(BookModel(**request.model_dump()))
    return ResponseDTO.success_response(IdResponseDTO(id=item_id), "Book created successfully")


@router.post(
    "/albums",
    response_model=ResponseDTO[IdResponseDTO],
    status_code=status.HTTP_201_CREATED,
    summary="음반 등록",
)
async def create_album(
    request: AlbumCreateRequestDTO, service: ItemServiceDep
) -> ResponseDTO[IdResponseDTO]:
    """음반 등록"""
    item_id = await service.save_item(AlbumModel(**request.model_dump()))
    return ResponseDTO.success_response(IdResponseDTO(id=item_id), "Album created successfully")


@router.post(
    "/movies",
    response_model=ResponseDTO[IdResponseDTO],
    status_code=status.HTTP_201_CREATED,
    summary="영화 등록",
)
async def create_movie(
    request: MovieCreateRequestDTO, service: ItemServiceDep
) -> ResponseDTO[IdResponseDTO]:
    """영화 등록"""
    item_id = await service.save_item(MovieModel(**request.model_dump()))
    return ResponseDTO.success_response(IdResponseDTO(id=item_id), "Movie created successfully")


@router.get(
    "",
    response_model=ResponseDTO[ItemListResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="상품 목록 조회",
)
async def get_item_list(
    service: ItemServiceDep,
    item_type: ItemType | None = Query(default=None, description="상품 유형 (B/A/M)"),
) -> ResponseDTO[ItemListResponseDTO]:
    """상품 목록 조회"""
    items = await service.find_items(item_type)
    data = ItemListResponseDTO(
        items=[ItemResponseDTO.model_validate(item) for item in items],
        count=len(items),
    )
    return ResponseDTO.success_response(data, "Item list retrieved successfully")


@router.get(
    "/{item_id}",
    response_model=ResponseDTO[ItemResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="상품 조회",
)
async def get_item(item_id: int, service: ItemServiceDep) -> ResponseDTO[ItemResponseDTO]:
    """상품 조회"""
    item = await service.find_one(item_id)
    if item is None:
        raise ResourceNotFoundError("Item", item_id)
    return ResponseDTO.success_response(
        ItemResponseDTO.model_validate(item), "Item retrieved successfully"
    )


@router.put(
    "/{item_id}",
    response_model=ResponseDTO[ItemResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="상품 수정",
)
async def update_item(
    item_id: int, request: ItemUpdateRequestDTO, service: ItemServiceDep
) -> ResponseDTO[ItemResponseDTO]:
    """상품 수정"""
    item = await service.update_item(
        item_id, request.name, request.price, request.stock_quantity
    )
    return ResponseDTO.success_response(
        ItemResponseDTO.model_validate(item), "Item updated successfully"
    )
