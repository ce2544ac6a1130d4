"""
Item Domain - 상품 및 재고 관리
"""

from jpashop.application.domain.item.dto import (
    AlbumCreateRequestDTO,
    BookCreateRequestDTO,
    ItemListResponseDTO,
    ItemResponseDTO,
    ItemUpdateRequestDTO,
    MovieCreateRequestDTO,
)
from jpashop.application.domain.item.service import ItemService

__all__ = [
    "ItemService",
    "BookCreateRequestDTO",
    "AlbumCreateRequestDTO",
    "MovieCreateRequestDTO",
    "ItemUpdateRequestDTO",
    "ItemResponseDTO",
    "ItemListResponseDTO",
]
