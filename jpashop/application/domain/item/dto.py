# -*- coding: utf-8 -*-
"""
Item Domain DTO - 상품 관련 데이터 전송 객체
"""

from pydantic import Field

from jpashop.application.common.dto import BaseDTO


# ==================== Request DTOs ====================


class ItemBaseRequestDTO(BaseDTO):
    """
    상품 공통 요청 DTO

    Attributes:
        name: 상품명
        price: 가격
        stock_quantity: 재고 수량
    """

    name: str = Field(description="상품명", min_length=1, max_length=200)
    price: int = Field(description="가격", ge=0)
    stock_quantity: int = Field(description="재고 수량", ge=0)


class BookCreateRequestDTO(ItemBaseRequestDTO):
    """도서 등록 요청 DTO"""

    author: str | None = Field(default=None, max_length=100, description="저자")
    isbn: str | None = Field(default=None, max_length=20, description="ISBN")


class AlbumCreateRequestDTO(ItemBaseRequestDTO):
    """음반 등록 요청 DTO"""

    artist: str | None = Field(default=None, max_length=100, description="아티스트")
    etc: str | None = Field(default=None, max_length=200, description="기타")


class MovieCreateRequestDTO(ItemBaseRequestDTO):
    """영화 등록 요청 DTO"""

    director: str | None = Field(default=None, max_length=100, description="감독")
    actor: str | None = Field(default=None, max_length=100, description="배우")


class ItemUpdateRequestDTO(ItemBaseRequestDTO):
    """상품 수정 요청 DTO (이름, 가격, 재고)"""

    pass


# ==================== Response DTOs ====================


class ItemResponseDTO(BaseDTO):
    """
    상품 응답 DTO

    하위 타입 전용 필드는 해당 타입에서만 채워짐

    Attributes:
        id: 상품 ID
        dtype: 상품 유형 (B/A/M)
        name: 상품명
        price: 가격
        stock_quantity: 재고 수량
    """

    id: int = Field(description="상품 ID")
    dtype: str = Field(description="상품 유형 (B: 도서, A: 음반, M: 영화)")
    name: str = Field(description="상품명")
    price: int = Field(description="가격")
    stock_quantity: int = Field(description="재고 수량")
    author: str | None = Field(default=None, description="저자")
    isbn: str | None = Field(default=None, description="ISBN")
    artist: str | None = Field(default=None, description="아티스트")
    etc: str | None = Field(default=None, description="기타")
    director: str | None = Field(default=None, description="감독")
    actor: str | None = Field(default=None, description="배우")


class ItemListResponseDTO(BaseDTO):
    """
    상품 목록 응답 DTO

    Attributes:
        items: 상품 목록
        count: 상품 수
    """

    items: list[ItemResponseDTO] = Field(description="상품 목록")
    count: int = Field(description="상품 수")
