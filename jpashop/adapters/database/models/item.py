# -*- coding: utf-8 -*-
"""
Item Model - 상품 및 재고 모델

단일 테이블 상속: dtype 컬럼으로 도서(B), 음반(A), 영화(M) 구분
"""

from enum import Enum

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from jpashop.adapters.database.connection import Base
from jpashop.adapters.database.models.base import BaseModel, IdType
from jpashop.application.common.exceptions import NotEnoughStockError


class ItemType(str, Enum):
    """상품 유형 (dtype)"""

    BOOK = "B"
    ALBUM = "A"
    MOVIE = "M"


class ItemModel(Base, BaseModel):
    """상품 모델 (추상 상위 타입)"""

    __tablename__ = "items"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # ==================== 상품 정보 ====================
    dtype: Mapped[str] = mapped_column(String(1), nullable=False, comment="상품 유형")

    name: Mapped[str] = mapped_column(String(200), nullable=False, comment="상품명")

    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0, comment="가격")

    stock_quantity: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, comment="재고 수량"
    )

    __table_args__ = (
        CheckConstraint("stock_quantity >= 0", name="ck_items_stock_non_negative"),
    )

    # 조회 시 하위 타입 컬럼 포함
    __mapper_args__ = {"polymorphic_on": "dtype", "with_polymorphic": "*"}

    # ==================== 비즈니스 로직 ====================

    def add_stock(self, quantity: int) -> None:
        """재고 증가"""
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """
        재고 감소

        Raises:
            NotEnoughStockError: 남은 재고가 0 미만이 되는 경우 (재고 변경 없음)
        """
        rest_stock = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError(self.id, quantity, self.stock_quantity)
        self.stock_quantity = rest_stock


class BookModel(ItemModel):
    """도서"""

    author: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="저자")
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True, comment="ISBN")

    __mapper_args__ = {"polymorphic_identity": ItemType.BOOK.value}


class AlbumModel(ItemModel):
    """음반"""

    artist: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="아티스트")
    etc: Mapped[str | None] = mapped_column(String(200), nullable=True, comment="기타")

    __mapper_args__ = {"polymorphic_identity": ItemType.ALBUM.value}


class MovieModel(ItemModel):
    """영화"""

    director: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="감독")
    actor: Mapped[str | None] = mapped_column(String(100), nullable=True, comment="배우")

    __mapper_args__ = {"polymorphic_identity": ItemType.MOVIE.value}
