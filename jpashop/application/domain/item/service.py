# -*- coding: utf-8 -*-
"""
Item Service - 상품 등록/수정/조회 서비스
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.models.item import ItemModel, ItemType
from jpashop.adapters.database.repositories.item_repository import ItemRepository
from jpashop.application.common.decorators import transaction
from jpashop.application.common.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


class ItemService:
    """상품 서비스"""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.item_repo = ItemRepository(session)

    @transaction
    async def save_item(self, item: ItemModel) -> int:
        """상품 등록 후 식별자 반환"""
        await self.item_repo.save(item)
        logger.info(f"[Item] saved id={item.id} type={item.dtype} stock={item.stock_quantity}")
        return item.id

    @transaction
    async def update_item(
        self, item_id: int, name: str, price: int, stock_quantity: int
    ) -> ItemModel:
        """
        상품 수정

        조회한 엔티티를 변경한 뒤 명시적으로 저장

        Raises:
            ResourceNotFoundError: 상품이 없는 경우
        """
        item = await self.item_repo.get_by_id(item_id)
        if item is None:
            raise ResourceNotFoundError("Item", item_id)

        item.name = name
        item.price = price
        item.stock_quantity = stock_quantity
        await self.item_repo.save(item)
        return item

    async def find_items(self, item_type: ItemType | None = None) -> Sequence[ItemModel]:
        """상품 목록 조회 (유형 필터 선택)"""
        if item_type is not None:
            return await self.item_repo.get_by_type(item_type)
        return await self.item_repo.get_all()

    async def find_one(self, item_id: int) -> ItemModel | None:
        """특정 상품 조회 (없으면 None)"""
        return await self.item_repo.get_by_id(item_id)
