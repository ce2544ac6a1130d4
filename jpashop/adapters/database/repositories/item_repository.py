# -*- coding: utf-8 -*-
"""
Item Repository - 상품 데이터 접근 계층
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.models.item import ItemModel, ItemType
from jpashop.adapters.database.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[ItemModel]):
    """상품 Repository (도서/음반/영화 공용)"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(ItemModel, session)

    async def get_by_type(
        self, item_type: ItemType, limit: int = 100, offset: int = 0
    ) -> Sequence[ItemModel]:
        """상품 유형별 조회"""
        return await self.get_many(limit=limit, offset=offset, dtype=item_type.value)
