# -*- coding: utf-8 -*-
"""
Order Repository - 주문 데이터 접근 계층
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.models.member import MemberModel
from jpashop.adapters.database.models.order import OrderModel, OrderStatus
from jpashop.adapters.database.repositories.base_repository import (
    BaseRepository,
    SearchableMixin,
)


class OrderRepository(BaseRepository[OrderModel], SearchableMixin):
    """주문 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(OrderModel, session)

    # ==================== 주문 조회 (도메인 특화) ====================

    async def find_all(
        self,
        member_name: str | None = None,
        order_status: OrderStatus | None = None,
        limit: int = 1000,
    ) -> Sequence[OrderModel]:
        """
        주문 검색

        Args:
            member_name: 회원 이름 (부분 일치)
            order_status: 주문 상태
            limit: 최대 조회 건수

        Returns:
            Sequence[OrderModel]: 최신 주문 순 목록
        """
        stmt = select(self.model).join(MemberModel, self.model.member_id == MemberModel.id)
        if member_name:
            stmt = stmt.where(MemberModel.name.contains(member_name, autoescape=True))
        if order_status:
            stmt = stmt.where(self.model.status == OrderStatus(order_status).value)
        stmt = stmt.order_by(self.model.id.desc())

        return await self.search(stmt, limit=limit)
