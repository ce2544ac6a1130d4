# -*- coding: utf-8 -*-
"""
Order Service - 주문 처리 서비스

상태 전이: ORDER → CANCEL (종료 상태)

재고 불변식:
    활성 주문(ORDER)이 차감한 수량 + 현재 재고 = 최초 재고
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.models.delivery import DeliveryModel
from jpashop.adapters.database.models.order import OrderLineModel, OrderModel
from jpashop.adapters.database.repositories.item_repository import ItemRepository
from jpashop.adapters.database.repositories.member_repository import MemberRepository
from jpashop.adapters.database.repositories.order_repository import OrderRepository
from jpashop.application.common.decorators import log_execution, transaction
from jpashop.application.common.exceptions import (
    NotEnoughStockError,
    OrderError,
    ResourceNotFoundError,
)
from jpashop.application.domain.order.dto import OrderSearchDTO
from jpashop.settings.config import settings

logger = logging.getLogger(__name__)


class OrderService:
    """
    주문 서비스

    주문 생성, 취소, 검색
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.member_repo = MemberRepository(session)
        self.item_repo = ItemRepository(session)
        self.order_repo = OrderRepository(session)

    # ==================== 주문 생성 ====================

    @transaction
    async def order(self, member_id: int, item_id: int, count: int) -> int:
        """
        주문 생성

        Args:
            member_id: 주문 회원 ID
            item_id: 상품 ID
            count: 주문 수량

        Returns:
            int: 주문 ID

        Raises:
            ResourceNotFoundError: 회원 또는 상품이 없는 경우
            NotEnoughStockError: 재고 부족 (트랜잭션 롤백)
        """
        member = await self.member_repo.get_by_id(member_id)
        if member is None:
            raise ResourceNotFoundError("Member", member_id)

        item = await self.item_repo.get_for_update(item_id)
        if item is None:
            raise ResourceNotFoundError("Item", item_id)

        # 배송 정보 (회원 주소 스냅샷)
        delivery = DeliveryModel(address=member.address)

        try:
            order_line = OrderLineModel.create_order_line(item, item.price, count)
        except NotEnoughStockError:
            logger.warning(
                f"[Order] not enough stock item={item_id} requested={count} "
                f"available={item.stock_quantity}"
            )
            raise

        order = OrderModel.create_order(member, delivery, order_line)

        await self.item_repo.save(item)
        await self.order_repo.save(order)

        logger.info(
            f"[Order] ORDER id={order.id} member={member_id} item={item_id} "
            f"count={count} total={order.total_price}"
        )
        return order.id

    # ==================== 주문 취소 ====================

    @transaction
    async def cancel_order(self, order_id: int) -> OrderModel:
        """
        주문 취소

        주문 상품별 재고를 원복하고 상태를 CANCEL로 변경

        Raises:
            ResourceNotFoundError: 주문이 없는 경우
            OrderAlreadyCancelledError: 이미 취소된 주문
            OrderNotCancellableError: 배송 완료된 주문
        """
        order = await self.order_repo.get_for_update(order_id)
        if order is None:
            raise ResourceNotFoundError("Order", order_id)

        # 원복 대상 상품 행 잠금
        for order_line in order.order_lines:
            await self.item_repo.get_for_update(order_line.item_id)

        try:
            order.cancel()
        except OrderError as e:
            logger.warning(f"[Order] cancel rejected id={order_id}: {e.message}")
            raise

        await self.item_repo.save_all([line.item for line in order.order_lines])
        await self.order_repo.save(order)

        logger.info(f"[Order] CANCEL id={order_id}")
        return order

    # ==================== 주문 조회 ====================

    async def find_one(self, order_id: int) -> OrderModel | None:
        """특정 주문 조회 (없으면 None)"""
        return await self.order_repo.get_by_id(order_id)

    @log_execution
    async def find_orders(self, search: OrderSearchDTO | None = None) -> Sequence[OrderModel]:
        """주문 검색 (회원 이름, 주문 상태)"""
        search = search or OrderSearchDTO()
        return await self.order_repo.find_all(
            member_name=search.member_name,
            order_status=search.order_status,
            limit=settings.order_search_limit,
        )
