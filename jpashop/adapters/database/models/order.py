# -*- coding: utf-8 -*-
"""
Order Model - 주문 및 주문 상품 모델

연관관계는 단방향:
    Order → Member, Order → Delivery, Order → OrderLine, OrderLine → Item
"""

from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jpashop.adapters.database.connection import Base
from jpashop.adapters.database.models.base import BaseModel, IdType
from jpashop.adapters.database.models.delivery import DeliveryModel
from jpashop.adapters.database.models.item import ItemModel
from jpashop.adapters.database.models.member import MemberModel
from jpashop.application.common.exceptions import (
    OrderAlreadyCancelledError,
    OrderNotCancellableError,
    ValidationError,
)


class OrderStatus(str, Enum):
    """주문 상태 [ORDER, CANCEL]"""

    ORDER = "ORDER"  # 주문
    CANCEL = "CANCEL"  # 취소


class OrderLineModel(Base, BaseModel):
    """주문 상품 모델 (주문 시점 가격/수량 스냅샷)"""

    __tablename__ = "order_lines"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    order_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True
    )

    item_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("items.id"), nullable=False, index=True
    )

    order_price: Mapped[int] = mapped_column(Integer, nullable=False, comment="주문 가격")

    count: Mapped[int] = mapped_column(Integer, nullable=False, comment="주문 수량")

    item: Mapped[ItemModel] = relationship(ItemModel, lazy="joined")

    # ==================== 생성 메서드 ====================

    @classmethod
    def create_order_line(cls, item: ItemModel, order_price: int, count: int) -> "OrderLineModel":
        """
        주문 상품 생성

        주문 수량만큼 재고를 차감하며, 재고 부족 시 NotEnoughStockError 전파
        """
        if count <= 0:
            raise ValidationError("주문 수량은 1 이상이어야 합니다", details={"count": count})

        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    # ==================== 비즈니스 로직 ====================

    def cancel(self) -> None:
        """주문 취소 - 재고 수량 원복"""
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        """주문 상품 금액 (주문 가격 * 수량)"""
        return self.order_price * self.count


class OrderModel(Base, BaseModel):
    """주문 모델"""

    __tablename__ = "orders"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # ==================== 연관 키 ====================
    member_id: Mapped[int] = mapped_column(
        IdType, ForeignKey("members.id"), nullable=False, index=True
    )

    delivery_id: Mapped[int | None] = mapped_column(
        IdType, ForeignKey("deliveries.id"), nullable=True, unique=True
    )

    # ==================== 주문 상태 ====================
    status: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default=OrderStatus.ORDER.value,
        index=True,
        comment="주문 상태",
    )

    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, comment="주문 시각"
    )

    # ==================== 연관관계 ====================
    member: Mapped[MemberModel] = relationship(MemberModel, lazy="joined")

    delivery: Mapped[DeliveryModel | None] = relationship(
        DeliveryModel, lazy="joined", cascade="all, delete-orphan", single_parent=True
    )

    order_lines: Mapped[list[OrderLineModel]] = relationship(
        OrderLineModel,
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by=OrderLineModel.id,
    )

    __table_args__ = (Index("ix_orders_member_status", "member_id", "status"),)

    # ==================== 생성 메서드 ====================

    @classmethod
    def create_order(
        cls,
        member: MemberModel,
        delivery: DeliveryModel | None,
        *order_lines: OrderLineModel,
    ) -> "OrderModel":
        """주문 생성 (상태: ORDER)"""
        return cls(
            member=member,
            delivery=delivery,
            order_lines=list(order_lines),
            status=OrderStatus.ORDER.value,
            order_date=datetime.now(timezone.utc),
        )

    # ==================== 비즈니스 로직 ====================

    def cancel(self) -> None:
        """
        주문 취소

        Raises:
            OrderAlreadyCancelledError: 이미 취소된 주문
            OrderNotCancellableError: 배송 완료된 주문
        """
        if self.is_cancelled:
            raise OrderAlreadyCancelledError(self.id)
        if self.delivery is not None and self.delivery.is_completed:
            raise OrderNotCancellableError(self.id, "이미 배송완료된 상품은 취소가 불가능합니다.")

        self.status = OrderStatus.CANCEL.value
        for order_line in self.order_lines:
            order_line.cancel()

    # ==================== 조회 로직 ====================

    @property
    def is_cancelled(self) -> bool:
        """취소 여부"""
        return self.status == OrderStatus.CANCEL.value

    @property
    def total_price(self) -> int:
        """전체 주문 가격 (Σ 주문 가격 * 수량)"""
        return sum(order_line.total_price for order_line in self.order_lines)
