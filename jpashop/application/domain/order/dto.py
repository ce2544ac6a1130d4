# -*- coding: utf-8 -*-
"""
Order Domain DTO - 주문 관련 데이터 전송 객체
"""

from datetime import datetime

from pydantic import Field

from jpashop.adapters.database.models.order import OrderLineModel, OrderModel, OrderStatus
from jpashop.application.common.dto import BaseDTO


# ==================== Request DTOs ====================


class OrderCreateRequestDTO(BaseDTO):
    """
    주문 생성 요청 DTO

    Attributes:
        member_id: 주문 회원 ID
        item_id: 상품 ID
        count: 주문 수량
    """

    member_id: int = Field(description="주문 회원 ID", gt=0)
    item_id: int = Field(description="상품 ID", gt=0)
    count: int = Field(description="주문 수량", gt=0)


class OrderSearchDTO(BaseDTO):
    """
    주문 검색 조건 DTO

    Attributes:
        member_name: 회원 이름 (부분 일치)
        order_status: 주문 상태 [ORDER, CANCEL]
    """

    member_name: str | None = Field(default=None, max_length=100, description="회원 이름")
    order_status: OrderStatus | None = Field(default=None, description="주문 상태")


# ==================== Response DTOs ====================


class OrderLineResponseDTO(BaseDTO):
    """
    주문 상품 응답 DTO

    Attributes:
        item_id: 상품 ID
        item_name: 상품명
        order_price: 주문 가격
        count: 주문 수량
        total_price: 주문 금액
    """

    item_id: int = Field(description="상품 ID")
    item_name: str = Field(description="상품명")
    order_price: int = Field(description="주문 가격")
    count: int = Field(description="주문 수량")
    total_price: int = Field(description="주문 금액")

    @classmethod
    def from_model(cls, order_line: OrderLineModel) -> "OrderLineResponseDTO":
        return cls(
            item_id=order_line.item_id,
            item_name=order_line.item.name,
            order_price=order_line.order_price,
            count=order_line.count,
            total_price=order_line.total_price,
        )


class OrderResponseDTO(BaseDTO):
    """
    주문 응답 DTO

    Attributes:
        id: 주문 ID
        member_id: 회원 ID
        member_name: 회원 이름
        status: 주문 상태
        delivery_status: 배송 상태
        order_date: 주문 시각
        total_price: 전체 주문 가격
        order_lines: 주문 상품 목록
    """

    id: int = Field(description="주문 ID")
    member_id: int = Field(description="회원 ID")
    member_name: str = Field(description="회원 이름")
    status: str = Field(description="주문 상태")
    delivery_status: str | None = Field(default=None, description="배송 상태")
    order_date: datetime = Field(description="주문 시각")
    total_price: int = Field(description="전체 주문 가격")
    order_lines: list[OrderLineResponseDTO] = Field(description="주문 상품 목록")

    @classmethod
    def from_model(cls, order: OrderModel) -> "OrderResponseDTO":
        return cls(
            id=order.id,
            member_id=order.member_id,
            member_name=order.member.name,
            status=order.status,
            delivery_status=order.delivery.status if order.delivery else None,
            order_date=order.order_date,
            total_price=order.total_price,
            order_lines=[OrderLineResponseDTO.from_model(line) for line in order.order_lines],
        )


class OrderListResponseDTO(BaseDTO):
    """
    주문 목록 응답 DTO

    Attributes:
        orders: 주문 목록
        total_count: 주문 수
    """

    orders: list[OrderResponseDTO] = Field(description="주문 목록")
    total_count: int = Field(description="주문 수")
