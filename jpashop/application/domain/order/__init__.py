"""
Order Domain - 주문 처리 및 관리
"""

from jpashop.application.domain.order.dto import (
    OrderCreateRequestDTO,
    OrderLineResponseDTO,
    OrderListResponseDTO,
    OrderResponseDTO,
    OrderSearchDTO,
)
from jpashop.application.domain.order.service import OrderService

__all__ = [
    "OrderService",
    "OrderCreateRequestDTO",
    "OrderSearchDTO",
    "OrderLineResponseDTO",
    "OrderResponseDTO",
    "OrderListResponseDTO",
]
