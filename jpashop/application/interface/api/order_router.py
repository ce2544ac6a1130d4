# -*- coding: utf-8 -*-
"""
Order Router - 주문 API 엔드포인트
"""

from fastapi import APIRouter, Query, status

from jpashop.adapters.database.models.order import OrderStatus
from jpashop.application.common.dependencies import OrderServiceDep
from jpashop.application.common.dto import IdResponseDTO, ResponseDTO
from jpashop.application.common.exceptions import ResourceNotFoundError
from jpashop.application.domain.order.dto import (
    OrderCreateRequestDTO,
    OrderListResponseDTO,
    OrderResponseDTO,
    OrderSearchDTO,
)

router = APIRouter()


@router.post(
    "",
    response_model=ResponseDTO[IdResponseDTO],
    status_code=status.HTTP_201_CREATED,
    summary="주문 생성",
    description="재고 부족 시 422 (재고 변경 없음)",
)
async def create_order(
    request: OrderCreateRequestDTO, service: OrderServiceDep
) -> ResponseDTO[IdResponseDTO]:
    """주문 생성"""
    order_id = await service.order(request.member_id, request.item_id, request.count)
    return ResponseDTO.success_response(IdResponseDTO(id=order_id), "Order created successfully")


@router.get(
    "",
    response_model=ResponseDTO[OrderListResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="주문 검색",
    description="회원 이름(부분 일치), 주문 상태로 검색",
)
async def get_order_list(
    service: OrderServiceDep,
    member_name: str | None = Query(default=None, description="회원 이름"),
    order_status: OrderStatus | None = Query(default=None, description="주문 상태"),
) -> ResponseDTO[OrderListResponseDTO]:
    """주문 검색"""
    orders = await service.find_orders(
        OrderSearchDTO(member_name=member_name, order_status=order_status)
    )
    data = OrderListResponseDTO(
        orders=[OrderResponseDTO.from_model(order) for order in orders],
        total_count=len(orders),
    )
    return ResponseDTO.success_response(data, "Order list retrieved successfully")


@router.get(
    "/{order_id}",
    response_model=ResponseDTO[OrderResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="주문 조회",
)
async def get_order(order_id: int, service: OrderServiceDep) -> ResponseDTO[OrderResponseDTO]:
    """주문 조회"""
    order = await service.find_one(order_id)
    if order is None:
        raise ResourceNotFoundError("Order", order_id)
    return ResponseDTO.success_response(
        OrderResponseDTO.from_model(order), "Order retrieved successfully"
    )


@router.post(
    "/{order_id}/cancel",
    response_model=ResponseDTO[OrderResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="주문 취소",
    description="재고 원복 후 CANCEL 상태로 변경 (재취소 시 422)",
)
async def cancel_order(order_id: int, service: OrderServiceDep) -> ResponseDTO[OrderResponseDTO]:
    """주문 취소"""
    order = await service.cancel_order(order_id)
    return ResponseDTO.success_response(
        OrderResponseDTO.from_model(order), "Order canceled successfully"
    )
