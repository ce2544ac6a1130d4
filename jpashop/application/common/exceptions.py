# -*- coding: utf-8 -*-
"""
Common Exceptions - 공통 예외 클래스

애플리케이션 전역에서 사용하는 커스텀 예외 정의
"""

from typing import Any


# ==================== Base Exception ====================


class ApplicationError(Exception):
    """
    애플리케이션 기본 예외

    모든 커스텀 예외의 베이스 클래스
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.status_code = status_code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        return {
            "code": self.code,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }


# ==================== Validation Exceptions ====================


class ValidationError(ApplicationError):
    """검증 실패 예외"""

    def __init__(self, message: str = "Validation failed", details: dict[str, Any] | None = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=400, details=details)


# ==================== Resource Exceptions ====================


class ResourceNotFoundError(ApplicationError):
    """리소스를 찾을 수 없음 예외"""

    def __init__(self, resource: str, identifier: str | int):
        super().__init__(
            message=f"{resource} not found: {identifier}",
            code="RESOURCE_NOT_FOUND",
            status_code=404,
            details={"resource": resource, "identifier": str(identifier)},
        )


# ==================== Business Logic Exceptions ====================


class BusinessLogicError(ApplicationError):
    """비즈니스 로직 예외"""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: str = "BUSINESS_LOGIC_ERROR",
        status_code: int = 422,
    ):
        super().__init__(message=message, code=code, status_code=status_code, details=details)


class DuplicateMemberError(BusinessLogicError):
    """이미 존재하는 회원 예외"""

    def __init__(self, name: str):
        super().__init__(
            message="이미 존재하는 회원입니다.",
            details={"name": name},
            code="DUPLICATE_MEMBER",
            status_code=409,
        )


class NotEnoughStockError(BusinessLogicError):
    """재고 부족 예외"""

    def __init__(self, item_id: int | None, requested: int, available: int):
        super().__init__(
            message="need more stock",
            details={"item_id": item_id, "requested": requested, "available": available},
            code="NOT_ENOUGH_STOCK",
        )


class OrderError(BusinessLogicError):
    """주문 관련 예외"""

    def __init__(self, message: str, details: dict[str, Any] | None = None, code: str = "ORDER_ERROR"):
        super().__init__(message=f"Order error: {message}", details=details, code=code)


class OrderAlreadyCancelledError(OrderError):
    """이미 취소된 주문 예외"""

    def __init__(self, order_id: int | None):
        super().__init__(
            "이미 취소된 주문입니다.",
            details={"order_id": order_id},
            code="ORDER_ALREADY_CANCELLED",
        )


class OrderNotCancellableError(OrderError):
    """취소 불가 주문 예외 (배송 완료)"""

    def __init__(self, order_id: int | None, reason: str):
        super().__init__(
            reason,
            details={"order_id": order_id},
            code="ORDER_NOT_CANCELLABLE",
        )
