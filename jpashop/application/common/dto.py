# -*- coding: utf-8 -*-
"""
Common DTO - 도메인 공용 데이터 전송 객체

모든 API 응답은 ResponseDTO 봉투(success, message, data, error)로 감쌈
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class BaseDTO(BaseModel):
    """ORM 모델에서 바로 변환 가능한 DTO 기반 클래스"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )


class ResponseDTO(BaseDTO, Generic[T]):
    """
    API 응답 봉투

    성공 시 data, 실패 시 error(ApplicationError.to_dict())를 채움
    """

    success: bool = Field(description="성공 여부")
    message: str | None = Field(default=None, description="응답 메시지")
    data: T | None = Field(default=None, description="응답 데이터")
    error: dict[str, Any] | None = Field(default=None, description="에러 코드/상세")

    @classmethod
    def success_response(cls, data: T, message: str = "Success") -> "ResponseDTO[T]":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error_response(
        cls, message: str = "Error", error: dict[str, Any] | None = None
    ) -> "ResponseDTO[None]":
        return cls(success=False, message=message, error=error)


class IdResponseDTO(BaseDTO):
    """생성된 엔티티 식별자"""

    id: int = Field(description="식별자")


class AddressDTO(BaseDTO):
    """
    주소 (회원 주소, 배송지 공용)

    Attributes:
        city: 도시
        street: 거리
        zipcode: 우편번호
    """

    city: str | None = Field(default=None, max_length=100, description="도시")
    street: str | None = Field(default=None, max_length=200, description="거리")
    zipcode: str | None = Field(default=None, max_length=20, description="우편번호")
