# -*- coding: utf-8 -*-
"""
Member Domain DTO - 회원 관련 데이터 전송 객체

API 요청/응답은 엔티티 대신 전용 DTO로 주고받음
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from jpashop.adapters.database.models.base import Address
from jpashop.application.common.dto import AddressDTO, BaseDTO


def normalize_member_name(v: str) -> str:
    """회원 이름 앞뒤 공백 제거 (가입/수정 공통, 빈 이름 거부)"""
    v = v.strip()
    if not v:
        raise ValueError("Name must not be blank")
    return v


MemberName = Annotated[str, AfterValidator(normalize_member_name)]


# ==================== Request DTOs ====================


class MemberCreateRequestDTO(BaseDTO):
    """
    회원 가입 요청 DTO

    Attributes:
        name: 회원 이름
        address: 주소
    """

    name: MemberName = Field(description="회원 이름", min_length=1, max_length=100)
    address: AddressDTO | None = Field(default=None, description="주소")

    def to_address(self) -> Address:
        """주소 값 객체로 변환"""
        if self.address is None:
            return Address()
        return Address(**self.address.model_dump())


class MemberUpdateRequestDTO(BaseDTO):
    """
    회원 수정 요청 DTO

    Attributes:
        name: 변경할 이름
    """

    name: MemberName = Field(description="변경할 이름", min_length=1, max_length=100)


# ==================== Response DTOs ====================


class MemberResponseDTO(BaseDTO):
    """
    회원 응답 DTO

    Attributes:
        id: 회원 ID
        name: 회원 이름
        city: 도시
        street: 거리
        zipcode: 우편번호
    """

    id: int = Field(description="회원 ID")
    name: str = Field(description="회원 이름")
    city: str | None = Field(default=None, description="도시")
    street: str | None = Field(default=None, description="거리")
    zipcode: str | None = Field(default=None, description="우편번호")


class MemberUpdateResponseDTO(BaseDTO):
    """
    회원 수정 응답 DTO

    Attributes:
        id: 회원 ID
        name: 변경된 이름
    """

    id: int = Field(description="회원 ID")
    name: str = Field(description="변경된 이름")


class MemberListResponseDTO(BaseDTO):
    """
    회원 목록 응답 DTO

    Attributes:
        members: 회원 목록
        count: 회원 수
    """

    members: list[MemberResponseDTO] = Field(description="회원 목록")
    count: int = Field(description="회원 수")
