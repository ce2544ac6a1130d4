# -*- coding: utf-8 -*-
"""
Base Model - 공통 모델 Base 클래스 및 Mixin
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, declared_attr, mapped_column

# SQLite는 INTEGER PRIMARY KEY만 자동 증가
IdType = BigInteger().with_variant(Integer(), "sqlite")


@dataclass(frozen=True)
class Address:
    """주소 값 타입 (회원, 배송 공용)"""

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class TimestampMixin:
    """생성/수정 타임스탬프 Mixin"""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        """생성 시각"""
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        """수정 시각"""
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class AddressMixin:
    """주소 컬럼 Mixin (city, street, zipcode)"""

    @declared_attr
    def city(cls) -> Mapped[str | None]:
        return mapped_column(String(100), nullable=True, comment="도시")

    @declared_attr
    def street(cls) -> Mapped[str | None]:
        return mapped_column(String(200), nullable=True, comment="거리")

    @declared_attr
    def zipcode(cls) -> Mapped[str | None]:
        return mapped_column(String(20), nullable=True, comment="우편번호")

    @property
    def address(self) -> Address:
        """주소 값 객체"""
        return Address(city=self.city, street=self.street, zipcode=self.zipcode)

    @address.setter
    def address(self, value: Address | None) -> None:
        value = value or Address()
        self.city = value.city
        self.street = value.street
        self.zipcode = value.zipcode


class BaseModel(TimestampMixin):
    """
    모든 테이블 모델의 공통 Base

    모든 모델은 이 클래스를 상속받아 created_at, updated_at 자동 포함
    """

    def __repr__(self) -> str:
        """모델 문자열 표현 (로드된 PK만 사용)"""
        return f"{self.__class__.__name__}(id={self.__dict__.get('id')!r})"
