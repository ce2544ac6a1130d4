# -*- coding: utf-8 -*-
"""
Delivery Model - 배송 정보 모델
"""

from enum import Enum

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from jpashop.adapters.database.connection import Base
from jpashop.adapters.database.models.base import Address, AddressMixin, BaseModel, IdType


class DeliveryStatus(str, Enum):
    """배송 상태"""

    READY = "READY"  # 준비
    COMP = "COMP"  # 배송 완료


class DeliveryModel(Base, BaseModel, AddressMixin):
    """배송 모델 (주문 시점 주소 스냅샷)"""

    __tablename__ = "deliveries"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    status: Mapped[str] = mapped_column(
        String(10), nullable=False, default=DeliveryStatus.READY.value, comment="배송 상태"
    )

    def __init__(self, address: Address | None = None, **kwargs) -> None:
        kwargs.setdefault("status", DeliveryStatus.READY.value)
        super().__init__(**kwargs)
        self.address = address

    @property
    def is_completed(self) -> bool:
        """배송 완료 여부"""
        return self.status == DeliveryStatus.COMP.value

    def complete(self) -> None:
        """배송 완료 처리"""
        self.status = DeliveryStatus.COMP.value
