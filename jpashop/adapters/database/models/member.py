# -*- coding: utf-8 -*-
"""
Member Model - 회원 정보 모델
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from jpashop.adapters.database.connection import Base
from jpashop.adapters.database.models.base import Address, AddressMixin, BaseModel, IdType


class MemberModel(Base, BaseModel, AddressMixin):
    """회원 모델"""

    __tablename__ = "members"

    # ==================== Primary Key ====================
    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)

    # ==================== 회원 정보 ====================
    name: Mapped[str] = mapped_column(
        String(100), unique=True, nullable=False, index=True, comment="회원 이름"
    )

    def __init__(self, name: str, address: Address | None = None, **kwargs) -> None:
        super().__init__(name=name, **kwargs)
        self.address = address
