# -*- coding: utf-8 -*-
"""
Dependencies - 의존성 주입 중앙 관리

FastAPI Dependency Injection을 위한 공통 의존성 함수 정의
"""

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.connection import get_db
from jpashop.application.domain.item.service import ItemService
from jpashop.application.domain.member.service import MemberService
from jpashop.application.domain.order.service import OrderService
from jpashop.settings.config import Settings, get_settings

# ==================== Database Session ====================


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Database Session Dependency

    Yields:
        AsyncSession: 비동기 데이터베이스 세션
    """
    async for session in get_db():
        yield session


# Type alias for Database Session
DatabaseSession = Annotated[AsyncSession, Depends(get_session)]


# ==================== Services ====================


def get_member_service(session: DatabaseSession) -> MemberService:
    """Member Service Dependency"""
    return MemberService(session)


def get_item_service(session: DatabaseSession) -> ItemService:
    """Item Service Dependency"""
    return ItemService(session)


def get_order_service(session: DatabaseSession) -> OrderService:
    """Order Service Dependency"""
    return OrderService(session)


# Type aliases for Services
MemberServiceDep = Annotated[MemberService, Depends(get_member_service)]
ItemServiceDep = Annotated[ItemService, Depends(get_item_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]


# ==================== Settings ====================

# Type alias for Settings
SettingsDep = Annotated[Settings, Depends(get_settings)]
