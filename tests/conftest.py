# -*- coding: utf-8 -*-
"""
공통 테스트 픽스처

인메모리 SQLite(aiosqlite) 엔진과 세션
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from jpashop.adapters.database.connection import create_session_factory, init_db


@pytest_asyncio.fixture
async def engine():
    """테스트용 엔진 (테이블 생성 포함)"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """테스트용 세션"""
    async with create_session_factory(engine)() as session:
        yield session
