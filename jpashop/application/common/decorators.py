# -*- coding: utf-8 -*-
"""
Decorators - 공통 데코레이터

@transaction, @log_execution 등 재사용 가능한 데코레이터
"""

import functools
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Concatenate, ParamSpec, Protocol, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger(__name__)


class HasSession(Protocol):
    """session 속성을 가진 서비스"""

    session: AsyncSession


S = TypeVar("S", bound=HasSession)


# ==================== @transaction 데코레이터 ====================


def transaction(
    func: Callable[Concatenate[S, P], Awaitable[T]],
) -> Callable[Concatenate[S, P], Awaitable[T]]:
    """
    트랜잭션 데코레이터

    Service Layer 메서드에 적용하여 서비스의 session으로 트랜잭션 관리
    - 성공 시: commit
    - 실패 시: rollback 후 예외 재전파

    사용 예시:
        @transaction
        async def order(self, member_id: int, item_id: int, count: int) -> int:
            # 비즈니스 로직
            pass

    주의:
        - 외부 호출 메서드에만 적용 (내부 헬퍼 메서드는 제외)
        - Service Layer에서만 사용 (Repository는 제외)
    """

    @functools.wraps(func)
    async def wrapper(self: S, *args: P.args, **kwargs: P.kwargs) -> T:
        session = self.session
        try:
            result = await func(self, *args, **kwargs)
            await session.commit()
            return result
        except Exception as e:
            await session.rollback()
            logger.error(f"Transaction rolled back in {func.__qualname__}: {e}")
            raise

    return wrapper


# ==================== @log_execution 데코레이터 ====================


def log_execution(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    """
    실행 로깅 데코레이터

    함수 실행 시작/종료 및 실행 시간 로깅
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        func_name = func.__qualname__
        logger.debug(f"[START] {func_name}")

        start_time = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            logger.warning(f"[ERROR] {func_name} failed after {elapsed:.3f}s: {e}")
            raise

        elapsed = time.perf_counter() - start_time
        logger.debug(f"[END] {func_name} (took {elapsed:.3f}s)")
        return result

    return wrapper
