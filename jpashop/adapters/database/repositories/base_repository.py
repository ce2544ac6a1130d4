# -*- coding: utf-8 -*-
"""
Base Repository - 엔티티 공통 저장/조회

변경 감지에 의존하지 않으므로 엔티티를 수정한 서비스는 save()를 직접 호출
commit은 서비스의 @transaction 담당 (Repository는 flush까지만)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.connection import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    엔티티 Repository 공통 기능

    Attributes:
        model: 대상 모델 클래스
        session: 요청 단위 AsyncSession
    """

    def __init__(self, model: type[ModelType], session: AsyncSession) -> None:
        self.model = model
        self.session = session

    # ==================== 저장 ====================

    async def save(self, entity: ModelType) -> ModelType:
        """
        엔티티 저장

        신규 엔티티는 INSERT, 영속 엔티티는 변경분 UPDATE (flush 시점)

        Returns:
            ModelType: id가 채워진 엔티티
        """
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def save_all(self, entities: Sequence[ModelType]) -> None:
        """여러 엔티티를 한 번의 flush로 저장"""
        self.session.add_all(entities)
        await self.session.flush()

    # ==================== 조회 ====================

    async def get_by_id(self, id: int) -> ModelType | None:
        """식별자로 조회 (identity map 우선, 없으면 None)"""
        return await self.session.get(self.model, id)

    async def get_for_update(self, id: int) -> ModelType | None:
        """
        변경 목적 조회 (행 잠금)

        SELECT ... FOR UPDATE OF <table> 후 identity map의 엔티티도 DB 값으로 갱신
        잠금은 트랜잭션 종료(commit/rollback)까지 유지, SQLite에서는 잠금 절 생략
        """
        return await self.session.get(
            self.model, id, with_for_update={"of": self.model}, populate_existing=True
        )

    async def get_many(
        self, limit: int = 100, offset: int = 0, **filters: Any
    ) -> Sequence[ModelType]:
        """
        컬럼 일치 조건으로 조회 (id 오름차순)

        Args:
            limit: 최대 건수
            offset: 건너뛸 건수
            **filters: 컬럼명=값
        """
        stmt = (
            select(self.model)
            .filter_by(**filters)
            .order_by(self.model.id)
            .limit(limit)
            .offset(offset)
        )
        return (await self.session.scalars(stmt)).all()

    async def get_all(self) -> Sequence[ModelType]:
        """전체 조회 (id 오름차순)"""
        stmt = select(self.model).order_by(self.model.id)
        return (await self.session.scalars(stmt)).all()

    async def count(self, **filters: Any) -> int:
        """조건에 맞는 건수"""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        return (await self.session.execute(stmt)).scalar_one()

    async def exists(self, **filters: Any) -> bool:
        """조건에 맞는 엔티티가 하나라도 있는지"""
        stmt = select(self.model.id).filter_by(**filters).limit(1)
        return (await self.session.execute(stmt)).first() is not None


# ==================== Mixin ====================


class SearchableMixin:
    """조립된 Select 문을 페이지 단위로 실행"""

    async def search(
        self: BaseRepository[ModelType],
        query_stmt: Select[tuple[ModelType]],
        limit: int = 100,
        offset: int = 0,
    ) -> Sequence[ModelType]:
        stmt = query_stmt.limit(limit).offset(offset)
        return (await self.session.scalars(stmt)).unique().all()
