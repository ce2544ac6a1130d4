# -*- coding: utf-8 -*-
"""
Member Repository - 회원 데이터 접근 계층
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.models.member import MemberModel
from jpashop.adapters.database.repositories.base_repository import BaseRepository


class MemberRepository(BaseRepository[MemberModel]):
    """회원 Repository"""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(MemberModel, session)

    async def find_by_name(self, name: str) -> Sequence[MemberModel]:
        """이름으로 회원 목록 조회"""
        return await self.get_many(name=name)

    async def exists_other_with_name(self, name: str, member_id: int) -> bool:
        """같은 이름을 가진 다른 회원 존재 여부"""
        members = await self.find_by_name(name)
        return any(member.id != member_id for member in members)
