# -*- coding: utf-8 -*-
"""
Member Service - 회원 가입/조회/수정 서비스
"""

import logging
from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.adapters.database.models.member import MemberModel
from jpashop.adapters.database.repositories.member_repository import MemberRepository
from jpashop.application.common.decorators import transaction
from jpashop.application.common.exceptions import (
    DuplicateMemberError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


class MemberService:
    """
    회원 서비스

    회원 이름은 전체 회원 중 유일해야 함
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.member_repo = MemberRepository(session)

    # ==================== 회원 가입 ====================

    @transaction
    async def join(self, member: MemberModel) -> int:
        """
        회원 가입

        Args:
            member: 가입 회원 정보

        Returns:
            int: 가입 회원 식별자

        Raises:
            DuplicateMemberError: 같은 이름의 회원이 이미 존재하는 경우
        """
        await self._validate_duplicate_member(member)
        try:
            await self.member_repo.save(member)
        except IntegrityError as e:
            # 동시 가입으로 유니크 인덱스 위반
            raise DuplicateMemberError(member.name) from e

        logger.info(f"[Member] joined id={member.id} name={member.name}")
        return member.id

    async def _validate_duplicate_member(self, member: MemberModel) -> None:
        """중복 회원 검증"""
        if await self.member_repo.exists(name=member.name):
            logger.warning(f"[Member] duplicate name rejected: {member.name}")
            raise DuplicateMemberError(member.name)

    # ==================== 회원 조회 ====================

    async def find_members(self) -> Sequence[MemberModel]:
        """전체 회원 조회"""
        return await self.member_repo.get_all()

    async def find_one(self, member_id: int) -> MemberModel | None:
        """특정 회원 조회 (없으면 None)"""
        return await self.member_repo.get_by_id(member_id)

    # ==================== 회원 수정 ====================

    @transaction
    async def update(self, member_id: int, name: str) -> MemberModel:
        """
        회원 이름 변경

        Raises:
            ResourceNotFoundError: 회원이 없는 경우
            DuplicateMemberError: 다른 회원이 같은 이름을 사용 중인 경우
        """
        member = await self.member_repo.get_by_id(member_id)
        if member is None:
            raise ResourceNotFoundError("Member", member_id)

        if await self.member_repo.exists_other_with_name(name, member_id):
            logger.warning(f"[Member] rename to duplicate name rejected: {name}")
            raise DuplicateMemberError(name)

        member.name = name
        try:
            await self.member_repo.save(member)
        except IntegrityError as e:
            raise DuplicateMemberError(name) from e

        logger.info(f"[Member] renamed id={member_id} name={name}")
        return member
