# -*- coding: utf-8 -*-
"""
Member Service 테스트

- 회원 가입에 성공해야 한다
- 회원 가입 시 같은 이름이 있으면 예외가 발생해야 한다
- 회원 이름 변경
"""

from unittest.mock import AsyncMock, patch

import pytest

from jpashop.adapters.database.models import Address, MemberModel
from jpashop.application.common.exceptions import DuplicateMemberError, ResourceNotFoundError
from jpashop.application.domain.member.service import MemberService


class TestMemberJoin:
    """회원 가입 테스트"""

    @pytest.mark.asyncio
    async def test_join(self, session):
        """회원 가입 후 조회"""
        service = MemberService(session)
        member = MemberModel(name="Hyewon", address=Address("Seoul", "Hangang", "123456"))

        member_id = await service.join(member)

        assert member_id is not None
        assert await service.find_one(member_id) is member

    @pytest.mark.asyncio
    async def test_duplicate_member_raises(self, session):
        """같은 이름으로 두 번째 가입 시 DuplicateMemberError"""
        service = MemberService(session)
        await service.join(MemberModel(name="Hyewon"))

        with pytest.raises(DuplicateMemberError) as exc_info:
            await service.join(MemberModel(name="Hyewon"))

        assert exc_info.value.status_code == 409
        members = await service.find_members()
        assert [m.name for m in members] == ["Hyewon"]

    @pytest.mark.asyncio
    async def test_unique_index_reported_as_duplicate(self, session):
        """사전 검증을 통과해도 유니크 인덱스 위반은 DuplicateMemberError"""
        service = MemberService(session)
        await service.join(MemberModel(name="Hyewon"))

        with patch.object(service, "_validate_duplicate_member", AsyncMock()):
            with pytest.raises(DuplicateMemberError):
                await service.join(MemberModel(name="Hyewon"))

        assert len(await service.find_members()) == 1

    @pytest.mark.asyncio
    async def test_different_names_allowed(self, session):
        """다른 이름은 각각 가입 가능"""
        service = MemberService(session)
        await service.join(MemberModel(name="Hyewon"))
        await service.join(MemberModel(name="Jiwoo"))

        members = await service.find_members()
        assert [m.name for m in members] == ["Hyewon", "Jiwoo"]


class TestMemberQuery:
    """회원 조회 테스트"""

    @pytest.mark.asyncio
    async def test_find_one_unknown(self, session):
        """없는 회원 조회 시 None"""
        service = MemberService(session)
        assert await service.find_one(999) is None

    @pytest.mark.asyncio
    async def test_find_members_empty(self, session):
        """회원이 없으면 빈 목록"""
        service = MemberService(session)
        assert list(await service.find_members()) == []


class TestMemberUpdate:
    """회원 수정 테스트"""

    @pytest.mark.asyncio
    async def test_update_name(self, session):
        """이름 변경"""
        service = MemberService(session)
        member_id = await service.join(MemberModel(name="Hyewon"))

        updated = await service.update(member_id, "Hyewon Kim")

        assert updated.id == member_id
        assert updated.name == "Hyewon Kim"
        await session.refresh(updated)
        assert updated.name == "Hyewon Kim"

    @pytest.mark.asyncio
    async def test_update_same_name_allowed(self, session):
        """자기 자신의 이름으로 변경은 허용"""
        service = MemberService(session)
        member_id = await service.join(MemberModel(name="Hyewon"))

        updated = await service.update(member_id, "Hyewon")

        assert updated.name == "Hyewon"

    @pytest.mark.asyncio
    async def test_update_to_existing_name_raises(self, session):
        """다른 회원의 이름으로 변경 시 DuplicateMemberError"""
        service = MemberService(session)
        await service.join(MemberModel(name="Hyewon"))
        member_id = await service.join(MemberModel(name="Jiwoo"))

        with pytest.raises(DuplicateMemberError):
            await service.update(member_id, "Hyewon")

        member = await service.find_one(member_id)
        assert member.name == "Jiwoo"

    @pytest.mark.asyncio
    async def test_update_unknown_member_raises(self, session):
        """없는 회원 수정 시 ResourceNotFoundError"""
        service = MemberService(session)

        with pytest.raises(ResourceNotFoundError):
            await service.update(999, "Nobody")

    @pytest.mark.asyncio
    async def test_update_unique_index_reported_as_duplicate(self, session):
        """이름 검증을 통과해도 유니크 인덱스 위반은 DuplicateMemberError, 이름 유지"""
        service = MemberService(session)
        await service.join(MemberModel(name="Hyewon"))
        member_id = await service.join(MemberModel(name="Jiwoo"))

        with patch.object(
            service.member_repo, "exists_other_with_name", AsyncMock(return_value=False)
        ):
            with pytest.raises(DuplicateMemberError) as exc_info:
                await service.update(member_id, "Hyewon")

        assert exc_info.value.status_code == 409
        member = await service.find_one(member_id)
        assert member.name == "Jiwoo"
