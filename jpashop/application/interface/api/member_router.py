# -*- coding: utf-8 -*-
"""
Member Router - 회원 API 엔드포인트
"""

from fastapi import APIRouter, status

from jpashop.adapters.database.models.member import MemberModel
from jpashop.application.common.dependencies import MemberServiceDep
from jpashop.application.common.dto import IdResponseDTO, ResponseDTO
from jpashop.application.common.exceptions import ResourceNotFoundError
from jpashop.application.domain.member.dto import (
    MemberCreateRequestDTO,
    MemberListResponseDTO,
    MemberResponseDTO,
    MemberUpdateRequestDTO,
    MemberUpdateResponseDTO,
)

router = APIRouter()


@router.post(
    "",
    response_model=ResponseDTO[IdResponseDTO],
    status_code=status.HTTP_201_CREATED,
    summary="회원 가입",
    description="이름 중복 시 409",
)
async def join_member(
    request: MemberCreateRequestDTO,
    service: MemberServiceDep,
) -> ResponseDTO[IdResponseDTO]:
    """회원 가입"""
    member = MemberModel(name=request.name, address=request.to_address())
    member_id = await service.join(member)
    return ResponseDTO.success_response(IdResponseDTO(id=member_id), "Member joined successfully")


@router.get(
    "",
    response_model=ResponseDTO[MemberListResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 목록 조회",
)
async def get_member_list(service: MemberServiceDep) -> ResponseDTO[MemberListResponseDTO]:
    """회원 목록 조회"""
    members = await service.find_members()
    data = MemberListResponseDTO(
        members=[MemberResponseDTO.model_validate(member) for member in members],
        count=len(members),
    )
    return ResponseDTO.success_response(data, "Member list retrieved successfully")


@router.get(
    "/{member_id}",
    response_model=ResponseDTO[MemberResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 조회",
)
async def get_member(member_id: int, service: MemberServiceDep) -> ResponseDTO[MemberResponseDTO]:
    """회원 조회"""
    member = await service.find_one(member_id)
    if member is None:
        raise ResourceNotFoundError("Member", member_id)
    return ResponseDTO.success_response(
        MemberResponseDTO.model_validate(member), "Member retrieved successfully"
    )


@router.put(
    "/{member_id}",
    response_model=ResponseDTO[MemberUpdateResponseDTO],
    status_code=status.HTTP_200_OK,
    summary="회원 수정",
    description="회원 이름 변경",
)
async def update_member(
    member_id: int,
    request: MemberUpdateRequestDTO,
    service: MemberServiceDep,
) -> ResponseDTO[MemberUpdateResponseDTO]:
    """회원 수정"""
    member = await service.update(member_id, request.name)
    return ResponseDTO.success_response(
        MemberUpdateResponseDTO(id=member.id, name=member.name), "Member updated successfully"
    )
