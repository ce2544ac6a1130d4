"""
Member Domain - 회원 가입 및 관리
"""

from jpashop.application.domain.member.dto import (
    MemberCreateRequestDTO,
    MemberListResponseDTO,
    MemberResponseDTO,
    MemberUpdateRequestDTO,
    MemberUpdateResponseDTO,
)
from jpashop.application.domain.member.service import MemberService

__all__ = [
    "MemberService",
    "MemberCreateRequestDTO",
    "MemberUpdateRequestDTO",
    "MemberResponseDTO",
    "MemberUpdateResponseDTO",
    "MemberListResponseDTO",
]
