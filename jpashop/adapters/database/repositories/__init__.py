"""
Database Repositories - 데이터베이스 접근 계층
"""

from jpashop.adapters.database.repositories.base_repository import (
    BaseRepository,
    SearchableMixin,
)
from jpashop.adapters.database.repositories.item_repository import ItemRepository
from jpashop.adapters.database.repositories.member_repository import MemberRepository
from jpashop.adapters.database.repositories.order_repository import OrderRepository

__all__ = [
    # Base
    "BaseRepository",
    "SearchableMixin",
    # Repositories
    "MemberRepository",
    "ItemRepository",
    "OrderRepository",
]
