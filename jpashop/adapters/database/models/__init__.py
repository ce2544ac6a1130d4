"""
Database Models - SQLAlchemy ORM 모델
"""

from jpashop.adapters.database.models.base import Address, BaseModel, TimestampMixin
from jpashop.adapters.database.models.delivery import DeliveryModel, DeliveryStatus
from jpashop.adapters.database.models.item import (
    AlbumModel,
    BookModel,
    ItemModel,
    ItemType,
    MovieModel,
)
from jpashop.adapters.database.models.member import MemberModel
from jpashop.adapters.database.models.order import OrderLineModel, OrderModel, OrderStatus

__all__ = [
    # Base
    "Address",
    "BaseModel",
    "TimestampMixin",
    # Member
    "MemberModel",
    # Item
    "ItemModel",
    "ItemType",
    "BookModel",
    "AlbumModel",
    "MovieModel",
    # Delivery
    "DeliveryModel",
    "DeliveryStatus",
    # Order
    "OrderModel",
    "OrderLineModel",
    "OrderStatus",
]
