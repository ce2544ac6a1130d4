# -*- coding: utf-8 -*-
"""Create shop tables

Revision ID: 20261018_initial_shop
Revises:
Create Date: 2026-10-18

Tables:
- members: 회원 (이름 유니크)
- items: 상품 (단일 테이블 상속, dtype B/A/M)
- deliveries: 배송
- orders: 주문
- order_lines: 주문 상품
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20261018_initial_shop'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def _address() -> list[sa.Column]:
    return [
        sa.Column('city', sa.String(length=100), nullable=True, comment='도시'),
        sa.Column('street', sa.String(length=200), nullable=True, comment='거리'),
        sa.Column('zipcode', sa.String(length=20), nullable=True, comment='우편번호'),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ### members ###
    op.create_table(
        'members',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False, comment='회원 이름'),
        *_address(),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_members_name', 'members', ['name'], unique=True)

    # ### items ###
    op.create_table(
        'items',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('dtype', sa.String(length=1), nullable=False, comment='상품 유형'),
        sa.Column('name', sa.String(length=200), nullable=False, comment='상품명'),
        sa.Column('price', sa.Integer(), nullable=False, comment='가격'),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, comment='재고 수량'),
        sa.Column('author', sa.String(length=100), nullable=True, comment='저자'),
        sa.Column('isbn', sa.String(length=20), nullable=True, comment='ISBN'),
        sa.Column('artist', sa.String(length=100), nullable=True, comment='아티스트'),
        sa.Column('etc', sa.String(length=200), nullable=True, comment='기타'),
        sa.Column('director', sa.String(length=100), nullable=True, comment='감독'),
        sa.Column('actor', sa.String(length=100), nullable=True, comment='배우'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_items_stock_non_negative'),
    )

    # ### deliveries ###
    op.create_table(
        'deliveries',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('status', sa.String(length=10), nullable=False, comment='배송 상태'),
        *_address(),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )

    # ### orders ###
    op.create_table(
        'orders',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.BigInteger(), nullable=False),
        sa.Column('delivery_id', sa.BigInteger(), nullable=True),
        sa.Column('status', sa.String(length=10), nullable=False, comment='주문 상태'),
        sa.Column('order_date', sa.DateTime(timezone=True), nullable=False, comment='주문 시각'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['member_id'], ['members.id']),
        sa.ForeignKeyConstraint(['delivery_id'], ['deliveries.id']),
        sa.UniqueConstraint('delivery_id'),
    )
    op.create_index('ix_orders_member_id', 'orders', ['member_id'], unique=False)
    op.create_index('ix_orders_status', 'orders', ['status'], unique=False)
    op.create_index('ix_orders_member_status', 'orders', ['member_id', 'status'], unique=False)

    # ### order_lines ###
    op.create_table(
        'order_lines',
        sa.Column('id', sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column('order_id', sa.BigInteger(), nullable=False),
        sa.Column('item_id', sa.BigInteger(), nullable=False),
        sa.Column('order_price', sa.Integer(), nullable=False, comment='주문 가격'),
        sa.Column('count', sa.Integer(), nullable=False, comment='주문 수량'),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['order_id'], ['orders.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['item_id'], ['items.id']),
    )
    op.create_index('ix_order_lines_order_id', 'order_lines', ['order_id'], unique=False)
    op.create_index('ix_order_lines_item_id', 'order_lines', ['item_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_order_lines_item_id', table_name='order_lines')
    op.drop_index('ix_order_lines_order_id', table_name='order_lines')
    op.drop_table('order_lines')
    op.drop_index('ix_orders_member_status', table_name='orders')
    op.drop_index('ix_orders_status', table_name='orders')
    op.drop_index('ix_orders_member_id', table_name='orders')
    op.drop_table('orders')
    op.drop_table('deliveries')
    op.drop_table('items')
    op.drop_index('ix_members_name', table_name='members')
    op.drop_table('members')
