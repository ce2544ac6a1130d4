# -*- coding: utf-8 -*-
"""
Database Tables Initialization Script

회원, 상품, 배송, 주문 테이블을 초기화합니다. (개발용, 운영은 Alembic)
"""

import asyncio

from sqlalchemy import inspect

from jpashop.adapters.database.connection import Base, close_db, engine, init_db


async def main():
    """테이블 초기화 실행"""
    print("=" * 80)
    print("Database Tables Initialization")
    print("=" * 80)

    try:
        print("\n테이블 생성 중...")
        await init_db()
        print("테이블 생성 완료")

        print("\n생성된 테이블 확인 중...")
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        expected = sorted(Base.metadata.tables)
        missing = [name for name in expected if name not in tables]
        print(f"총 {len(tables)}개 테이블 확인:")
        for table in sorted(tables):
            print(f"  - {table}")
        if missing:
            print(f"누락된 테이블: {', '.join(missing)}")

        print("\n" + "=" * 80)
        print("데이터베이스 초기화 완료")
        print("=" * 80)

    except Exception as e:
        print(f"\n초기화 실패: {e}")
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
