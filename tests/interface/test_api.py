# -*- coding: utf-8 -*-
"""
API 엔드포인트 테스트

httpx AsyncClient + ASGITransport, 세션 의존성은 테스트 세션으로 교체
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from jpashop.application.common.dependencies import get_session
from jpashop.main import app


@pytest_asyncio.fixture
async def client(session):
    """테스트용 API 클라이언트"""

    async def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def join_member(client: AsyncClient, name: str = "Hyewon") -> int:
    response = await client.post(
        "/api/v1/members",
        json={"name": name, "address": {"city": "Seoul", "street": "Hangang", "zipcode": "123456"}},
    )
    assert response.status_code == 201
    return response.json()["data"]["id"]


async def create_book(client: AsyncClient, stock_quantity: int = 10) -> int:
    response = await client.post(
        "/api/v1/items/books",
        json={
            "name": "Harry Potter",
            "price": 10000,
            "stock_quantity": stock_quantity,
            "author": "Rowling",
            "isbn": "1234",
        },
    )
    assert response.status_code == 201
    return response.json()["data"]["id"]


class TestRootApi:
    """루트/헬스체크 테스트"""

    @pytest.mark.asyncio
    async def test_root(self, client):
        """서비스 정보"""
        response = await client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "running"

    @pytest.mark.asyncio
    async def test_health(self, client):
        """DB 연결 확인"""
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json()["database"] == "connected"


class TestMemberApi:
    """회원 API 테스트"""

    @pytest.mark.asyncio
    async def test_join_and_get(self, client):
        """회원 가입 후 조회"""
        member_id = await join_member(client)

        response = await client.get(f"/api/v1/members/{member_id}")

        body = response.json()
        assert response.status_code == 200
        assert body["success"] is True
        assert body["data"]["name"] == "Hyewon"
        assert body["data"]["city"] == "Seoul"

    @pytest.mark.asyncio
    async def test_join_duplicate(self, client):
        """중복 이름 가입 시 409"""
        await join_member(client)

        response = await client.post("/api/v1/members", json={"name": "Hyewon"})

        body = response.json()
        assert response.status_code == 409
        assert body["success"] is False
        assert body["error"]["code"] == "DUPLICATE_MEMBER"

    @pytest.mark.asyncio
    async def test_join_blank_name(self, client):
        """빈 이름은 요청 검증 실패"""
        response = await client.post("/api/v1/members", json={"name": "  "})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_member_list(self, client):
        """회원 목록"""
        await join_member(client, "Hyewon")
        await join_member(client, "Jiwoo")

        response = await client.get("/api/v1/members")

        data = response.json()["data"]
        assert data["count"] == 2
        assert [m["name"] for m in data["members"]] == ["Hyewon", "Jiwoo"]

    @pytest.mark.asyncio
    async def test_update_member(self, client):
        """회원 이름 수정"""
        member_id = await join_member(client)

        response = await client.put(f"/api/v1/members/{member_id}", json={"name": "Hyewon Kim"})

        assert response.status_code == 200
        assert response.json()["data"] == {"id": member_id, "name": "Hyewon Kim"}

    @pytest.mark.asyncio
    async def test_update_blank_name_rejected(self, client):
        """공백 이름으로 수정 시 요청 검증 실패, 이름 유지"""
        member_id = await join_member(client)

        response = await client.put(f"/api/v1/members/{member_id}", json={"name": "   "})

        assert response.status_code == 422
        member = (await client.get(f"/api/v1/members/{member_id}")).json()["data"]
        assert member["name"] == "Hyewon"

    @pytest.mark.asyncio
    async def test_update_padded_duplicate_name(self, client):
        """앞뒤 공백만 다른 이름은 같은 이름으로 보고 409"""
        await join_member(client, "Hyewon")
        member_id = await join_member(client, "Jiwoo")

        response = await client.put(f"/api/v1/members/{member_id}", json={"name": "Hyewon "})

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "DUPLICATE_MEMBER"
        members = (await client.get("/api/v1/members")).json()["data"]["members"]
        assert [m["name"] for m in members] == ["Hyewon", "Jiwoo"]

    @pytest.mark.asyncio
    async def test_update_name_is_stripped(self, client):
        """수정 이름의 앞뒤 공백 제거"""
        member_id = await join_member(client)

        response = await client.put(f"/api/v1/members/{member_id}", json={"name": "  Hyewon Kim "})

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Hyewon Kim"

    @pytest.mark.asyncio
    async def test_get_unknown_member(self, client):
        """없는 회원 조회 시 404"""
        response = await client.get("/api/v1/members/999")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


class TestItemApi:
    """상품 API 테스트"""

    @pytest.mark.asyncio
    async def test_create_and_list_items(self, client):
        """상품 등록 및 목록 (유형 필터)"""
        await create_book(client)
        response = await client.post(
            "/api/v1/items/albums",
            json={"name": "Album", "price": 20000, "stock_quantity": 5, "artist": "IU"},
        )
        assert response.status_code == 201

        all_items = (await client.get("/api/v1/items")).json()["data"]
        books = (await client.get("/api/v1/items", params={"item_type": "B"})).json()["data"]

        assert all_items["count"] == 2
        assert books["count"] == 1
        assert books["items"][0]["author"] == "Rowling"
        assert books["items"][0]["dtype"] == "B"

    @pytest.mark.asyncio
    async def test_update_item(self, client):
        """상품 수정"""
        item_id = await create_book(client)

        response = await client.put(
            f"/api/v1/items/{item_id}",
            json={"name": "Harry Potter 2", "price": 12000, "stock_quantity": 3},
        )

        data = response.json()["data"]
        assert response.status_code == 200
        assert (data["name"], data["price"], data["stock_quantity"]) == ("Harry Potter 2", 12000, 3)

    @pytest.mark.asyncio
    async def test_negative_stock_rejected(self, client):
        """음수 재고 등록은 요청 검증 실패"""
        response = await client.post(
            "/api/v1/items/books", json={"name": "Book", "price": 1000, "stock_quantity": -1}
        )
        assert response.status_code == 422


class TestOrderApi:
    """주문 API 테스트"""

    @pytest.mark.asyncio
    async def test_order_flow(self, client):
        """주문 → 조회 → 취소 → 재취소"""
        member_id = await join_member(client)
        item_id = await create_book(client, stock_quantity=10)

        response = await client.post(
            "/api/v1/orders", json={"member_id": member_id, "item_id": item_id, "count": 2}
        )
        assert response.status_code == 201
        order_id = response.json()["data"]["id"]

        order = (await client.get(f"/api/v1/orders/{order_id}")).json()["data"]
        assert order["status"] == "ORDER"
        assert order["total_price"] == 20000
        assert order["member_name"] == "Hyewon"
        assert order["delivery_status"] == "READY"
        assert order["order_lines"][0]["item_name"] == "Harry Potter"

        item = (await client.get(f"/api/v1/items/{item_id}")).json()["data"]
        assert item["stock_quantity"] == 8

        response = await client.post(f"/api/v1/orders/{order_id}/cancel")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "CANCEL"

        item = (await client.get(f"/api/v1/items/{item_id}")).json()["data"]
        assert item["stock_quantity"] == 10

        response = await client.post(f"/api/v1/orders/{order_id}/cancel")
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "ORDER_ALREADY_CANCELLED"

    @pytest.mark.asyncio
    async def test_order_not_enough_stock(self, client):
        """재고 초과 주문 시 422, 재고 유지"""
        member_id = await join_member(client)
        item_id = await create_book(client, stock_quantity=10)

        response = await client.post(
            "/api/v1/orders", json={"member_id": member_id, "item_id": item_id, "count": 11}
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "NOT_ENOUGH_STOCK"
        item = (await client.get(f"/api/v1/items/{item_id}")).json()["data"]
        assert item["stock_quantity"] == 10

    @pytest.mark.asyncio
    async def test_order_zero_count_rejected(self, client):
        """주문 수량 0은 요청 검증 실패"""
        response = await client.post(
            "/api/v1/orders", json={"member_id": 1, "item_id": 1, "count": 0}
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_search_orders(self, client):
        """주문 검색 (회원 이름, 상태)"""
        hyewon = await join_member(client, "Hyewon")
        jiwoo = await join_member(client, "Jiwoo")
        item_id = await create_book(client, stock_quantity=10)

        for member_id in (hyewon, jiwoo):
            await client.post(
                "/api/v1/orders", json={"member_id": member_id, "item_id": item_id, "count": 1}
            )

        by_name = (await client.get("/api/v1/orders", params={"member_name": "Jiw"})).json()["data"]
        cancelled = (
            await client.get("/api/v1/orders", params={"order_status": "CANCEL"})
        ).json()["data"]

        assert by_name["total_count"] == 1
        assert by_name["orders"][0]["member_name"] == "Jiwoo"
        assert cancelled["total_count"] == 0

    @pytest.mark.asyncio
    async def test_cancel_unknown_order(self, client):
        """없는 주문 취소 시 404"""
        response = await client.post("/api/v1/orders/999/cancel")
        assert response.status_code == 404
