"""Integration tests for category endpoints and default seeding."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from yasinga.categorization import DEFAULT_CATEGORIES
from yasinga.core.types import Direction
from yasinga.models.user import User
from yasinga.repositories.category import CategoryRepository
from yasinga.services.category import CategoryService


class TestCategoryList:
    @pytest.mark.asyncio
    async def test_first_list_seeds_defaults(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/categories", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert len(data) == len(DEFAULT_CATEGORIES)
        assert all(c["is_default"] for c in data)
        names = [c["name"] for c in data]
        assert names == sorted(names)
        kinds = [c["kind"] for c in data]
        assert kinds.count("business") == 9
        assert kinds.count("personal") == 6

    @pytest.mark.asyncio
    async def test_seeding_is_idempotent(
        self, client: AsyncClient, auth_headers: dict, db_session: AsyncSession, test_user: User
    ):
        await client.get("/api/v1/categories", headers=auth_headers)
        await client.get("/api/v1/categories", headers=auth_headers)
        await CategoryService(db_session).ensure_defaults(test_user.id)

        assert await CategoryRepository(db_session).count_by_user(test_user.id) == 15

    @pytest.mark.asyncio
    async def test_existing_categories_block_seeding(
        self, client: AsyncClient, auth_headers: dict
    ):
        created = await client.post(
            "/api/v1/categories",
            json={"name": "Boda Boda Fuel", "kind": "business"},
            headers=auth_headers,
        )
        assert created.status_code == 201

        response = await client.get("/api/v1/categories", headers=auth_headers)
        assert [c["name"] for c in response.json()] == ["Boda Boda Fuel"]

    @pytest.mark.asyncio
    async def test_users_only_see_their_own(
        self,
        client: AsyncClient,
        auth_headers: dict,
        db_session: AsyncSession,
        other_user: User,
    ):
        await CategoryService(db_session).ensure_defaults(other_user.id)
        response = await client.get("/api/v1/categories", headers=auth_headers)
        assert len(response.json()) == 15


class TestCategoryCrud:
    @pytest.mark.asyncio
    async def test_create_category(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/v1/categories",
            json={"name": "Chama Contributions", "kind": "personal", "color": "#123456"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Chama Contributions"
        assert data["kind"] == "personal"
        assert data["color"] == "#123456"
        assert data["is_default"] is False

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_kind(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/v1/categories",
            json={"name": "Savings", "kind": "savings"},
            headers=auth_headers,
        )
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_category(self, client: AsyncClient, auth_headers: dict):
        created = (
            await client.post(
                "/api/v1/categories", json={"name": "Rent"}, headers=auth_headers
            )
        ).json()

        response = await client.put(
            f"/api/v1/categories/{created['id']}",
            json={"name": "Shop Rent", "icon": "fas fa-home"},
            headers=auth_headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Shop Rent"
        assert response.json()["icon"] == "fas fa-home"
        assert response.json()["kind"] == "business"

    @pytest.mark.asyncio
    async def test_update_other_users_category(
        self,
        client: AsyncClient,
        auth_headers: dict,
        db_session: AsyncSession,
        other_user: User,
    ):
        theirs = await CategoryService(db_session).ensure_defaults(other_user.id)
        response = await client.put(
            f"/api/v1/categories/{theirs[0].id}",
            json={"name": "Mine now"},
            headers=auth_headers,
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "CAT_001"

    @pytest.mark.asyncio
    async def test_delete_category_resets_transactions(
        self, client: AsyncClient, auth_headers: dict
    ):
        category = (
            await client.post(
                "/api/v1/categories", json={"name": "Gas Refill"}, headers=auth_headers
            )
        ).json()
        txn = (
            await client.post(
                "/api/v1/transactions",
                json={
                    "direction": Direction.SENT.value,
                    "amount": "2800.00",
                    "counterparty_name": "Total Energies",
                    "occurred_at": datetime(2026, 10, 16, 10, tzinfo=timezone.utc).isoformat(),
                    "category_id": category["id"],
                },
                headers=auth_headers,
            )
        ).json()
        assert txn["is_pending"] is False

        response = await client.delete(
            f"/api/v1/categories/{category['id']}", headers=auth_headers
        )
        assert response.status_code == 204

        after = await client.get(f"/api/v1/transactions/{txn['id']}", headers=auth_headers)
        data = after.json()
        assert data["is_pending"] is True
        assert data["category_id"] is None
        assert data["category"] is None
        assert Decimal(data["amount"]) == Decimal("2800.00")

    @pytest.mark.asyncio
    async def test_delete_missing_category(self, client: AsyncClient, auth_headers: dict):
        response = await client.delete(
            "/api/v1/categories/00000000-0000-0000-0000-000000000000", headers=auth_headers
        )
        assert response.status_code == 404
