"""Integration tests for report summaries, downloads and saved files."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from httpx import AsyncClient


async def record(client: AsyncClient, headers: dict, direction: str, amount: str, counterparty: str, days_ago: int = 1):
    occurred_at = datetime.now(timezone.utc) - timedelta(days=days_ago)
    response = await client.post(
        "/api/v1/transactions",
        json={
            "direction": direction,
            "amount": amount,
            "counterparty_name": counterparty,
            "occurred_at": occurred_at.isoformat(),
        },
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
async def week_of_activity(client: AsyncClient, auth_headers: dict):
    await record(client, auth_headers, "sent", "100.50", "Mama Mboga Supplier")
    await record(client, auth_headers, "sent", "200.25", "Wholesale Depot")
    await record(client, auth_headers, "received", "50.00", "Jane Customer")
    # Outside the weekly window
    await record(client, auth_headers, "sent", "9999.00", "Old Supplier", days_ago=20)


class TestSummary:
    @pytest.mark.asyncio
    async def test_weekly_summary(
        self, client: AsyncClient, auth_headers: dict, week_of_activity
    ):
        response = await client.get(
            "/api/v1/reports/summary", params={"window": "weekly"}, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["window"] == "weekly"
        assert data["total_transactions"] == 3
        assert Decimal(data["total_sent"]) == Decimal("300.75")
        assert Decimal(data["total_received"]) == Decimal("50.00")
        assert Decimal(data["business_total"]) == Decimal("300.75")
        assert Decimal(data["personal_total"]) == Decimal("0")
        assert data["money"] == {"currency": "KES", "minor_unit": 2}

        top = data["top_categories"]
        assert top[0]["category_name"] == "Food & Beverage Stock"
        assert Decimal(top[0]["total_amount"]) == Decimal("300.75")
        assert top[0]["transaction_count"] == 2
        assert top[1]["category_name"] == "Business Income"

    @pytest.mark.asyncio
    async def test_empty_summary(self, client: AsyncClient, auth_headers: dict):
        response = await client.get("/api/v1/reports/summary", headers=auth_headers)
        assert response.status_code == 200
        data = response.json()
        assert data["total_transactions"] == 0
        assert data["top_categories"] == []

    @pytest.mark.asyncio
    async def test_unknown_window(self, client: AsyncClient, auth_headers: dict):
        response = await client.get(
            "/api/v1/reports/summary", params={"window": "daily"}, headers=auth_headers
        )
        assert response.status_code == 400


class TestDownload:
    @pytest.mark.asyncio
    async def test_csv_download(self, client: AsyncClient, auth_headers: dict, week_of_activity):
        response = await client.get(
            "/api/v1/reports/weekly/download", params={"format": "csv"}, headers=auth_headers
        )
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "yasinga_weekly_report_" in response.headers["content-disposition"]
        body = response.text
        assert "Mama Mboga Supplier" in body
        assert "Old Supplier" not in body

    @pytest.mark.asyncio
    async def test_pdf_download(self, client: AsyncClient, auth_headers: dict, week_of_activity):
        response = await client.get("/api/v1/reports/monthly/download", headers=auth_headers)
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content.startswith(b"%PDF")


class TestSavedReports:
    @pytest.mark.asyncio
    async def test_save_list_delete(
        self, client: AsyncClient, auth_headers: dict, reports_dir, week_of_activity
    ):
        saved = await client.post(
            "/api/v1/reports/weekly/save", params={"format": "csv"}, headers=auth_headers
        )
        assert saved.status_code == 201
        filename = saved.json()["filename"]
        assert filename.endswith(".csv")
        assert (reports_dir / filename).is_file()
        assert saved.json()["size_bytes"] > 0

        listing = await client.get("/api/v1/reports/files", headers=auth_headers)
        assert listing.json()["total"] == 1
        assert listing.json()["reports"][0]["filename"] == filename

        deleted = await client.delete(f"/api/v1/reports/files/{filename}", headers=auth_headers)
        assert deleted.status_code == 204
        assert not (reports_dir / filename).exists()

        again = await client.delete(f"/api/v1/reports/files/{filename}", headers=auth_headers)
        assert again.status_code == 404
        assert again.json()["error_code"] == "RPT_001"

    @pytest.mark.asyncio
    async def test_empty_listing(self, client: AsyncClient, auth_headers: dict, reports_dir):
        response = await client.get("/api/v1/reports/files", headers=auth_headers)
        assert response.json() == {"reports": [], "total": 0}

    @pytest.mark.asyncio
    async def test_rejects_unsafe_names(self, client: AsyncClient, auth_headers: dict, reports_dir):
        response = await client.delete("/api/v1/reports/files/notes.txt", headers=auth_headers)
        assert response.status_code == 400
        assert response.json()["error_code"] == "RPT_002"

        response = await client.delete("/api/v1/reports/files/..", headers=auth_headers)
        assert response.status_code in (400, 404, 405)

    @pytest.mark.asyncio
    async def test_saved_reports_are_private(
        self,
        client: AsyncClient,
        auth_headers: dict,
        other_auth_headers: dict,
        test_user,
        reports_dir,
        week_of_activity,
    ):
        saved = await client.post(
            "/api/v1/reports/weekly/save", params={"format": "csv"}, headers=auth_headers
        )
        filename = saved.json()["filename"]
        assert str(test_user.id) in filename

        listing = await client.get("/api/v1/reports/files", headers=other_auth_headers)
        assert listing.json() == {"reports": [], "total": 0}

        response = await client.delete(
            f"/api/v1/reports/files/{filename}", headers=other_auth_headers
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "RPT_001"
        assert (reports_dir / filename).is_file()

        listing = await client.get("/api/v1/reports/files", headers=auth_headers)
        assert [r["filename"] for r in listing.json()["reports"]] == [filename]
