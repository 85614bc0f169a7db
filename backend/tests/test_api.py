"""End-to-end tests for the HTTP API using httpx.ASGITransport."""

import re
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from forms_api.core.errors import StorageError
from forms_api.repositories import submissions as submission_repository

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


# =============================================================================
# GET /api/form-schema
# =============================================================================


@pytest.mark.asyncio
async def test_form_schema_is_served(client):
    response = await client.get("/api/form-schema")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "EMPLOYEE FORM"
    assert [field["name"] for field in data["fields"]] == [
        "fullName",
        "age",
        "gender",
        "skills",
        "joinDate",
        "bio",
        "isActive",
    ]
    assert data["fields"][1]["validations"] == {"min": 18, "max": 60}


# =============================================================================
# POST /api/submissions
# =============================================================================


class TestCreateSubmission:
    @pytest.mark.asyncio
    async def test_short_name_is_rejected(self, client):
        payload = {"fullName": "Al", "age": 25, "gender": "Male", "skills": ["React"], "bio": "x" * 15}

        response = await client.post("/api/submissions", json=payload)

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "errors": {"fullName": "At least 3 characters required"},
        }

    @pytest.mark.asyncio
    async def test_underage_is_rejected_and_not_stored(self, client, valid_record):
        response = await client.post("/api/submissions", json={**valid_record, "age": 17})

        assert response.status_code == 400
        assert response.json()["errors"] == {"age": "Minimum allowed value is 18"}

        listing = await client.get("/api/submissions")
        assert listing.json()["pageInfo"]["totalItems"] == 0

    @pytest.mark.asyncio
    async def test_valid_submission_is_stored(self, client, valid_record):
        response = await client.post("/api/submissions", json=valid_record)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Submission saved successfully!"
        assert uuid.UUID(body["submissionId"]).version == 4
        assert ISO_UTC.match(body["createdAt"])

        listing = (await client.get("/api/submissions")).json()
        assert listing["pageInfo"]["totalItems"] == 1
        stored = listing["data"][0]
        assert stored["submissionId"] == body["submissionId"]
        assert stored["createdAt"] == body["createdAt"]
        assert stored["fullName"] == "Alice Smith"
        assert stored["age"] == 25
        assert stored["skills"] == ["React"]
        assert stored["isActive"] is False

    @pytest.mark.asyncio
    async def test_each_submission_gets_its_own_identifier(self, client, valid_record):
        first = (await client.post("/api/submissions", json=valid_record)).json()
        second = (await client.post("/api/submissions", json=valid_record)).json()

        assert first["submissionId"] != second["submissionId"]

    @pytest.mark.asyncio
    async def test_non_object_body_is_rejected(self, client):
        response = await client.post("/api/submissions", json=["fullName", "Alice"])

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_storage_failure_uses_generic_envelope(self, client, valid_record, monkeypatch):
        async def _failing_insert(db, record, **kwargs):
            raise StorageError("Database insert failed", operation="insert")

        monkeypatch.setattr(submission_repository, "create_submission", _failing_insert)

        response = await client.post("/api/submissions", json=valid_record)

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Database insert failed"}

    @pytest.mark.asyncio
    async def test_list_and_object_values_do_not_break_storage(self, client, valid_record):
        record = {
            **valid_record,
            "fullName": ["Alice", "Bob", "Carol"],
            "age": {"n": 1},
            "bio": ["x"],
            "joinDate": [2025],
        }

        response = await client.post("/api/submissions", json=record)

        assert response.status_code == 201
        row = (await client.get("/api/submissions")).json()["data"][0]
        assert row["fullName"] == '["Alice", "Bob", "Carol"]'
        assert row["bio"] == '["x"]'
        assert row["joinDate"] == "[2025]"


# =============================================================================
# GET /api/submissions
# =============================================================================


class TestListSubmissions:
    @pytest.mark.asyncio
    async def test_second_page_of_twelve(self, client, db_session):
        base = datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc)
        for i in range(12):
            await submission_repository.create_submission(
                db_session,
                {"fullName": f"Employee {i:02d}", "age": 30, "gender": "Male"},
                created_at=base + timedelta(minutes=i),
            )
        await db_session.commit()

        response = await client.get("/api/submissions", params={"page": 2, "limit": 5, "sortOrder": "desc"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [row["fullName"] for row in body["data"]] == [
            "Employee 06",
            "Employee 05",
            "Employee 04",
            "Employee 03",
            "Employee 02",
        ]
        assert body["pageInfo"] == {
            "currentPage": 2,
            "totalPages": 3,
            "totalItems": 12,
            "limit": 5,
            "hasNextPage": True,
            "hasPrevPage": True,
        }

    @pytest.mark.asyncio
    async def test_defaults(self, client):
        response = await client.get("/api/submissions")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": [],
            "pageInfo": {
                "currentPage": 1,
                "totalPages": 0,
                "totalItems": 0,
                "limit": 5,
                "hasNextPage": False,
                "hasPrevPage": False,
            },
        }

    @pytest.mark.asyncio
    async def test_option_objects_come_back_as_labels(self, client, db_session):
        await submission_repository.create_submission(
            db_session,
            {
                "fullName": "Legacy Client",
                "age": 33,
                "gender": "Female",
                "skills": [{"label": "Node", "value": "node"}, "AWS"],
                "isActive": True,
            },
        )
        await db_session.commit()

        row = (await client.get("/api/submissions")).json()["data"][0]

        assert row["skills"] == ["Node", "AWS"]
        assert row["isActive"] is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"limit": 0}, {"limit": 1000}, {"sortOrder": "sideways"}],
    )
    async def test_out_of_range_query_is_rejected(self, client, params):
        response = await client.get("/api/submissions", params=params)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_fetch_failure_uses_generic_envelope(self, client, monkeypatch):
        async def _failing_select(db, **kwargs):
            raise StorageError("Data fetch failed", operation="select")

        monkeypatch.setattr(submission_repository, "list_submissions", _failing_select)

        response = await client.get("/api/submissions")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Data fetch failed"}

    @pytest.mark.asyncio
    async def test_count_failure_uses_generic_envelope(self, client, monkeypatch):
        async def _failing_count(db):
            raise StorageError("Count query failed", operation="count")

        monkeypatch.setattr(submission_repository, "count_submissions", _failing_count)

        response = await client.get("/api/submissions")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Count query failed"}
