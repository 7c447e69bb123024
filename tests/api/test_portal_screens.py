"""
Tests for Grievance, Opportunity, Community, Map, Dashboard and SOS Endpoints
"""

import pytest
from httpx import AsyncClient

GRIEVANCES = [
    {"id": 2, "title": "No water", "category": "Hostel", "priority": "Urgent", "status": "In Progress", "votes": 8},
    {"id": 1, "title": "Broken fan", "category": "Hostel", "priority": "Low", "status": "Submitted", "votes": 1},
]


class TestGrievanceEndpoints:

    @pytest.mark.asyncio
    async def test_list_with_filter(self, client: AsyncClient, login_as, student_user, mock_data_client):
        login_as(student_user)
        mock_data_client.select.return_value = GRIEVANCES

        response = await client.get("/api/v1/grievances", params={"status": "In Progress"})

        assert response.status_code == 200
        assert [g["id"] for g in response.json()] == ["2"]

    @pytest.mark.asyncio
    async def test_submit(self, client: AsyncClient, login_as, student_user, mock_data_client):
        login_as(student_user)
        mock_data_client.select.return_value = GRIEVANCES

        response = await client.post(
            "/api/v1/grievances",
            json={"title": "Mess food cold", "category": "Food", "description": "Dinner served cold all week"},
        )

        assert response.status_code == 201
        assert len(response.json()) == 2

    @pytest.mark.asyncio
    async def test_submit_blank_title(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.post("/api/v1/grievances", json={"title": "", "description": "x"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_student_cannot_change_status(self, client: AsyncClient, login_as, student_user, mock_data_client):
        login_as(student_user)
        mock_data_client.select.return_value = GRIEVANCES

        response = await client.patch("/api/v1/grievances/1/status", json={"status": "Resolved"})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_admin_changes_status(self, client: AsyncClient, login_as, admin_user, mock_data_client):
        login_as(admin_user)
        mock_data_client.select.return_value = GRIEVANCES
        mock_data_client.update.return_value = [dict(GRIEVANCES[1], status="Under Review")]

        response = await client.patch("/api/v1/grievances/1/status", json={"status": "Under Review"})

        assert response.status_code == 200
        assert response.json()["status"] == "Under Review"

    @pytest.mark.asyncio
    async def test_faculty_cannot_open_grievances(self, client: AsyncClient, login_as, faculty_user):
        login_as(faculty_user)

        response = await client.get("/api/v1/grievances")

        assert response.status_code == 403


class TestOpportunityEndpoints:

    @pytest.mark.asyncio
    async def test_publish(self, client: AsyncClient, login_as, faculty_user, mock_data_client):
        login_as(faculty_user)

        response = await client.post(
            "/api/v1/opportunities",
            json={"title": "Vision lab RA", "type": "Research", "deadline": "2024-06-01", "tags": "CV, Deep Learning"},
        )

        assert response.status_code == 201
        _, rows = mock_data_client.insert.await_args.args
        assert rows[0]["tags"] == ["CV", "Deep Learning"]

    @pytest.mark.asyncio
    async def test_apply_unknown(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.post("/api/v1/opportunities/99/apply")

        assert response.status_code == 404


class TestCommunityEndpoints:

    @pytest.mark.asyncio
    async def test_list_posts(self, client: AsyncClient, login_as, authority_user, mock_data_client):
        login_as(authority_user)
        mock_data_client.select.return_value = [
            {
                "id": 1,
                "title": "Welcome",
                "content": "Hello campus",
                "author_id": "u-admin",
                "author_name": "Chief Warden",
                "author_role": "Admin",
                "created_at": "2024-01-01T00:00:00+00:00",
            }
        ]

        response = await client.get("/api/v1/community/posts")

        assert response.status_code == 200
        assert response.json()[0]["time_ago"] == "2024-01-01"

    @pytest.mark.asyncio
    async def test_banned_user_cannot_post(self, client: AsyncClient, login_as, student_user, mock_data_client):
        login_as(student_user)
        mock_data_client.select_one.return_value = {"email": student_user.email}

        response = await client.post("/api/v1/community/posts", json={"title": "Hi", "content": "Hello"})

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_moderator_deletes_post(self, client: AsyncClient, login_as, admin_user, mock_data_client):
        login_as(admin_user)

        response = await client.delete("/api/v1/community/posts/5")

        assert response.status_code == 204
        mock_data_client.delete.assert_awaited_once_with("posts", [("id", "eq", "5")])

    @pytest.mark.asyncio
    async def test_blank_comment(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.post("/api/v1/community/posts/5/comments", json={"content": "   "})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_ban_status(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.get("/api/v1/community/bans/me")

        assert response.json() == {"banned": False}


class TestCampusEndpoints:

    @pytest.mark.asyncio
    async def test_map_view(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.get("/api/v1/map")

        assert response.status_code == 200
        assert response.json()["zoom"] == 16

    @pytest.mark.asyncio
    async def test_authority_has_no_map(self, client: AsyncClient, login_as, authority_user):
        login_as(authority_user)

        response = await client.get("/api/v1/map/geojson")

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_dashboard(self, client: AsyncClient, login_as, faculty_user, mock_data_client):
        login_as(faculty_user)
        mock_data_client.count.return_value = 3

        response = await client.get("/api/v1/dashboard")

        assert response.status_code == 200
        data = response.json()
        assert data["stats"]["total_students"] == 3
        assert len(data["activity"]) == 7

    @pytest.mark.asyncio
    async def test_sos(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.post("/api/v1/sos", json={"latitude": 31.78, "longitude": 76.99})

        assert response.status_code == 200
        assert response.json()["location"] == {"lat": 31.78, "lng": 76.99}

    @pytest.mark.asyncio
    async def test_sos_without_body(self, client: AsyncClient, login_as, student_user):
        login_as(student_user)

        response = await client.post("/api/v1/sos")

        assert response.status_code == 200
        assert response.json()["acknowledged"] is True
