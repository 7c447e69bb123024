"""
Integration Tests for the Academics Service
"""

import pytest

from campus_portal.api.services.academics_service import AcademicsService
from campus_portal.core.calculators.attendance import AttendanceBand
from campus_portal.core.errors import PermissionDeniedError
from campus_portal.core.models.records import ResourceUpload

COURSES = [
    {"id": 1, "code": "CS201", "name": "Data Structures", "credits": 4, "attendance": 35, "total_classes": 40},
    {"id": 2, "code": "MA202", "name": "Probability", "credits": 3, "attendance": 20, "total_classes": 40},
    {"id": 3, "code": "HS101", "name": "Ethics", "credits": 2, "attendance": None, "total_classes": 0},
]

ASSIGNMENTS = [
    {"id": i, "title": f"Assignment {i}", "course_code": "CS201", "due_date": f"2024-03-{10 + i}T23:59:00+00:00", "type": "Lab"}
    for i in range(1, 6)
]

RESOURCES = [
    {"id": 1, "title": "Lecture 1", "type": "PDF", "size": "2.4 MB", "uploaded_by": "Dr. A. Sharma", "url": "#"},
]


def route_select(table, *args, **kwargs):
    return {"courses": COURSES, "assignments": ASSIGNMENTS, "resources": RESOURCES}.get(table, [])


@pytest.fixture
def service(mock_data_client):
    mock_data_client.select.side_effect = route_select
    return AcademicsService(mock_data_client)


class TestCourses:

    @pytest.mark.asyncio
    async def test_attendance_summaries(self, service):
        courses = await service.courses()

        assert [c.percent for c in courses] == [88, 50, None]
        assert [c.band for c in courses] == [AttendanceBand.GOOD, AttendanceBand.CRITICAL, None]


class TestResources:

    @pytest.mark.asyncio
    async def test_faculty_upload(self, service, faculty_user, mock_data_client):
        resources = await service.upload_resource(faculty_user, ResourceUpload(title="Midterm key", type="DOC"))

        table, rows = mock_data_client.insert.await_args.args
        assert table == "resources"
        assert rows == [
            {
                "title": "Midterm key",
                "type": "DOC",
                "size": "1.2 MB",
                "uploaded_by": "Dr. A. Sharma",
                "url": "#",
            }
        ]
        assert len(resources) == 1

    @pytest.mark.asyncio
    async def test_students_cannot_upload(self, service, student_user, mock_data_client):
        with pytest.raises(PermissionDeniedError):
            await service.upload_resource(student_user, ResourceUpload(title="Notes"))
        mock_data_client.insert.assert_not_awaited()


class TestAssignments:

    @pytest.mark.asyncio
    async def test_ordered_by_due_date(self, service, mock_data_client):
        await service.assignments()
        mock_data_client.select.assert_awaited_with("assignments", order="due_date", ascending=True)

    @pytest.mark.asyncio
    async def test_upcoming_are_first_three(self, service):
        upcoming = await service.upcoming_assignments()
        assert [a.id for a in upcoming] == ["1", "2", "3"]


class TestOverview:

    @pytest.mark.asyncio
    async def test_student_gets_predictor(self, service, student_user):
        overview = await service.overview(student_user)

        predictor = overview["predictor"]
        assert predictor["inputs"]["current_average"] == 8.0
        assert predictor["inputs"]["target_average"] == 8.5
        assert predictor["result"]["required_term_average"] == pytest.approx(10.625)
        assert predictor["result"]["display_text"] == "> 10"
        assert len(overview["upcoming_assignments"]) == 3
        assert len(overview["courses"]) == 3

    @pytest.mark.asyncio
    async def test_faculty_has_no_predictor(self, service, faculty_user):
        overview = await service.overview(faculty_user)
        assert overview["predictor"] is None

    def test_project(self, service):
        assert service.project(7.0, 85, 20, 7.5).required_term_average == 9.625
