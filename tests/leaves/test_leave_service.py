from __future__ import annotations

import io
from datetime import datetime

import pytest
from werkzeug.datastructures import FileStorage

from hr_records.core.exceptions import UploadError, ValidationError


@pytest.fixture()
def employee(container):
    return container.employee_service.create_employee(
        {
            "fullName": "Margaret",
            "email": "margaret@example.com",
            "phone": "555",
            "position": "Lead",
            "department": "Apollo",
            "dateOfJoining": "2020-01-01",
        }
    )


def test_missing_end_date_means_single_day(container, employee):
    leave = container.leave_service.request_leave(
        {"employeeId": employee.id, "startDate": "2024-07-01", "reason": "Trip"}
    )

    assert leave.start_date == datetime(2024, 7, 1)
    assert leave.end_date == leave.start_date
    assert leave.status == "pending"


def test_empty_end_date_from_form_is_treated_as_missing(container, employee):
    leave = container.leave_service.request_leave(
        {"employeeId": str(employee.id), "startDate": "2024-07-01", "endDate": "", "reason": "Trip"}
    )
    assert leave.end_date == datetime(2024, 7, 1)


def test_explicit_end_date_kept(container, employee):
    leave = container.leave_service.request_leave(
        {"employeeId": employee.id, "startDate": "2024-07-01", "endDate": "2024-07-03", "reason": "Trip"}
    )
    assert leave.end_date == datetime(2024, 7, 3)


def test_reason_and_start_required(container, employee):
    with pytest.raises(ValidationError) as exc:
        container.leave_service.request_leave({"employeeId": employee.id})
    assert "startDate: required" in str(exc.value)
    assert "reason: required" in str(exc.value)


def test_documents_are_stored(container, employee):
    doc = FileStorage(stream=io.BytesIO(b"note"), filename="note.docx", content_type="application/vnd.openxmlformats-officedocument.wordprocessingml.document")

    leave = container.leave_service.request_leave(
        {"employeeId": employee.id, "startDate": "2024-07-01", "reason": "Medical"}, documents=doc
    )

    assert leave.documents_url.endswith(".docx")


def test_bad_documents_reject_request(container, employee):
    doc = FileStorage(stream=io.BytesIO(b"x"), filename="note.txt", content_type="text/plain")
    with pytest.raises(UploadError):
        container.leave_service.request_leave(
            {"employeeId": employee.id, "startDate": "2024-07-01", "reason": "Medical"}, documents=doc
        )
    assert container.leave_service.list_for_employee(employee.id) == []


def test_approval_via_status_update_shows_in_approved_list(container, employee):
    svc = container.leave_service
    a = svc.request_leave({"employeeId": employee.id, "startDate": "2024-07-01", "reason": "A"})
    b = svc.request_leave({"employeeId": employee.id, "startDate": "2024-08-01", "reason": "B"})
    assert svc.list_approved() == []

    svc.update_leave(a.id, {"status": "approved"})
    svc.update_leave(b.id, {"status": "rejected"})

    approved = svc.list_approved()
    assert [l.id for l in approved] == [a.id]
    assert approved[0].employee == employee


def test_list_orders_by_start_date_desc(container, employee):
    svc = container.leave_service
    early = svc.request_leave({"employeeId": employee.id, "startDate": "2024-01-10", "reason": "A"})
    late = svc.request_leave({"employeeId": employee.id, "startDate": "2024-09-10", "reason": "B"})

    assert [l.id for l in svc.list_leaves()] == [late.id, early.id]
    assert [l.id for l in svc.list_for_employee(employee.id)] == [late.id, early.id]


def test_delete_leave(container, employee):
    svc = container.leave_service
    leave = svc.request_leave({"employeeId": employee.id, "startDate": "2024-01-10", "reason": "A"})
    svc.delete_leave(leave.id)
    assert svc.get_leave(leave.id) is None
