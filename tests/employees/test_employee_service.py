from __future__ import annotations

from datetime import datetime

import pytest

from hr_records.core.exceptions import NotFoundError, ValidationError


def _employee(**overrides):
    data = {
        "fullName": "Grace Hopper",
        "email": "grace@example.com",
        "phone": "555-0101",
        "position": "Admiral",
        "department": "Navy",
        "dateOfJoining": "2023-06-01T09:00:00",
    }
    data.update(overrides)
    return data


def _candidate(container, **overrides):
    data = {
        "fullName": "Alan Turing",
        "email": "alan@example.com",
        "phone": "555-0199",
        "position": "Researcher",
        "experience": "10 years",
    }
    data.update(overrides)
    return container.candidate_service.create_candidate(data)


def test_create_employee(container):
    e = container.employee_service.create_employee(_employee())

    assert e.status == "present"
    assert e.candidate_id is None
    assert e.date_of_joining == datetime(2023, 6, 1, 9, 0, 0)


def test_create_employee_requires_joining_date(container):
    with pytest.raises(ValidationError, match="dateOfJoining: required"):
        container.employee_service.create_employee(_employee(dateOfJoining=None))


def test_candidate_reference_is_not_checked(container):
    e = container.employee_service.create_employee(_employee(candidateId=12345))
    assert e.candidate_id == 12345


def test_promote_copies_candidate_and_links_back(container):
    cand = _candidate(container)
    now = datetime(2024, 2, 1, 8, 30)

    emp = container.employee_service.promote_candidate(cand.id, {"department": "Research"}, now=now)

    assert emp.full_name == cand.full_name
    assert emp.email == cand.email
    assert emp.phone == cand.phone
    assert emp.position == cand.position
    assert emp.department == "Research"
    assert emp.date_of_joining == now
    assert emp.status == "present"
    assert emp.candidate_id == cand.id
    # The candidate row is left untouched.
    assert container.candidate_service.get_candidate(cand.id) == cand


def test_promote_unknown_candidate(container):
    with pytest.raises(NotFoundError):
        container.employee_service.promote_candidate(77, {"department": "X"})
    assert container.employee_service.list_employees() == []


def test_promote_requires_department(container):
    cand = _candidate(container)
    with pytest.raises(ValidationError, match="department"):
        container.employee_service.promote_candidate(cand.id, {})


def test_promote_twice_hits_email_uniqueness(container):
    cand = _candidate(container)
    container.employee_service.promote_candidate(cand.id, {"department": "R"})
    with pytest.raises(ValidationError, match="email"):
        container.employee_service.promote_candidate(cand.id, {"department": "R"})


def test_update_ignores_server_fields(container):
    e = container.employee_service.create_employee(_employee())

    updated = container.employee_service.update_employee(e.id, {"department": "Ops", "createdAt": "2000-01-01"})

    assert updated.department == "Ops"
    assert updated.created_at == e.created_at
