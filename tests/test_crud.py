from datetime import date, timedelta

import pytest
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import OperationalError

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.crud import attendance as crud_attendance
from app.crud import employee as crud_employee
from app.crud import summary as crud_summary
from app.helpers.utils import MAX_DB_INTEGER, parse_employee_identifier, parse_record_id
from app.models.employee import Attendance, Employee
from app.schemas.attendance import AttendanceCreate
from app.schemas.employee import EmployeeCreate

TODAY = date(2024, 1, 15)


def _employee(db, name="Jane Doe", email="jane@co.com", department="HR"):
    return crud_employee.create_employee(
        db, EmployeeCreate(full_name=name, email=email, department=department)
    )


def _mark(db, employee, day, status="Present"):
    return crud_attendance.mark_attendance(
        db,
        AttendanceCreate(employee_id=employee.employee_code, date=day, status=status),
        today=TODAY,
    )


def test_employee_schema_rejects_bad_input():
    with pytest.raises(SchemaValidationError) as exc_info:
        EmployeeCreate(full_name="", email="jane", department="Legal")
    assert {err["loc"][0] for err in exc_info.value.errors()} == {"full_name", "email", "department"}


def test_create_employee_persists(db):
    employee = _employee(db)
    assert employee.employee_code == "EMP001"
    assert db.query(Employee).count() == 1


def test_duplicate_email_rejected(db):
    _employee(db)
    with pytest.raises(ConflictError):
        _employee(db, name="Other Jane", email="JANE@CO.COM")
    assert db.query(Employee).count() == 1


def test_get_employee_unknown_identifier(db):
    for identifier in ("EMP001", "1", "", "not-an-id"):
        with pytest.raises(NotFoundError):
            crud_employee.get_employee(db, identifier)


def test_delete_employee_removes_every_entry(db):
    jane = _employee(db)
    john = _employee(db, "John Roe", "john@co.com", "Sales")
    for offset in range(5):
        _mark(db, jane, TODAY - timedelta(days=offset), "Present" if offset % 2 else "Absent")
    _mark(db, john, TODAY)

    removed = crud_employee.delete_employee(db, "EMP001")
    assert removed["employee_id"] == "EMP001"
    assert removed["removed_attendance"] == 5
    assert crud_attendance.list_attendance(db, employee_id="EMP001") == []
    assert db.query(Attendance).count() == 1


def test_mark_rejects_future_date(db):
    jane = _employee(db)
    with pytest.raises(ValidationError):
        _mark(db, jane, TODAY + timedelta(days=1))
    assert db.query(Attendance).count() == 0


def test_mark_for_deleted_employee(db):
    jane = _employee(db)
    crud_employee.delete_employee(db, jane.employee_code)
    with pytest.raises(NotFoundError):
        crud_attendance.mark_attendance(
            db,
            AttendanceCreate(employee_id="EMP001", date=TODAY, status="Present"),
            today=TODAY,
        )


def test_mark_duplicate_rejected(db):
    jane = _employee(db)
    _mark(db, jane, TODAY)
    with pytest.raises(ConflictError):
        _mark(db, jane, TODAY, "Absent")
    assert db.query(Attendance).count() == 1


def test_mark_conflict_detected_at_commit(db, monkeypatch):
    jane = _employee(db)
    _mark(db, jane, TODAY)

    # skip the pre-insert duplicate lookup so the unique constraint decides
    original_query = db.query

    def query_without_duplicate_check(*entities):
        if len(entities) == 1 and entities[0] is Attendance.id:
            return original_query(Attendance.id).filter(Attendance.id < 0)
        return original_query(*entities)

    monkeypatch.setattr(db, "query", query_without_duplicate_check)
    with pytest.raises(ConflictError):
        _mark(db, jane, TODAY, "Absent")
    monkeypatch.undo()
    assert db.query(Attendance).count() == 1


def test_delete_attendance_unknown(db):
    with pytest.raises(NotFoundError):
        crud_attendance.delete_attendance(db, 99)


def test_employee_summary_invariant(db):
    jane = _employee(db)
    statuses = ["Present", "Absent", "Present", "Present", "Absent", "Present", "Present", "Present"]
    for offset, status in enumerate(statuses):
        _mark(db, jane, TODAY - timedelta(days=offset), status)

    summary = crud_summary.get_employee_summary(db, jane.employee_code)
    assert summary.total_days == summary.total_present + summary.total_absent == 8
    assert summary.total_present == 6
    assert summary.attendance_percentage == 75


def test_dashboard_uses_given_day(db):
    jane = _employee(db)
    john = _employee(db, "John Roe", "john@co.com", "Sales")
    _mark(db, jane, TODAY, "Present")
    _mark(db, john, TODAY, "Absent")
    _mark(db, jane, TODAY - timedelta(days=1), "Present")

    summary = crud_summary.get_dashboard_summary(db, today=TODAY)
    assert summary.total_employees == 2
    assert summary.total_attendance_records == 3
    assert (summary.today_present, summary.today_absent) == (1, 1)

    yesterday = crud_summary.get_dashboard_summary(db, today=TODAY - timedelta(days=1))
    assert (yesterday.today_present, yesterday.today_absent) == (1, 0)


@pytest.mark.parametrize("failing_call", ["delete", "commit"])
def test_failed_employee_delete_keeps_everything(db, monkeypatch, failing_call):
    jane = _employee(db)
    for offset in range(3):
        _mark(db, jane, TODAY - timedelta(days=offset))

    def fail(*args, **kwargs):
        raise OperationalError("DELETE FROM employees", {}, Exception("disk I/O error"))

    monkeypatch.setattr(db, failing_call, fail)
    with pytest.raises(OperationalError):
        crud_employee.delete_employee(db, "EMP001")
    monkeypatch.undo()

    assert db.query(Employee).count() == 1
    assert db.query(Attendance).count() == 3
    assert len(crud_attendance.list_attendance(db, employee_id="EMP001")) == 3


@pytest.mark.parametrize(
    "identifier,expected",
    [
        ("EMP001", 1), ("emp1", 1), (" 42 ", 42), (7, 7), ("EMP2147483647", 2147483647),
        ("EMP2147483648", None), ("²", None), ("EMP²", None), (0, None),
        (True, None), ("", None), (None, None), ("E42", None),
    ],
)
def test_parse_employee_identifier(identifier, expected):
    assert parse_employee_identifier(identifier) == expected


def test_parse_record_id_bounds():
    assert parse_record_id(MAX_DB_INTEGER) == MAX_DB_INTEGER
    assert parse_record_id(MAX_DB_INTEGER + 1) is None
    assert parse_record_id("99999999999999999999") is None
