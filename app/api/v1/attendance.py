from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationError
from app.crud import attendance as crud_attendance
from app.crud import summary as crud_summary
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.schemas.attendance import AttendanceCreate, AttendanceResponse

translator = Translator()

router = APIRouter(
    prefix="/api/attendance",
    tags=["Attendance"],
)


def _parse_date_filter(value: Optional[str]) -> Optional[date]:
    # the client always sends both filters, blank when unset
    if value is None or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(
            f"Invalid date '{value}', expected YYYY-MM-DD",
            errors=[{"field": "date", "message": "Invalid date, expected YYYY-MM-DD"}],
        )

@router.get("")
def list_attendance(
    request: Request,
    employee_id: Optional[str] = None,
    date: Optional[str] = None,
    db: Session = Depends(get_db),
):
    lang = get_lang_from_request(request)
    records = crud_attendance.list_attendance(
        db,
        employee_id=(employee_id or "").strip() or None,
        date=_parse_date_filter(date),
    )
    return ResponseHandler.success(
        message=translator.t("attendance_retrieved", lang),
        data=[AttendanceResponse.model_validate(r) for r in records],
    )

@router.post("", status_code=201)
def mark_attendance(data: AttendanceCreate, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    attendance = crud_attendance.mark_attendance(db, data)
    return ResponseHandler.created(
        message=translator.t("attendance_marked", lang),
        data=AttendanceResponse.model_validate(attendance),
    )

@router.get("/summary/{employee_id}")
def get_attendance_summary(employee_id: str, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    summary = crud_summary.get_employee_summary(db, employee_id)
    return ResponseHandler.success(
        message=translator.t("summary_retrieved", lang),
        data=summary,
    )

@router.delete("/{attendance_id}")
def delete_attendance(attendance_id: str, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    removed = crud_attendance.delete_attendance(db, attendance_id)
    return ResponseHandler.success(
        message=translator.t("attendance_deleted", lang),
        data=removed,
    )
