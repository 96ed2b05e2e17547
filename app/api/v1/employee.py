from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.crud import employee as crud_employee
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request
from app.schemas.employee import EmployeeCreate, EmployeeResponse

translator = Translator()

router = APIRouter(
    prefix="/api/employees",
    tags=["Employees"],
)

@router.get("")
def list_employees(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    employees = crud_employee.list_employees(db)
    return ResponseHandler.success(
        message=translator.t("employees_retrieved", lang),
        data=[EmployeeResponse.model_validate(e) for e in employees],
    )

@router.post("", status_code=201)
def create_employee(data: EmployeeCreate, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    employee = crud_employee.create_employee(db, data)
    return ResponseHandler.created(
        message=translator.t("employee_created", lang),
        data=EmployeeResponse.model_validate(employee),
    )

@router.get("/{employee_id}")
def get_employee(employee_id: str, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    employee = crud_employee.get_employee(db, employee_id)
    return ResponseHandler.success(
        message=translator.t("employee_retrieved", lang),
        data=EmployeeResponse.model_validate(employee),
    )

@router.delete("/{employee_id}")
def delete_employee(employee_id: str, request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    removed = crud_employee.delete_employee(db, employee_id)
    return ResponseHandler.success(
        message=translator.t("employee_deleted", lang),
        data=removed,
    )
