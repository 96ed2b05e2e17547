from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.crud import summary as crud_summary
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request

router = APIRouter(
    prefix="/api/dashboard",
    tags=["Dashboard"],
)
translator = Translator()

@router.get("")
def get_dashboard_summary(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    data = crud_summary.get_dashboard_summary(db)
    return ResponseHandler.success(
        message=translator.t("dashboard_retrieved", lang),
        data=data,
    )
