import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1 import attendance, dashboard, employee
from app.core.config import settings
from app.core.exceptions import HRMSError
from app.core.logging import setup_logging
from app.db import session as db_session
from app.db.base import Base
from app.db.session import get_db
from app.helpers.response import ResponseHandler
from app.helpers.translator import Translator
from app.helpers.utils import get_lang_from_request

setup_logging()
logger = logging.getLogger(__name__)
translator = Translator()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        Base.metadata.create_all(bind=db_session.engine)
    logger.info("%s started", settings.PROJECT_NAME)
    yield


app = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION, lifespan=lifespan)


def _format_validation_errors(errors) -> list:
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        formatted.append({"field": ".".join(loc) or "body", "message": message})
    return formatted

@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    lang = get_lang_from_request(request)
    errors = _format_validation_errors(exc.errors())
    return ResponseHandler.bad_request(
        message=translator.t("validation_failed", lang),
        detail="; ".join(f"{e['field']}: {e['message']}" for e in errors),
        error=errors,
    )

@app.exception_handler(HRMSError)
async def hrms_exception_handler(request: Request, exc: HRMSError):
    lang = get_lang_from_request(request)
    return ResponseHandler.error(
        message=translator.t(exc.message, lang),
        code=exc.status_code,
        detail=exc.detail,
        error=exc.errors,
    )

@app.exception_handler(DBAPIError)
async def database_error_handler(request: Request, exc: DBAPIError):
    lang = get_lang_from_request(request)
    if isinstance(exc, OperationalError) or exc.connection_invalidated:
        logger.error("Database unavailable: %s", exc)
        return ResponseHandler.service_unavailable(
            message=translator.t("service_unavailable", lang),
            detail="Database is unreachable, retry later",
        )
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return ResponseHandler.internal_error(
        message=translator.t("something_went_wrong", lang),
        detail=str(exc.orig) if exc.orig is not None else str(exc),
    )

@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    lang = get_lang_from_request(request)
    key = "not_found" if exc.status_code == 404 else "something_went_wrong"
    return ResponseHandler.error(
        message=translator.t(key, lang),
        code=exc.status_code,
        detail=str(exc.detail),
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    lang = get_lang_from_request(request)
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return ResponseHandler.internal_error(
        message=translator.t("something_went_wrong", lang),
        detail=str(exc),
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(employee.router)
app.include_router(attendance.router)
app.include_router(dashboard.router)


@app.get("/health", tags=["Health"])
def health(request: Request, db: Session = Depends(get_db)):
    lang = get_lang_from_request(request)
    db.execute(text("SELECT 1"))
    return ResponseHandler.success(message=translator.t("healthy", lang), data={"database": "ok"})
