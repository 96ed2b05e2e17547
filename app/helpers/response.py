from fastapi.responses import JSONResponse
from typing import Any
from pydantic import BaseModel
from sqlalchemy.orm import DeclarativeMeta
import json
def safe_serialize(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True)
    elif isinstance(obj.__class__, DeclarativeMeta):  # SQLAlchemy model
        return safe_serialize({col.name: getattr(obj, col.name) for col in obj.__table__.columns})
    elif isinstance(obj, (list, tuple)):
        return [safe_serialize(item) for item in obj]
    elif isinstance(obj, dict):
        return {key: safe_serialize(value) for key, value in obj.items()}
    elif isinstance(obj, (str, int, float, bool)) or obj is None:
        return obj
    else:
        try:
            return json.loads(json.dumps(obj, default=str))  # fallback
        except (TypeError, ValueError):
            return str(obj)  # final fallback
class ResponseHandler:
    @staticmethod
    def success(
        data: Any = None,
        message: str = "Success",
        code: int = 200
    ) -> JSONResponse:
        return JSONResponse(
            status_code=code,
            content={
                "status": "success",
                "code": code,
                "message": message,
                "data": safe_serialize(data),
            },
        )

    @staticmethod
    def created(data: Any = None, message: str = "Created") -> JSONResponse:
        return ResponseHandler.success(data=data, message=message, code=201)

    @staticmethod
    def error(
        message: str,
        code: int,
        detail: str = None,
        error: Any = None,
        data: Any = None,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=code,
            content={
                "status": "error",
                "code": code,
                "message": message,
                "detail": detail or message,
                "data": safe_serialize(data),
                "error": safe_serialize(error),
            },
        )

    @staticmethod
    def bad_request(message: str = "Bad Request", detail: str = None, error: Any = None, data: Any = None) -> JSONResponse:
        return ResponseHandler.error(message, 400, detail=detail, error=error, data=data)

    @staticmethod
    def not_found(message: str = "Not Found", detail: str = None, error: Any = None, data: Any = None) -> JSONResponse:
        return ResponseHandler.error(message, 404, detail=detail, error=error, data=data)

    @staticmethod
    def conflict(message: str = "Conflict", detail: str = None, error: Any = None, data: Any = None) -> JSONResponse:
        return ResponseHandler.error(message, 409, detail=detail, error=error, data=data)

    @staticmethod
    def internal_error(message: str = "Internal Server Error", detail: str = None, error: Any = None, data: Any = None) -> JSONResponse:
        return ResponseHandler.error(message, 500, detail=detail, error=error, data=data)

    @staticmethod
    def service_unavailable(message: str = "Service Unavailable", detail: str = None, error: Any = None, data: Any = None) -> JSONResponse:
        return ResponseHandler.error(message, 503, detail=detail, error=error, data=data)
