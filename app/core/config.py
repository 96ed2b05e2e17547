# app/core/config.py
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "HRMS Lite API"
    VERSION: str = "1.0"

    # Database config
    DATABASE_URL: str = "sqlite:///./hrms.db"
    SQL_ECHO: bool = False
    AUTO_CREATE_TABLES: bool = True

    CORS_ORIGINS: List[str] = ["*"]

    # "today" for attendance date checks and dashboard counts
    TIMEZONE: str = "UTC"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
