# File: app/core/config.py

import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from sqlalchemy.engine import URL, make_url


class Settings(BaseModel):
    # Env-derived defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "User Service")
    VERSION: str = os.getenv("VERSION", "0.1.0")

    # Empty prefix keeps the routes at /users and /healthz
    api_prefix: str = os.getenv("API_PREFIX", "")

    # CORS, comma-separated in the environment
    backend_cors_origins: List[str] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Database: connection string + optional DBAPI driver name.
    # "sqlite://" is an in-memory database that lives as long as the process.
    database_url: str = os.getenv("DATABASE_URL", "sqlite://")
    database_driver: Optional[str] = os.getenv("DATABASE_DRIVER") or None

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Server (used by run.py)
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = os.getenv("PORT", "8000")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("api_prefix", mode="before")
    @classmethod
    def normalize_prefix(cls, v):
        v = str(v or "").strip("/")
        return "/" + v if v else ""

    @property
    def sqlalchemy_url(self) -> URL:
        """
        Combine the connection string with the driver name.

        "sqlite://" + "pysqlite" -> "sqlite+pysqlite://"
        """
        url = make_url(self.database_url)
        if self.database_driver:
            backend = url.get_backend_name()
            url = url.set(drivername=f"{backend}+{self.database_driver}")
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
