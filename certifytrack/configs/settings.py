import os
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Hosted Postgres connection (required)
    DB_USER: str
    DB_PASSWORD: str
    DB_HOST: str
    DB_PORT: str = "5432"
    DB_NAME: str = "postgres"

    # Auth service tokens are HS256 JWTs signed with the project secret (required)
    AUTH_JWT_SECRET: str
    AUTH_JWT_AUDIENCE: str = "authenticated"
    AUTH_TOKEN_URL: str = "/auth/v1/token?grant_type=password"

    # S3-compatible object storage (required)
    STORAGE_ENDPOINT: str
    STORAGE_ACCESS_KEY: str
    STORAGE_SECRET_KEY: str
    STORAGE_SECURE: bool = True
    STORAGE_BUCKET: str = "certifytrack"
    STORAGE_PUBLIC_URL: str = ""

    # Optional development settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    class Config:
        # Look for env file in project root, even when running from subdirectories
        env_file = os.getenv("ENV_FILE") or str(Path(__file__).parent.parent.parent / "local.env")
        # Allow case-insensitive environment variable names
        case_sensitive = False

settings = Settings()
