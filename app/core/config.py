from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Admission Portal Backend"
    VERSION: str = "1.0.0"

    # sqlite+aiosqlite for local runs; postgresql+asyncpg://... in production
    DATABASE_URL: str = "sqlite+aiosqlite:///./admission_portal.db"
    DB_ECHO: bool = False

    ENV: str = "dev"  # "dev" or "prod"
    PORT: int = 3000

    # Uploaded documents land in UPLOAD_DIR; stored paths are relative to PUBLIC_DIR
    PUBLIC_DIR: str = "public"
    UPLOAD_DIR: str = "public/uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB

    CORS_ORIGINS: List[str] = ["*"]

    # Seeded at startup when email and password are both set
    DEFAULT_ADMIN_NAME: str | None = "Portal Admin"
    DEFAULT_ADMIN_EMAIL: str | None = None
    DEFAULT_ADMIN_PASSWORD: str | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
