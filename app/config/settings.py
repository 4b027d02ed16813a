# app/config/settings.py
# Environment-driven runtime settings

import os
from typing import List, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class Settings:
    """Runtime settings read from the environment (and .env) at process start"""

    def __init__(self):
        # Database
        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")
        self.DB_USER = os.getenv("DB_USER", "postgres")
        self.DB_PASSWORD = os.getenv("DB_PASSWORD", "")
        self.DB_HOST = os.getenv("DB_HOST", "localhost")
        self.DB_PORT = int(os.getenv("DB_PORT", "5432"))
        self.DB_NAME = os.getenv("DB_NAME", "safety_portal")
        self.DB_SSLMODE: Optional[str] = os.getenv("DB_SSLMODE")

        # Tokens
        self.JWT_SECRET: Optional[str] = os.getenv("JWT_SECRET")
        self.JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

        # Server
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = int(os.getenv("PORT", "5001"))
        self.RELOAD = os.getenv("RELOAD", "false").lower() == "true"
        self.ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
            ).split(",")
            if origin.strip()
        ]

        # Bootstrap admin (create_tables.py)
        self.ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
        self.ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
        self.ADMIN_PASSWORD: Optional[str] = os.getenv("ADMIN_PASSWORD")

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def database_url(self):
        """DATABASE_URL if set, otherwise a PostgreSQL URL built from the DB_* parts"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    def require_jwt_secret(self) -> str:
        if not self.JWT_SECRET:
            raise RuntimeError("FATAL: JWT_SECRET is not defined in the environment")
        return self.JWT_SECRET


settings = Settings()
