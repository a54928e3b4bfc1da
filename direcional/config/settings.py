# direcional/config/settings.py
from pydantic_settings import BaseSettings
from typing import List
import os

class Settings(BaseSettings):
    # App Info
    app_name: str = "Direcional API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database - PostgreSQL em produção, SQLite para desenvolvimento local
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./direcional.db")

    # Security
    secret_key: str = os.getenv("SECRET_KEY", "change-in-production")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480
    jwt_issuer: str = "DirecionalApi"
    jwt_audience: str = "DirecionalApi"

    # CORS
    cors_origins: List[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 8000))

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # SSL para PostgreSQL hospedado
    @property
    def database_url_with_ssl(self) -> str:
        """Adiciona sslmode=require para conexões com bancos hospedados"""
        if self.database_url and "render" in self.database_url:
            if "?sslmode=" not in self.database_url:
                return f"{self.database_url}?sslmode=require"
        return self.database_url

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
