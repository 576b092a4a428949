"""
Portaria - Configuration
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

# Carrega .env com override para sobrescrever variáveis do sistema
env_file = Path(__file__).parent.parent.parent / ".env"
if env_file.exists():
    load_dotenv(env_file, override=True)


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Portaria"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Database (accepts DATABASE_URL or PORTARIA_DATABASE_URL)
    DATABASE_URL: Optional[str] = None
    PORTARIA_DATABASE_URL: str = "sqlite+aiosqlite:///./portaria.db"

    @property
    def db_url(self) -> str:
        """Returns DATABASE_URL if set, otherwise PORTARIA_DATABASE_URL"""
        return self.DATABASE_URL or self.PORTARIA_DATABASE_URL

    # Gateway de dados: "sql" (SQLAlchemy) ou "rest" (backend hospedado PostgREST)
    GATEWAY_BACKEND: str = "sql"
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None
    GATEWAY_TIMEOUT: float = 10.0

    # Armazenamento local persistente (identidade do turno)
    STORAGE_PATH: str = "data/local_storage.json"
    SESSION_STORAGE_KEY: str = "portaria_user"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # CORS
    CORS_ORIGINS: list = ["*"]

    # Rate limit do login de turno
    LOGIN_RATE_LIMIT: str = "10/minute"

    # Carga completa na inicializacao
    INITIAL_REFRESH_ON_STARTUP: bool = True

    class Config:
        extra = "ignore"
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
