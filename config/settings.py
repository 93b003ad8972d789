"""
Central settings
Database credentials, logging and rule file locations for the cleanup scripts.
"""
from pydantic_settings import BaseSettings
from typing import Optional
from pathlib import Path
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application settings"""

    # Project Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / "data"
    LOGS_DIR: Path = DATA_DIR / "logs"
    EXPORTS_DIR: Path = DATA_DIR / "exports"

    # Database Configuration (PostgreSQL)
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "prompt_generator"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_SSL: bool = False
    DATABASE_URL: Optional[str] = None  # overrides the DB_* values when set
    DB_ECHO: bool = False  # SQLAlchemy echo

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_RETENTION_DAYS: int = 30
    LOG_ROTATION: str = "1 day"
    LOG_FORMAT: str = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    LOG_TO_FILE: bool = True

    # Placeholder audit rules
    HARDCODED_RULES_PATH: Path = BASE_DIR / "config" / "hardcoded_rules.yaml"
    PLACEHOLDER_FIXES_PATH: Path = BASE_DIR / "config" / "placeholder_fixes.yaml"
    PLACEHOLDER_MATCH_STRATEGY: str = "substring"  # 'substring' or 'exact'

    # Template selection
    SOCIAL_MEDIA_CATEGORY: str = "Social Media"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL (psycopg driver)"""
        if self.DATABASE_URL:
            if self.DATABASE_URL.startswith("postgresql://"):
                return self.DATABASE_URL.replace("postgresql://", "postgresql+psycopg://", 1)
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+psycopg",
            username=self.DB_USER,
            password=self.DB_PASSWORD or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )
        return url.render_as_string(hide_password=False)

    @property
    def connect_args(self) -> dict:
        """Driver connect arguments (TLS without certificate verification)"""
        if self.DB_SSL and self.database_url.startswith("postgresql"):
            return {"sslmode": "require"}
        return {}

    def describe_database(self) -> str:
        """Connection target without credentials, for log output"""
        if self.DATABASE_URL:
            url = make_url(self.database_url)
            return f"{url.database}@{url.host}:{url.port}"
        return f"{self.DB_NAME}@{self.DB_HOST}:{self.DB_PORT}"


def get_settings(**overrides) -> Settings:
    """Build a fresh Settings instance (environment + .env + overrides)"""
    return Settings(**overrides)
