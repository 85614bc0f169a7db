"""
Pydantic Settings — centralized configuration loaded from environment variables.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    DATABASE_PATH: str = "./submissions.db"
    DATABASE_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (aiosqlite)."""
        if self.DATABASE_PATH == ":memory:":
            return "sqlite+aiosqlite:///:memory:"
        return f"sqlite+aiosqlite:///{self.DATABASE_PATH}"

    # ── HTTP ──────────────────────────────────
    API_PREFIX: str = "/api"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # ── Pagination ────────────────────────────
    DEFAULT_PAGE_SIZE: int = 5
    MAX_PAGE_SIZE: int = 100

    # ── Application ───────────────────────────
    APP_ENV: str = "development"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
