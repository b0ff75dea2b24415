from pathlib import Path
from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"

class Settings(BaseSettings):
    TITLE: str = "Movie Review API"
    ENVIRONMENT: str = "dev"
    VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Database
    DEV_DATABASE_URL: str | None = None
    TEST_DATABASE_URL: str | None = None
    CREATE_TABLES_ON_STARTUP: bool = True

    # Auth (JWT)
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # TMDb
    TMDB_API_KEY: str | None = None
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_LANGUAGE: str = "ja-JP"
    TMDB_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    @computed_field
    @property
    def DATABASE_URL(self) -> str:
        """Автоматически выбирает DATABASE_URL на основе ENVIRONMENT."""
        if self.ENVIRONMENT == "test":
            db_url = self.TEST_DATABASE_URL
        else:
            db_url = self.DEV_DATABASE_URL

        if not db_url:
            raise ValueError(f"No DATABASE_URL for {self.ENVIRONMENT} env")

        return db_url


settings = Settings()
