from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite:///./linguistika.db"

    # Environment
    environment: str = "development"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # CORS
    allowed_hosts: List[str] = ["*"]

    # Facade calls made by the views
    request_timeout: float = 10.0
    load_max_retries: int = 2
    retry_delay: float = 0.5

    # Startup
    seed_on_startup: bool = True

    # HTTP facade
    api_base_url: str = "http://localhost:8000"

    @property
    def database_url_sync(self) -> str:
        """Convert async database URL to sync"""
        if self.database_url.startswith("postgresql+asyncpg://"):
            return self.database_url.replace(
                "postgresql+asyncpg://", "postgresql+psycopg2://"
            )
        elif self.database_url.startswith("sqlite+aiosqlite://"):
            return self.database_url.replace("sqlite+aiosqlite://", "sqlite://")
        else:
            return self.database_url


settings = Settings()
