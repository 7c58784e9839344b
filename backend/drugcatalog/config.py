from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    database_url: str = ""
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:8501", "http://localhost:3000"]

    # Bundled seed file is used when empty
    seed_file: str = ""

    pool_size: int = 10
    pool_timeout: int = 5
    pool_recycle: int = 45

    api_base_url: str = "http://localhost:8000"
    api_timeout: float = 10.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
