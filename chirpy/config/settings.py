"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Supabase
    SUPABASE_URL: str
    SUPABASE_SERVICE_ROLE_KEY: str

    # JWT
    JWT_SECRET: str
    JWT_ACCESS_TOKEN_EXPIRE_SECONDS: int = 3600

    # Polka webhooks
    POLKA_KEY: str

    # "dev" unlocks /admin/reset
    PLATFORM: str = ""

    FILESERVER_ROOT: str = "."
    LOG_LEVEL: str = "INFO"

    @property
    def is_dev(self) -> bool:
        return self.PLATFORM == "dev"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache()
def get_settings() -> Settings:
    return Settings()
