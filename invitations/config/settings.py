from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    debug: bool = True
    cors_origins: list[str] = ["*"]

    ENVIRONMENT: str = "Production"

    # Generation backend - if backend_url is empty, the stub backend is used
    backend_url: str = ""
    backend_api_key: str = ""
    backend_timeout_seconds: float = 60.0
    stub_latency_seconds: float = 1.5

    # Request validation
    enforce_rsvp_deadline: bool = True

    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_PROFILES_SAMPLE_RATE: float = 0.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
