from functools import lru_cache

from pydantic_settings import BaseSettings

# Upper bound on the estimated compiled size of author-supplied patterns.
DEFAULT_REGEX_SIZE_LIMIT = 26_214_400


class Settings(BaseSettings):
    # Patterns
    REGEX_SIZE_LIMIT: int = DEFAULT_REGEX_SIZE_LIMIT

    # Host integration (form-value decoding before textual constructors)
    HOST_INTEGRATION: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    class Config:
        env_prefix = "VALIDWRAP_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
