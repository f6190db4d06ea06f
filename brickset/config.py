from pydantic_settings import BaseSettings, SettingsConfigDict

from brickset.request import ENDPOINT


class Settings(BaseSettings):
    """Client settings loaded from BRICKSET_* environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="BRICKSET_", extra="ignore")

    api_key: str = ""

    # Override only to point at a test double; the real service has one endpoint
    endpoint: str = ENDPOINT

    # Seconds per request
    timeout: float = 30.0


settings = Settings()
