"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    log_level: str = "INFO"
    auth_username: str = ""
    auth_password: str = ""
    default_region: int = 1

    @property
    def auth_enabled(self) -> bool:
        """Basic Auth is enforced only when both credentials are configured."""
        return bool(self.auth_username and self.auth_password)

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
