"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from feedback_app.models.feedback import FeedbackDefaults
from feedback_app.services.userback import UserbackConfig


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # App
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    # Userback API
    userback_api_url: str = "https://api.userback.io/v1"
    userback_api_key: str = ""
    userback_timeout: float | None = None  # None = no client-side timeout

    # Feedback payload defaults (deployment specific)
    userback_project_id: int = 4455
    userback_feedback_type: str = "idea"
    userback_default_title: str = "Feedback Submission"
    userback_anonymous_email: str = "anonymous@example.com"

    model_config = {"env_file": ".env", "extra": "ignore"}

    def userback_config(self) -> UserbackConfig:
        """Explicit client configuration derived from these settings."""
        return UserbackConfig(
            base_url=self.userback_api_url,
            api_key=self.userback_api_key or None,
            timeout=self.userback_timeout,
        )

    def feedback_defaults(self) -> FeedbackDefaults:
        return FeedbackDefaults(
            project_id=self.userback_project_id,
            feedback_type=self.userback_feedback_type,
            default_title=self.userback_default_title,
            anonymous_email=self.userback_anonymous_email,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
