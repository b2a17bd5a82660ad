"""Badge gallery configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from badges.constants import Category


class BadgeSettings(BaseSettings):
    """Settings loaded from STATUS_BADGE_* environment variables / .env file."""

    extra_statuses: dict[str, str] = {}
    log_level: str = "INFO"
    server_name: str = "0.0.0.0"
    server_port: int = 7860
    share: bool = False

    model_config = {
        "env_prefix": "STATUS_BADGE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def get_overrides(self) -> dict[str, Category]:
        """Return extra_statuses with values checked against the categories."""
        return {status: Category.coerce(category) for status, category in self.extra_statuses.items()}


settings = BadgeSettings()
