"""Application configuration."""

import os
from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

from latchfit.domain.milk import TimerMode

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    recipe_backend_base_url: str | None = None
    recipe_timeout_seconds: float = 15
    enable_ai_coach: bool = True
    use_live_recipes: bool = True
    use_mock_recipes: bool = False
    simulate_network_failure: bool = False
    simulate_quota_exhausted: bool = False
    default_timer_mode: TimerMode = TimerMode.NURSE
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


@dataclass(frozen=True)
class FeatureFlags:
    """Runtime switches for recipe sources and fault injection."""

    ai_enabled: bool = True
    use_live_recipes: bool = True
    use_mock_recipes: bool = False
    simulate_network_failure: bool = False
    simulate_quota_exhausted: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeatureFlags":
        """Build flags from loaded settings."""
        return cls(
            ai_enabled=settings.enable_ai_coach,
            use_live_recipes=settings.use_live_recipes,
            use_mock_recipes=settings.use_mock_recipes,
            simulate_network_failure=settings.simulate_network_failure,
            simulate_quota_exhausted=settings.simulate_quota_exhausted,
        )

    @property
    def live_search_enabled(self) -> bool:
        """Return True when the remote recipe search may be called."""
        return (
            self.ai_enabled
            and self.use_live_recipes
            and not self.simulate_network_failure
            and not self.simulate_quota_exhausted
        )

    def reset(self) -> "FeatureFlags":
        """Return the default flags."""
        return FeatureFlags()
