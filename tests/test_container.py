"""Tests for container wiring and settings."""

import asyncio
import logging

from latchfit.adapters.recipe_client import (
    HttpxRecipeClient,
    MockRecipeClient,
    OfflineRecipeClient,
)
from latchfit.config import FeatureFlags, Settings
from latchfit.containers import build_container
from latchfit.domain.milk import TimerMode


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.recipe_client, HttpxRecipeClient)
    assert container.recipe_suggestion_service.flags == container.flags
    assert container.milk_stats_service.repository is container.session_repository
    assert container.milk_log_service.mode == TimerMode.NURSE
    asyncio.run(container.close_resources())


def test_build_container_uses_mock_or_offline_client(session_repository) -> None:
    mock = build_container(
        Settings(use_mock_recipes=True, recipe_backend_base_url="https://r.test"),
        session_repository=session_repository,
    )
    offline = build_container(Settings(recipe_backend_base_url=None))

    assert isinstance(mock.recipe_client, MockRecipeClient)
    assert mock.milk_log_service.repository is session_repository
    assert isinstance(offline.recipe_client, OfflineRecipeClient)
    asyncio.run(mock.close_resources())
    asyncio.run(offline.close_resources())


def test_timer_mode_setting_flows_into_service() -> None:
    container = build_container(
        Settings(default_timer_mode="pump", recipe_backend_base_url=None)
    )

    assert container.milk_log_service.mode == TimerMode.PUMP


def test_feature_flags_from_settings() -> None:
    flags = FeatureFlags.from_settings(
        Settings(enable_ai_coach=True, simulate_network_failure=True)
    )

    assert not flags.live_search_enabled
    assert flags.reset() == FeatureFlags()
    assert FeatureFlags().live_search_enabled


def test_build_container_applies_log_level() -> None:
    build_container(Settings(log_level="debug", recipe_backend_base_url=None))

    logger = logging.getLogger("latchfit")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
