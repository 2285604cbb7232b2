"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from nutrilog.adapters.fallback_repository import (
    FallbackMealRepository,
    FallbackProfileRepository,
)
from nutrilog.adapters.json_store import JsonMealRepository, JsonProfileRepository
from nutrilog.adapters.supabase_meal_repository import SupabaseMealRepository
from nutrilog.adapters.supabase_profile_repository import SupabaseProfileRepository
from nutrilog.config import Settings
from nutrilog.services.meals import MealRepository, MealService
from nutrilog.services.profile import ProfileRepository, ProfileService
from nutrilog.services.stats import StatsService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_repository: MealRepository
    profile_repository: ProfileRepository
    meal_service: MealService
    profile_service: ProfileService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    meal_repository: MealRepository = JsonMealRepository.in_directory(
        resolved_settings.data_dir
    )
    profile_repository: ProfileRepository = JsonProfileRepository.in_directory(
        resolved_settings.data_dir
    )
    if resolved_settings.remote_store_enabled:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        meal_repository = FallbackMealRepository(
            primary=SupabaseMealRepository(supabase_client),
            fallback=meal_repository,
        )
        profile_repository = FallbackProfileRepository(
            primary=SupabaseProfileRepository(supabase_client),
            fallback=profile_repository,
        )
        _logger.info("Using Supabase store with local fallback")
    else:
        _logger.info("Using local store at %s", resolved_settings.data_dir)

    return AppContainer(
        settings=resolved_settings,
        meal_repository=meal_repository,
        profile_repository=profile_repository,
        meal_service=MealService(meal_repository),
        profile_service=ProfileService(profile_repository),
        stats_service=StatsService(meal_repository, profile_repository),
    )
