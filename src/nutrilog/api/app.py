"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime

from fastapi import FastAPI, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse

from nutrilog.api.schemas import (
    DashboardOut,
    DayCaloriesOut,
    DaySummaryOut,
    MealOut,
    MealPayload,
    ProfileOut,
    ProfilePayload,
    StatisticsOut,
)
from nutrilog.app_logging import configure_logging
from nutrilog.containers import AppContainer
from nutrilog.domain.errors import MealNotFoundError, ValidationError
from nutrilog.services.meals import validate_iso_date
from nutrilog.services.profile import compute_bmi


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if state_container.settings.seed_sample_data:
            try:
                state_container.meal_service.seed_sample_meals(_today())
            except Exception:
                logger.exception("Failed to seed sample meals")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"field": exc.field, "reason": exc.reason},
        )

    @app.exception_handler(MealNotFoundError)
    async def meal_not_found_handler(
        request: Request, exc: MealNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/meals", response_model=list[MealOut])
    async def list_meals(
        request: Request,
        day: str | None = Query(default=None, alias="date"),
        meal_type: str | None = Query(default=None, alias="mealType"),
        search: str | None = None,
    ) -> list[MealOut]:
        """Return meals matching the filters, newest date first."""
        state_container: AppContainer = request.app.state.container
        if day:
            validate_iso_date("date", day)
        meals = state_container.meal_service.list_meals(
            day=day, meal_type=meal_type, search=search
        )
        return [MealOut.from_domain(meal) for meal in meals]

    @app.get("/api/meals/recent", response_model=list[MealOut])
    async def recent_meals(
        request: Request, limit: int = Query(default=5, ge=1)
    ) -> list[MealOut]:
        """Return the latest logged meals."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_service.recent_meals(limit)
        return [MealOut.from_domain(meal) for meal in meals]

    @app.post(
        "/api/meals", response_model=MealOut, status_code=status.HTTP_201_CREATED
    )
    async def add_meal(payload: MealPayload, request: Request) -> MealOut:
        """Log a new meal."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_service.add_meal(payload.to_domain())
        logger.info("Meal added", extra={"meal_id": meal.id})
        return MealOut.from_domain(meal)

    @app.get("/api/meals/{meal_id}", response_model=MealOut)
    async def get_meal(meal_id: str, request: Request) -> MealOut:
        """Return a single meal."""
        state_container: AppContainer = request.app.state.container
        return MealOut.from_domain(state_container.meal_service.get_meal(meal_id))

    @app.put("/api/meals/{meal_id}", response_model=MealOut)
    async def update_meal(
        meal_id: str, payload: MealPayload, request: Request
    ) -> MealOut:
        """Replace the editable fields of a meal."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_service.update_meal(meal_id, payload.to_domain())
        return MealOut.from_domain(meal)

    @app.delete("/api/meals/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_meal(meal_id: str, request: Request) -> Response:
        """Delete a meal."""
        state_container: AppContainer = request.app.state.container
        state_container.meal_service.delete_meal(meal_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get("/api/profile", response_model=ProfileOut)
    async def get_profile(request: Request) -> ProfileOut:
        """Return the stored profile with its BMI."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get()
        if profile is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return ProfileOut.from_domain(profile, compute_bmi(profile))

    @app.post("/api/profile", response_model=ProfileOut)
    async def save_profile(payload: ProfilePayload, request: Request) -> ProfileOut:
        """Recompute and store the profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.save(payload.to_domain())
        return ProfileOut.from_domain(profile, compute_bmi(profile))

    @app.get("/api/statistics", response_model=StatisticsOut)
    async def statistics(
        request: Request,
        start_date: str | None = Query(default=None, alias="startDate"),
        end_date: str | None = Query(default=None, alias="endDate"),
    ) -> StatisticsOut:
        """Return statistics for an optional inclusive date window."""
        state_container: AppContainer = request.app.state.container
        if start_date:
            validate_iso_date("startDate", start_date)
        if end_date:
            validate_iso_date("endDate", end_date)
        stats = state_container.stats_service.get_statistics(start_date, end_date)
        return StatisticsOut.from_domain(stats)

    @app.get("/api/dashboard", response_model=DashboardOut)
    async def dashboard(request: Request) -> DashboardOut:
        """Return today's progress, the weekly series and recent meals."""
        state_container: AppContainer = request.app.state.container
        today = _today()
        return DashboardOut(
            today=DaySummaryOut.from_domain(
                state_container.stats_service.get_today(today)
            ),
            week=[
                DayCaloriesOut.from_domain(entry)
                for entry in state_container.stats_service.get_week(today)
            ],
            recent_meals=[
                MealOut.from_domain(meal)
                for meal in state_container.meal_service.recent_meals()
            ],
        )

    return app


def _today() -> date:
    return datetime.now(tz=UTC).date()
