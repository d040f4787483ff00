"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from livecost.config import Settings
from livecost.data.city_cost_index import DATASET_VERSION
from livecost.engine import ENGINE_VERSION
from livecost.exceptions import ConfigurationError, DatasetIntegrityError, UnknownCityError
from livecost.models.comparison import ComparisonInput
from livecost.models.enums import HousingTenure

if TYPE_CHECKING:
    from livecost.engine import ComparisonEngine
    from livecost.models.comparison import ComparisonResult

logger = logging.getLogger(__name__)


class CompareRequest(BaseModel):
    """Request body for POST /api/compare."""

    origin_city_id: str
    destination_city_id: str
    annual_salary: float = Field(ge=0, allow_inf_nan=False)
    housing_tenure: HousingTenure = HousingTenure.RENTING

    @field_validator("housing_tenure", mode="before")
    @classmethod
    def normalize_tenure(cls, v: object) -> object:
        if isinstance(v, str):
            return HousingTenure(v)
        return v


def create_app(
    *,
    engine: ComparisonEngine | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built comparison engine for dependency injection
        (e.g. tests). If not provided, one is created from settings on
        first request.
    settings
        Optional settings. Read from the environment when omitted.
    """
    settings = settings or Settings.from_env()
    try:
        logging.getLogger("livecost").setLevel(settings.log_level)
    except ValueError as exc:
        msg = f"Unknown log level '{settings.log_level}'"
        raise ConfigurationError(msg) from exc

    app = FastAPI(title="livecost", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.engine = engine
    app.state.settings = settings

    def _get_engine() -> ComparisonEngine:
        eng: ComparisonEngine | None = app.state.engine
        if eng is not None:
            return eng
        from livecost.api.deps import create_engine_from_settings

        eng = create_engine_from_settings(settings)
        app.state.engine = eng
        return eng

    @app.exception_handler(ConfigurationError)
    async def configuration_error(request: Request, exc: ConfigurationError) -> JSONResponse:
        logger.error("Service misconfigured while handling %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=500,
            content={"detail": f"Service is misconfigured: {exc}"},
        )

    def _run_comparison(comparison_input: ComparisonInput) -> dict[str, Any]:
        eng = _get_engine()
        try:
            result: ComparisonResult = eng.compare(comparison_input)
        except UnknownCityError as exc:
            logger.warning("Comparison requested for unknown city '%s'", exc.city_id)
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except DatasetIntegrityError as exc:
            logger.exception("City dataset failed integrity check")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return {
            "result": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {
            "status": "ok",
            "version": ENGINE_VERSION,
            "dataset_version": (
                DATASET_VERSION if settings.dataset_path is None else "custom"
            ),
        }

    # ------------------------------------------------------------------
    # GET /api/cities
    # ------------------------------------------------------------------

    @app.get("/api/cities")
    def cities() -> dict[str, Any]:
        dataset = _get_engine().dataset
        return {
            "cities": [
                {
                    "id": record.id,
                    "display_name": record.display_name,
                    "cost_index": record.cost_index,
                }
                for record in dataset.records()
            ],
            "salary_range": {
                "min": settings.min_salary,
                "max": settings.max_salary,
            },
        }

    # ------------------------------------------------------------------
    # POST /api/compare
    # ------------------------------------------------------------------

    @app.post("/api/compare")
    def compare(request: CompareRequest) -> dict[str, Any]:
        if request.annual_salary > settings.max_salary:
            logger.warning("Rejected salary %s above maximum", request.annual_salary)
            raise HTTPException(
                status_code=422,
                detail=(
                    f"annual_salary must not exceed {settings.max_salary:,.0f}"
                ),
            )
        comparison_input = ComparisonInput(
            origin_city_id=request.origin_city_id,
            destination_city_id=request.destination_city_id,
            annual_salary=request.annual_salary,
            housing_tenure=request.housing_tenure,
        )
        return _run_comparison(comparison_input)

    # ------------------------------------------------------------------
    # GET /api/sample-comparison
    # ------------------------------------------------------------------

    @app.get("/api/sample-comparison")
    def sample_comparison() -> dict[str, Any]:
        comparison_input = ComparisonInput(
            origin_city_id=settings.default_origin,
            destination_city_id=settings.default_destination,
            annual_salary=settings.default_salary,
            housing_tenure=settings.default_tenure,
        )
        return _run_comparison(comparison_input)

    return app
