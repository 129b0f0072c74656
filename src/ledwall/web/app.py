"""FastAPI application for LED wall calculations."""

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ledwall.domain import CABINET_TYPES, PREDEFINED_RATIOS, CabinetType, PredefinedRatio
from ledwall.web.exceptions import register_exception_handlers
from ledwall.web.routers import calculate_router, catalog_router

API_PREFIX = "/api/v1"


def create_app(
    cabinets: Sequence[CabinetType] | None = None,
    ratios: Sequence[PredefinedRatio] | None = None,
) -> FastAPI:
    """Build the LED wall API around a cabinet catalog.

    Args:
        cabinets: Cabinet types to calculate grids for. Defaults to the
            built-in catalog.
        ratios: Aspect ratios listed by ``GET /api/v1/ratios``. Defaults to
            the built-in predefined ratios.

    Returns:
        FastAPI application serving the calculate and catalog endpoints.
    """
    app = FastAPI(
        title="LED Wall Calculator API",
        description=(
            "Resolve a target screen from any two of width, height, diagonal "
            "and aspect ratio, then match it to grids of LED cabinets."
        ),
        version="1.0.0",
    )
    # Read by the dependencies in ledwall.web.dependencies.
    app.state.cabinets = list(CABINET_TYPES if cabinets is None else cabinets)
    app.state.ratios = list(PREDEFINED_RATIOS if ratios is None else ratios)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (calculate_router, catalog_router):
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
