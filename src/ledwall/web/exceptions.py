"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledwall.web.schemas.responses import ErrorResponseSchema


class ScreenCalculationError(Exception):
    """Raised when a screen calculation fails."""

    def __init__(self, errors: list[str], error_type: str | None = None) -> None:
        self.errors = errors
        self.error_type = error_type or "calculation"
        super().__init__(f"Calculation failed: {errors}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ScreenCalculationError)
    async def calculation_error_handler(
        request: Request, exc: ScreenCalculationError
    ) -> JSONResponse:
        body = ErrorResponseSchema(
            error="Screen calculation failed",
            error_type=exc.error_type,
            details=[{"message": e} for e in exc.errors],
        )
        return JSONResponse(status_code=422, content=body.model_dump())
