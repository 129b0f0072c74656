"""Screen calculation endpoint."""

from fastapi import APIRouter

from ledwall.application import ScreenInput
from ledwall.domain import CabinetType, CalculationResult, ScreenConfig
from ledwall.web.dependencies import CalculateCommandDep
from ledwall.web.exceptions import ScreenCalculationError
from ledwall.web.schemas.requests import CalculateRequest
from ledwall.web.schemas.responses import (
    CabinetTypeSchema,
    CalculateResponseSchema,
    CalculationResultSchema,
    ErrorResponseSchema,
    GeometrySchema,
    ScreenConfigSchema,
)

router = APIRouter(prefix="/calculate", tags=["calculate"])


def cabinet_to_schema(cabinet: CabinetType) -> CabinetTypeSchema:
    """Convert a CabinetType to its response schema."""
    return CabinetTypeSchema(
        name=cabinet.name,
        label=cabinet.label,
        width=cabinet.width,
        height=cabinet.height,
        ratio=cabinet.ratio,
    )


def _config_to_schema(config: ScreenConfig | None) -> ScreenConfigSchema | None:
    if config is None:
        return None
    return ScreenConfigSchema(
        columns=config.columns,
        rows=config.rows,
        cabinet_count=config.cabinet_count,
        total_width=config.total_width,
        total_height=config.total_height,
        diagonal=config.diagonal,
        ratio=config.ratio,
        ratio_error=config.ratio_error,
        type=config.tag.value,
    )


def _result_to_schema(result: CalculationResult) -> CalculationResultSchema:
    return CalculationResultSchema(
        cabinet=cabinet_to_schema(result.cabinet),
        lower=_config_to_schema(result.lower),
        upper=_config_to_schema(result.upper),
    )


@router.post(
    "",
    response_model=CalculateResponseSchema,
    responses={
        422: {"model": ErrorResponseSchema, "description": "Screen cannot be resolved"}
    },
)
async def calculate_screen(
    request: CalculateRequest,
    command: CalculateCommandDep,
) -> CalculateResponseSchema:
    """Resolve the target screen and compute cabinet grids for it.

    Raises:
        ScreenCalculationError: If the target geometry cannot be resolved.
    """
    output = command.execute(
        ScreenInput(
            width=request.width,
            height=request.height,
            diagonal=request.diagonal,
            ratio=request.ratio,
            unit=request.unit,
        )
    )

    if not output.is_valid or output.geometry is None:
        raise ScreenCalculationError(output.errors, output.error_type)

    geometry = output.geometry
    return CalculateResponseSchema(
        unit=output.unit.value,
        geometry=GeometrySchema(
            width=geometry.width,
            height=geometry.height,
            diagonal=geometry.diagonal,
            ratio=geometry.ratio,
        ),
        results=[_result_to_schema(result) for result in output.results],
    )
