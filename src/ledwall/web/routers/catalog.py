"""Cabinet catalog and predefined ratio endpoints."""

from fastapi import APIRouter

from ledwall.web.dependencies import CalculateCommandDep, RatiosDep
from ledwall.web.routers.calculate import cabinet_to_schema
from ledwall.web.schemas.responses import CabinetTypeSchema, RatioSchema

router = APIRouter(tags=["catalog"])


@router.get("/cabinets", response_model=list[CabinetTypeSchema])
async def list_cabinets(command: CalculateCommandDep) -> list[CabinetTypeSchema]:
    """List the cabinet types used for calculations."""
    return [cabinet_to_schema(cabinet) for cabinet in command.catalog]


@router.get("/ratios", response_model=list[RatioSchema])
async def list_ratios(ratios: RatiosDep) -> list[RatioSchema]:
    """List the predefined aspect ratios."""
    return [RatioSchema(label=ratio.label, value=ratio.value) for ratio in ratios]
