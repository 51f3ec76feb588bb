"""API routes for the Vietnamese PIT calculator."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.api.models import (
    CompareRequest,
    CompareResponse,
    GrossFromNetRequest,
    GrossFromNetResponse,
    ProvinceOut,
    RegimeConfigOut,
    RegimesResponse,
    RegionOut,
)
from src.calculators.comparison import compare, compare_from_net
from src.calculators.exceptions import InvalidInputError
from src.calculators.gross_from_net import solve_gross_for_net
from src.calculators.regime import TaxInput, evaluate_regime
from src.calculators.regions import all_regions, find_provinces
from src.calculators.tax_data import (
    INSURANCE_RATES,
    REGIMES,
    REGIONAL_UNEMPLOYMENT_CEILING,
    SOCIAL_HEALTH_CEILING,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def invalid_input_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render InvalidInputError as a 400 with the validation message."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/regimes", response_model=RegimesResponse)
async def regimes() -> RegimesResponse:
    """Deductions, bracket tables, insurance ceilings and wage regions."""
    return RegimesResponse(
        regimes={key: RegimeConfigOut.from_config(config) for key, config in REGIMES.items()},
        insurance_rates={
            "social": float(INSURANCE_RATES.social),
            "health": float(INSURANCE_RATES.health),
            "unemployment": float(INSURANCE_RATES.unemployment),
        },
        social_health_ceiling=float(SOCIAL_HEALTH_CEILING),
        unemployment_ceilings={
            region: float(ceiling) for region, ceiling in REGIONAL_UNEMPLOYMENT_CEILING.items()
        },
        regions=[
            RegionOut(
                region=info.region,
                label=info.label,
                description=info.description,
                unemployment_ceiling=float(REGIONAL_UNEMPLOYMENT_CEILING[info.region]),
            )
            for info in all_regions()
        ],
    )


@router.post("/compare", response_model=CompareResponse)
def compare_regimes(body: CompareRequest) -> CompareResponse:
    """Compare old and new law for a gross salary, or for a desired net salary."""
    if body.salary_mode == "net":
        result = compare_from_net(
            body.salary,
            body.dependents,
            body.region,
            body.insurance_mode,
            body.custom_insurance,
        )
    else:
        result = compare(TaxInput(
            gross_salary=body.salary,
            dependents=body.dependents,
            region=body.region,
            insurance_mode=body.insurance_mode,
            custom_insurance=body.custom_insurance,
        ))
    return CompareResponse.from_comparison(result)


@router.post("/gross-from-net", response_model=GrossFromNetResponse)
def gross_from_net(body: GrossFromNetRequest) -> GrossFromNetResponse:
    """Solve for the gross salary that yields the requested net salary."""
    gross = solve_gross_for_net(
        body.target_net,
        body.dependents,
        body.region,
        body.insurance_mode,
        body.custom_insurance,
        regime=body.regime,
    )
    achieved = evaluate_regime(
        TaxInput(gross, body.dependents, body.region, body.insurance_mode, body.custom_insurance),
        body.regime,
    )
    return GrossFromNetResponse(
        gross_salary=float(gross),
        net_salary=float(achieved.net_salary),
        regime=body.regime,
    )


@router.get("/provinces", response_model=list[ProvinceOut])
async def provinces(q: str = "") -> list[ProvinceOut]:
    """Search provinces by name and report their wage region."""
    return [ProvinceOut(name=p.name, region=p.region) for p in find_provinces(q)]


EXCEPTION_HANDLERS = {InvalidInputError: invalid_input_handler}
