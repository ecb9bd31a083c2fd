"""Local price estimate endpoints."""

from fastapi import APIRouter

from tabletops.domain.services import ConfiguratorState, PricingPayload, calculate_local_price
from tabletops.web.dependencies import ResolverDep
from tabletops.web.schemas.common import QuoteSchema
from tabletops.web.schemas.requests import PriceEstimateRequest
from tabletops.web.schemas.responses import PriceEstimateResponse

router = APIRouter(prefix="/price", tags=["price"])


@router.post("/estimate", response_model=PriceEstimateResponse)
async def estimate_price(
    request: PriceEstimateRequest,
    resolver: ResolverDep,
) -> PriceEstimateResponse:
    """Price a configuration with the local formula.

    The configuration is normalized first, so out-of-range values are
    priced as the configurator would clamp them.
    """
    state = resolver.normalize(ConfiguratorState(config=request.config.to_domain()))
    payload = PricingPayload.from_config(state.config)
    return PriceEstimateResponse(
        quote=QuoteSchema.from_domain(calculate_local_price(payload)),
        payload=payload.to_dict(),
    )
