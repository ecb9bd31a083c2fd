"""Pydantic schemas for the REST API."""

from tabletops.web.schemas.common import (
    BoundsSchema,
    OutlineSchema,
    PointSchema,
    QuoteSchema,
    TabletopConfigSchema,
)
from tabletops.web.schemas.requests import (
    ConfigEventSchema,
    OutlineRequest,
    PriceEstimateRequest,
    ResolveRequest,
)
from tabletops.web.schemas.responses import (
    ErrorResponseSchema,
    LimitsSchema,
    OutlineResponse,
    PriceEstimateResponse,
    ResolveResponse,
)

__all__ = [
    # Common
    "BoundsSchema",
    "OutlineSchema",
    "PointSchema",
    "QuoteSchema",
    "TabletopConfigSchema",
    # Requests
    "ConfigEventSchema",
    "OutlineRequest",
    "PriceEstimateRequest",
    "ResolveRequest",
    # Responses
    "ErrorResponseSchema",
    "LimitsSchema",
    "OutlineResponse",
    "PriceEstimateResponse",
    "ResolveResponse",
]
