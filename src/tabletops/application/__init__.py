"""Application layer - sessions, uploads and price estimation."""

from .price_estimator import EstimateState, PriceEstimator, PriceUpdate
from .session import (
    ConfiguratorSession,
    DimensionsChanged,
    OutlineReady,
    PriceChanged,
    SessionEvent,
)
from .uploads import CustomShapeDetails, format_bytes, ingest_drawing

__all__ = [
    "ConfiguratorSession",
    "CustomShapeDetails",
    "DimensionsChanged",
    "EstimateState",
    "OutlineReady",
    "PriceChanged",
    "PriceEstimator",
    "PriceUpdate",
    "SessionEvent",
    "format_bytes",
    "ingest_drawing",
]
