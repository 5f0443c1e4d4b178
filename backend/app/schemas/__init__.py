"""
Pydantic schemas
"""

from .competitors import (
    DiscoveryRequest,
    DiscoveryResponse,
    CandidateResponse,
    PriceChartRequest,
    PriceChartResponse,
    PricingSeriesResponse,
    CompetitorPricesRequest,
)

__all__ = [
    "DiscoveryRequest",
    "DiscoveryResponse",
    "CandidateResponse",
    "PriceChartRequest",
    "PriceChartResponse",
    "PricingSeriesResponse",
    "CompetitorPricesRequest",
]
