"""
Competitor discovery and pricing endpoints
"""

from fastapi import APIRouter, Depends
from loguru import logger

from app.api.dependencies import get_competitor_facade
from app.domains.competitors import CompetitorFacade
from app.domains.competitors.dtos import BusinessContext, CompetitorPrices
from app.schemas.competitors import (
    DiscoveryRequest,
    DiscoveryResponse,
    PriceChartRequest,
    PriceChartResponse,
)

router = APIRouter()


@router.post("/discover", response_model=DiscoveryResponse)
async def discover_competitors(
    request_data: DiscoveryRequest,
    facade: CompetitorFacade = Depends(get_competitor_facade),
):
    """
    Discover competitor domains for a company

    Request body:
    {
        "domain": "example.com",
        "businessType": "ecommerce",
        "knownCompetitors": ["rival.com"],   // may be empty
        "productCatalogUrl": "https://example.com/products"
    }
    """
    logger.info(f"Competitor discovery request for {request_data.domain}")

    result = await facade.discover_competitors(
        BusinessContext(
            domain=request_data.domain,
            business_type=request_data.business_type,
            known_competitors=request_data.known_competitors,
            product_catalog_url=request_data.product_catalog_url,
        )
    )
    return DiscoveryResponse.from_result(result)


@router.post("/price-chart", response_model=PriceChartResponse)
async def build_price_chart(
    request_data: PriceChartRequest,
    facade: CompetitorFacade = Depends(get_competitor_facade),
):
    """
    Build the 4-week comparative pricing chart

    Competitors without usable prices get a synthesized baseline near the
    user's own baseline.
    """
    chart = facade.build_price_chart(
        request_data.user_prices,
        [
            CompetitorPrices(domain=competitor.domain, known_prices=competitor.known_prices)
            for competitor in request_data.competitors
        ],
    )
    return PriceChartResponse.from_chart(chart)
