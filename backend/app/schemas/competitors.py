"""
Competitor discovery and pricing chart schemas
"""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domains.competitors.dtos import ChartData, DiscoveryResult


class CamelModel(BaseModel):
    """Accepts both camelCase (frontend) and snake_case field names"""

    model_config = ConfigDict(populate_by_name=True)


class DiscoveryRequest(CamelModel):
    """Request model for competitor discovery"""
    domain: str = Field(..., min_length=1, description="Company domain or URL")
    business_type: str = Field(default="", alias="businessType", description="Business type")
    known_competitors: List[str] = Field(
        default_factory=list,
        alias="knownCompetitors",
        description="Competitor domains the user already knows about",
    )
    product_catalog_url: str = Field(
        ..., min_length=1, alias="productCatalogUrl", description="Product catalog URL"
    )

    @field_validator('known_competitors', mode='before')
    @classmethod
    def validate_known_competitors(cls, v):
        """Onboarding stores known competitors as a comma-separated string"""
        if v is None:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(',') if item.strip()]
        return v


class CandidateResponse(BaseModel):
    domain: str
    source: str


class DiscoveryResponse(BaseModel):
    """Response model for competitor discovery"""
    competitors: List[str]
    candidates: List[CandidateResponse]
    stats: Dict[str, int]

    @classmethod
    def from_result(cls, result: DiscoveryResult) -> "DiscoveryResponse":
        return cls(
            competitors=result.competitors,
            candidates=[
                CandidateResponse(domain=candidate.domain, source=candidate.source.value)
                for candidate in result.candidates
            ],
            stats=result.stats,
        )


class CompetitorPricesRequest(CamelModel):
    domain: str = Field(..., min_length=1)
    known_prices: List[Optional[Union[float, str]]] = Field(default_factory=list, alias="knownPrices")


class PriceChartRequest(CamelModel):
    """Request model for the comparative price chart"""
    user_prices: List[Optional[Union[float, str]]] = Field(default_factory=list, alias="userPrices")
    competitors: List[CompetitorPricesRequest] = Field(default_factory=list)


class PricingSeriesResponse(CamelModel):
    label: str
    data: List[float]
    border_color: str = Field(alias="borderColor")
    background_color: str = Field(alias="backgroundColor")
    border_width: int = Field(default=1, alias="borderWidth")


class PriceChartResponse(BaseModel):
    """Chart-ready dataset; "Your Price" is always the first dataset"""
    labels: List[str]
    datasets: List[PricingSeriesResponse]

    @classmethod
    def from_chart(cls, chart: ChartData) -> "PriceChartResponse":
        return cls(
            labels=chart.labels,
            datasets=[
                PricingSeriesResponse(
                    label=series.label,
                    data=series.data,
                    border_color=series.border_color,
                    background_color=series.background_color,
                    border_width=series.border_width,
                )
                for series in chart.datasets
            ],
        )
