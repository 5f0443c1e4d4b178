from .discovery import BusinessContext, CandidateSource, CompetitorCandidate, DiscoveryResult
from .pricing import ChartData, CompetitorPrices, PricingSeries

__all__ = [
    "BusinessContext",
    "CandidateSource",
    "CompetitorCandidate",
    "DiscoveryResult",
    "ChartData",
    "CompetitorPrices",
    "PricingSeries",
]
