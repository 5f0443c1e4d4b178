"""
Service layer for the competitors domain.
"""

from .discovery_service import CompetitorDiscoveryService, merge_candidates
from .pricing_aggregator import PricingAggregator

__all__ = [
    "CompetitorDiscoveryService",
    "PricingAggregator",
    "merge_candidates",
]
