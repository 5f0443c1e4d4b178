"""
Competitor domain facade.

Single entry point for the API layer: normalizes inputs, runs competitor
discovery and builds pricing charts. One instance is constructed at startup
and injected into request handlers.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from loguru import logger

from app.core.exceptions import InvalidDomainError
from app.services.gpt_service import GPTService
from app.services.search_service import SerperSearchClient
from app.utils.domains import is_same_business, normalize_domain

from .dtos import BusinessContext, ChartData, CompetitorPrices, DiscoveryResult
from .services import CompetitorDiscoveryService, PricingAggregator


@dataclass
class CompetitorFacade:
    """Facade coordinating competitor discovery and pricing aggregation."""

    discovery_service: CompetitorDiscoveryService
    pricing_aggregator: PricingAggregator

    @classmethod
    def from_settings(cls, rng: Optional[random.Random] = None) -> "CompetitorFacade":
        return cls(
            discovery_service=CompetitorDiscoveryService(
                search_client=SerperSearchClient(),
                gpt_service=GPTService(),
            ),
            pricing_aggregator=PricingAggregator(rng=rng),
        )

    async def close(self) -> None:
        await self.discovery_service.search_client.close()
        await self.discovery_service.gpt_service.close()

    async def discover_competitors(self, context: BusinessContext) -> DiscoveryResult:
        domain = normalize_domain(context.domain)
        if not context.product_catalog_url or not context.product_catalog_url.strip():
            raise InvalidDomainError(context.product_catalog_url or "", "product catalog URL is required")
        catalog_domain = normalize_domain(context.product_catalog_url)

        known: List[str] = []
        for competitor in context.known_competitors:
            if competitor and competitor.strip():
                normalized = normalize_domain(competitor)
                if normalized not in known:
                    known.append(normalized)

        candidates = await self.discovery_service.discover_candidates(domain, known)
        kept = [
            candidate
            for candidate in candidates
            if not is_same_business(candidate.domain, domain)
            and not is_same_business(candidate.domain, catalog_domain)
        ]
        if len(kept) != len(candidates):
            logger.info(
                f"Dropped {len(candidates) - len(kept)} candidates matching {domain} or {catalog_domain}"
            )
        return DiscoveryResult(candidates=kept)

    def build_price_chart(
        self,
        user_prices: Optional[Iterable[Any]],
        competitors: Sequence[CompetitorPrices] = (),
    ) -> ChartData:
        labelled: List[CompetitorPrices] = []
        for competitor in competitors:
            try:
                label = normalize_domain(competitor.domain)
            except InvalidDomainError:
                logger.warning(f"Keeping raw label for unparsable competitor domain {competitor.domain!r}")
                label = competitor.domain
            labelled.append(CompetitorPrices(domain=label, known_prices=competitor.known_prices))
        return self.pricing_aggregator.aggregate(user_prices, labelled)
