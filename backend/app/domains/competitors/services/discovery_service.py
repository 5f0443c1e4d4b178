"""
Competitor discovery combining web search and model suggestions.
"""

from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List, Sequence

from loguru import logger

from app.services.gpt_service import GPTService
from app.services.search_service import SerperSearchClient
from app.utils.domains import extract_hostname

from ..dtos import CandidateSource, CompetitorCandidate


def merge_candidates(
    search_links: Iterable[str],
    suggestions: Iterable[str],
) -> List[CompetitorCandidate]:
    """
    Union of search-derived hosts and suggested domains.

    Each domain appears once, tagged with the source it was first seen in.
    Search results come first.
    """
    merged: Dict[str, CandidateSource] = {}

    for link in search_links:
        host = extract_hostname(link)
        if host and host not in merged:
            merged[host] = CandidateSource.SEARCH

    for suggestion in suggestions:
        domain = suggestion.strip().lower()
        if domain and domain not in merged:
            merged[domain] = CandidateSource.SUGGESTION

    return [CompetitorCandidate(domain=domain, source=source) for domain, source in merged.items()]


class CompetitorDiscoveryService:
    """Discovers candidate competitor domains from two independent signals.

    The search signal degrades to an empty list on failure. The suggestion
    signal raises DiscoveryError on failure. Neither is retried.
    """

    def __init__(self, search_client: SerperSearchClient, gpt_service: GPTService):
        self.search_client = search_client
        self.gpt_service = gpt_service

    async def discover_candidates(
        self,
        domain: str,
        known_competitors: Sequence[str] = (),
    ) -> List[CompetitorCandidate]:
        logger.info(
            f"Discovering competitors for {domain} "
            f"({len(known_competitors)} known competitors)"
        )
        search_links, suggestions = await asyncio.gather(
            self.search_client.search_competitor_links(domain),
            self.gpt_service.suggest_competitor_domains(domain, list(known_competitors)),
        )
        candidates = merge_candidates(search_links, suggestions)
        logger.info(f"Discovered {len(candidates)} unique competitor candidates for {domain}")
        return candidates

    async def discover(self, domain: str, known_competitors: Sequence[str] = ()) -> List[str]:
        candidates = await self.discover_candidates(domain, known_competitors)
        return [candidate.domain for candidate in candidates]
