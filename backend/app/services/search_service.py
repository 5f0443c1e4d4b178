"""
Web search signal for competitor discovery (Serper API)
"""

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from app.core.config import settings


class SerperSearchClient:
    """Thin client over the Serper search API.

    Failures never propagate: any transport, status or payload problem is
    logged and reported as an empty result list.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.SERPER_API_KEY
        self.api_url = api_url or settings.SERPER_API_URL
        self.session = http_client or httpx.AsyncClient(
            headers={"User-Agent": settings.HTTP_USER_AGENT},
            timeout=settings.HTTP_TIMEOUT,
        )

    async def close(self):
        """Close the HTTP session"""
        await self.session.aclose()

    @staticmethod
    def build_query(domain: str) -> Dict[str, str]:
        return {
            "q": f"top competitors of {domain}",
            "gl": settings.SEARCH_COUNTRY,
            "hl": settings.SEARCH_LANGUAGE,
        }

    async def search_competitor_links(self, domain: str) -> List[str]:
        """
        Search for "top competitors of {domain}" and return organic result links.

        Args:
            domain: Normalized company domain

        Returns:
            Result URLs in ranking order, or an empty list when the search fails
        """
        if not self.api_key:
            logger.warning("SERPER_API_KEY not configured. Skipping search signal.")
            return []

        try:
            response = await self.session.post(
                self.api_url,
                json=self.build_query(domain),
                headers={"X-API-KEY": self.api_key, "Content-Type": "application/json"},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Serper API error for {domain}: {e.response.status_code} {e.response.reason_phrase}")
            return []
        except httpx.HTTPError as e:
            logger.error(f"HTTP error fetching Serper results for {domain}: {e}")
            return []
        except ValueError as e:
            logger.error(f"Malformed Serper response for {domain}: {e}")
            return []
        except Exception as e:
            logger.error(f"Error fetching Serper results for {domain}: {e}")
            return []

        links = self._extract_links(payload)
        logger.info(f"Serper returned {len(links)} links for {domain}")
        return links

    @staticmethod
    def _extract_links(payload: Any) -> List[str]:
        if not isinstance(payload, dict):
            return []
        organic = payload.get("organic") or []
        if not isinstance(organic, list):
            return []
        links = []
        for result in organic:
            if isinstance(result, dict):
                link = result.get("link")
                if isinstance(link, str) and link.strip():
                    links.append(link.strip())
        return links
