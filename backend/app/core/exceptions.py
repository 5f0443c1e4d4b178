"""
Domain exceptions and their FastAPI handlers
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger


class SagelyticsError(Exception):
    """Base class for errors surfaced by the competitor pipeline"""


class InvalidDomainError(SagelyticsError, ValueError):
    """Raised when a domain or URL cannot be normalized"""

    def __init__(self, value: str, reason: str = "unparsable domain"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid domain {value!r}: {reason}")


class DiscoveryError(SagelyticsError):
    """Raised when the competitor suggestion signal fails outright"""


async def _invalid_domain_handler(request: Request, exc: InvalidDomainError) -> JSONResponse:
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


async def _discovery_error_handler(request: Request, exc: DiscoveryError) -> JSONResponse:
    logger.error(f"Competitor discovery failed for {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Failed to discover competitors"},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register handlers that map pipeline errors onto HTTP responses"""
    app.add_exception_handler(InvalidDomainError, _invalid_domain_handler)
    app.add_exception_handler(DiscoveryError, _discovery_error_handler)
