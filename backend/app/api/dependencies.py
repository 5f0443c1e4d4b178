"""
API dependencies
"""

from fastapi import HTTPException, Request, status

from app.domains.competitors import CompetitorFacade


def get_competitor_facade(request: Request) -> CompetitorFacade:
    """
    Return the competitor facade built at application startup

    Raises:
        HTTPException: If the application has not finished starting up
    """
    facade = getattr(request.app.state, "competitor_facade", None)
    if facade is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Competitor services are not initialized",
        )
    return facade
