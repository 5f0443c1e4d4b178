"""
Competitor intelligence domain package.

Provides access to the competitor facade, which discovers competitor domains
and builds comparative pricing charts.
"""

from .facade import CompetitorFacade

__all__ = ["CompetitorFacade"]
