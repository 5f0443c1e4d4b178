"""
Comparative pricing trend built from user and competitor product prices.

Trends are simulated around a real (or synthesized) baseline price: there is no
price history yet, only current catalog prices.
"""

from __future__ import annotations

import math
import random
from statistics import mean
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from app.core.config import settings

from ..dtos import ChartData, CompetitorPrices, PricingSeries

WEEKS = 4
USER_SERIES_LABEL = "Your Price"
USER_SERIES_RGB: Tuple[int, int, int] = (53, 162, 235)

BASELINE_SPREAD = (0.9, 1.1)
WEEKLY_VARIATION = (-0.05, 0.05)
FLOOR_RATIO = 0.95


def valid_prices(prices: Optional[Iterable[Any]]) -> List[float]:
    """Keep strictly positive, finite numeric prices; drop nulls and junk"""
    result: List[float] = []
    for price in prices or []:
        if price is None or isinstance(price, bool):
            continue
        try:
            value = float(price)
        except (TypeError, ValueError):
            continue
        if math.isfinite(value) and value > 0:
            result.append(value)
    return result


def competitor_rgb(index: int) -> Tuple[int, int, int]:
    return (
        (index * 50 + 100) % 256,
        (index * 30 + 100) % 256,
        (index * 40 + 100) % 256,
    )


def _colors(rgb: Tuple[int, int, int]) -> Tuple[str, str]:
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})", f"rgba({r}, {g}, {b}, 0.5)"


class PricingAggregator:
    """Builds the "Your Price" vs competitors chart dataset"""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        default_baseline: Optional[float] = None,
    ):
        self.rng = rng or random.Random()
        self.default_baseline = (
            default_baseline if default_baseline is not None else settings.DEFAULT_BASELINE_PRICE
        )

    def _uniform(self, low: float, high: float) -> float:
        # half-open [low, high)
        return low + self.rng.random() * (high - low)

    @property
    def week_labels(self) -> List[str]:
        return [f"Week {week}" for week in range(1, WEEKS + 1)]

    def user_baseline(self, user_prices: Optional[Iterable[Any]]) -> float:
        """
        Mean of the user's valid prices, or the default baseline when none remain.

        Nulls, non-numeric values and prices <= 0 are dropped before averaging,
        the same filter competitor prices go through. So ``[0]`` falls back to
        the default baseline and ``[-10, 30]`` averages to 30.
        """
        prices = valid_prices(user_prices)
        if not prices:
            return self.default_baseline
        return mean(prices)

    def competitor_baseline(self, known_prices: Optional[Iterable[Any]], user_baseline: float) -> float:
        prices = valid_prices(known_prices)
        if prices:
            return mean(prices)
        low, high = BASELINE_SPREAD
        return user_baseline * self._uniform(low, high)

    def generate_trend(self, baseline: float) -> List[float]:
        points: List[float] = []
        for _ in range(WEEKS):
            variation = self._uniform(*WEEKLY_VARIATION)
            current_price = max(baseline * (1 + variation), baseline * FLOOR_RATIO)
            points.append(round(current_price, 2))
        return points

    def aggregate(
        self,
        user_prices: Optional[Iterable[Any]],
        competitors: Sequence[CompetitorPrices] = (),
    ) -> ChartData:
        user_baseline = self.user_baseline(user_prices)
        border, background = _colors(USER_SERIES_RGB)
        datasets = [
            PricingSeries(
                label=USER_SERIES_LABEL,
                data=self.generate_trend(user_baseline),
                border_color=border,
                background_color=background,
            )
        ]

        synthesized = 0
        for index, competitor in enumerate(competitors):
            if not valid_prices(competitor.known_prices):
                synthesized += 1
            baseline = self.competitor_baseline(competitor.known_prices, user_baseline)
            border, background = _colors(competitor_rgb(index))
            datasets.append(
                PricingSeries(
                    label=competitor.domain,
                    data=self.generate_trend(baseline),
                    border_color=border,
                    background_color=background,
                )
            )

        logger.debug(
            f"Aggregated pricing for {len(competitors)} competitors "
            f"(user baseline {user_baseline:.2f}, {synthesized} synthesized baselines)"
        )
        return ChartData(labels=self.week_labels, datasets=datasets)
