from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class CompetitorPrices:
    domain: str
    known_prices: Sequence[Optional[float]] = field(default_factory=list)


@dataclass
class PricingSeries:
    label: str
    data: List[float]
    border_color: str
    background_color: str
    border_width: int = 1


@dataclass
class ChartData:
    labels: List[str]
    datasets: List[PricingSeries]
