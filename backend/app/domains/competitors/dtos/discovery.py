from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List


class CandidateSource(str, enum.Enum):
    SEARCH = "search"
    SUGGESTION = "suggestion"


@dataclass(frozen=True)
class CompetitorCandidate:
    domain: str
    source: CandidateSource


@dataclass
class BusinessContext:
    domain: str
    product_catalog_url: str
    business_type: str = ""
    known_competitors: List[str] = field(default_factory=list)


@dataclass
class DiscoveryResult:
    candidates: List[CompetitorCandidate]

    @property
    def competitors(self) -> List[str]:
        return [candidate.domain for candidate in self.candidates]

    @property
    def stats(self) -> Dict[str, int]:
        counts = {source.value: 0 for source in CandidateSource}
        for candidate in self.candidates:
            counts[candidate.source.value] += 1
        counts["total"] = len(self.candidates)
        return counts
