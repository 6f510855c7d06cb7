"""
Policy for combining graph-store matches with label-lookup matches.
"""
from enum import Enum
from typing import List, Optional

from ..models import Article


class FuzzyMode(str, Enum):
    """When to consult the label-lookup service for a title form."""

    ALWAYS = "always"
    FALLBACK = "fallback"
    NEVER = "never"


class ResolutionPolicy:
    """
    Decides whether the fuzzy service is consulted and which of its
    candidates are kept.

    ALWAYS appends the nearest fuzzy candidate to every title form's graph
    matches. FALLBACK consults the service only when the graph has nothing
    for the form. NEVER relies on the graph store alone.
    """

    def __init__(
        self,
        mode: FuzzyMode = FuzzyMode.ALWAYS,
        max_distance: Optional[int] = None,
        fuzzy_limit: int = 1,
    ):
        """
        Initialize resolution policy.

        :param mode: FuzzyMode or its string value
        :param max_distance: Reject fuzzy candidates farther than this edit distance
        :param fuzzy_limit: Number of ranked fuzzy candidates to keep
        """
        if max_distance is not None and max_distance < 0:
            raise ValueError(f"max_distance must be non-negative, got {max_distance}")
        if fuzzy_limit < 1:
            raise ValueError(f"fuzzy_limit must be at least 1, got {fuzzy_limit}")

        self.mode = FuzzyMode(mode)
        self.max_distance = max_distance
        self.fuzzy_limit = fuzzy_limit

    def should_lookup(self, graph_matches: List[Article]) -> bool:
        if self.mode is FuzzyMode.ALWAYS:
            return True
        if self.mode is FuzzyMode.FALLBACK:
            return not graph_matches
        return False

    def accept(self, candidate: Article) -> bool:
        return self.max_distance is None or candidate.dist <= self.max_distance

    def filter_fuzzy(self, candidates: List[Article]) -> List[Article]:
        return [c for c in candidates if self.accept(c)]
