"""
Result of resolving one title.

Keeps the graph-store matches and the fuzzy matches apart so callers can
decide which source they trust.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from rapidfuzz import fuzz

from ..models import Article


@dataclass(frozen=True)
class TitleResolution:
    """
    Immutable outcome of a resolve call.

    Attributes:
        original_title: Title passed by the caller
        title_form: Title form that produced the results (last tried if none did)
        graph_matches: Exact graph-store matches, casing-restored
        fuzzy_matches: Label-lookup matches kept by the policy
    """
    original_title: str
    title_form: Optional[str] = None
    graph_matches: List[Article] = field(default_factory=list)
    fuzzy_matches: List[Article] = field(default_factory=list)

    @property
    def articles(self) -> List[Article]:
        """Graph matches followed by fuzzy matches."""
        return list(self.graph_matches) + list(self.fuzzy_matches)

    def is_empty(self) -> bool:
        return not self.graph_matches and not self.fuzzy_matches

    def best(self) -> Optional[Article]:
        """
        Pick the single best article.

        Lowest edit distance wins; ties go to the label most similar to the
        title form, then to graph-store matches over fuzzy ones.
        """
        query = self.title_form or self.original_title
        ranked = [
            (article.dist, -fuzz.ratio(query, article.canon_label), order, article)
            for order, article in enumerate(self.articles)
        ]
        if not ranked:
            return None
        return min(ranked, key=lambda item: item[:3])[3]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        best = self.best()
        return {
            "original_title": self.original_title,
            "title_form": self.title_form,
            "graph_matches": [a.to_dict() for a in self.graph_matches],
            "fuzzy_matches": [a.to_dict() for a in self.fuzzy_matches],
            "best": best.to_dict() if best else None,
        }
