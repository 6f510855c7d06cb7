"""
Domain model for resolved encyclopedia articles.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Article:
    """
    Immutable enwiki article candidate.

    Graph-store matches carry only a label and a page ID; label-lookup
    matches additionally carry the service's name and edit distance.

    Attributes:
        page_id: Stable article identifier (enwiki page ID)
        matched_label: Label text that matched the query (pre-normalization)
        canon_label: Canonical display label, defaults to matched_label
        name: Free-text name from the label-lookup service, if any
        dist: Edit distance between query and matched_label
    """
    page_id: int
    matched_label: str
    canon_label: Optional[str] = None
    name: Optional[str] = None
    dist: int = 0
    source: str = field(default="graph", compare=False)

    def __post_init__(self):
        """Fill canon_label and validate invariants."""
        if self.canon_label is None:
            object.__setattr__(self, "canon_label", self.matched_label)
        if self.page_id < 0:
            raise ValueError(f"page_id must be non-negative, got {self.page_id}")
        if self.dist < 0:
            raise ValueError(f"dist must be non-negative, got {self.dist}")
        if not self.canon_label:
            raise ValueError("canon_label must not be empty")

    @classmethod
    def from_graph_row(
        cls,
        label: str,
        page_id: int,
        canon_label: Optional[str] = None,
    ) -> "Article":
        """Build an exact graph-store match."""
        return cls(
            page_id=page_id,
            matched_label=label,
            canon_label=canon_label,
            dist=0,
            source="graph",
        )

    @classmethod
    def from_lookup_record(cls, record) -> "Article":
        """Build a fuzzy match from a validated LookupRecord."""
        return cls(
            page_id=record.page_id,
            matched_label=record.matched_label,
            canon_label=record.canon_label or record.matched_label,
            name=record.name,
            dist=record.dist,
            source="lookup",
        )

    def to_dict(self) -> dict:
        """Convert to the label-lookup wire naming."""
        return {
            "name": self.name,
            "pageID": self.page_id,
            "matchedLabel": self.matched_label,
            "canonLabel": self.canon_label,
            "dist": self.dist,
        }
