"""
Wire schemas of the label-lookup service.

The service answers ``GET /search/<label>`` with
``{"results": [{name, pageID, matchedLabel, canonLabel, dist}, ...]}``
ordered by ascending edit distance.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LookupRecord(BaseModel):
    """Single ranked candidate returned by the label-lookup service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, description="Resource name")
    page_id: int = Field(alias="pageID", ge=0, description="enwiki page ID")
    matched_label: str = Field(alias="matchedLabel", min_length=1)
    canon_label: Optional[str] = Field(default=None, alias="canonLabel")
    dist: int = Field(default=0, ge=0, description="Edit distance to the query")


class LookupResponse(BaseModel):
    """Envelope of a label-lookup search response."""

    model_config = ConfigDict(extra="ignore")

    results: List[Dict[str, Any]] = Field(default_factory=list)
