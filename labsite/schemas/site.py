"""
Schemas for site data API endpoints.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DatasetPayload = Union[Dict[str, str], List[Dict[str, str]]]


class SiteStatusResponse(BaseModel):
    """Response schema for load status."""
    status: str
    message: Optional[str] = None
    failed_sources: List[str] = Field(default_factory=list)


class SnapshotResponse(BaseModel):
    """Response schema for the full snapshot."""
    datasets: Dict[str, DatasetPayload]
    failed_sources: List[str] = Field(default_factory=list)


class DatasetResponse(BaseModel):
    """Response schema for a single dataset."""
    key: str
    cardinality: str
    data: DatasetPayload
    loaded: bool = True


class NewsItemResponse(BaseModel):
    """Response schema for a news item; original columns are passed through."""
    model_config = ConfigDict(extra="allow")

    type: str
    category: str
    date: str
    title: str


class NewsListResponse(BaseModel):
    """Response schema for the latest news feed."""
    items: List[NewsItemResponse]
    total: int
