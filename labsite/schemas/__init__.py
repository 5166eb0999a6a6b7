from labsite.schemas.site import (
    DatasetResponse,
    NewsItemResponse,
    NewsListResponse,
    SiteStatusResponse,
    SnapshotResponse,
)

__all__ = [
    "DatasetResponse",
    "NewsItemResponse",
    "NewsListResponse",
    "SiteStatusResponse",
    "SnapshotResponse",
]
