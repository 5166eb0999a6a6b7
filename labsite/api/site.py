"""
Site data API endpoints: load status, snapshot, datasets and latest news.
"""
from collections.abc import Mapping
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from labsite.core.errors import SiteNotReadyError
from labsite.ingest.catalog import Cardinality
from labsite.models.snapshot import Snapshot
from labsite.schemas.site import (
    DatasetResponse,
    NewsItemResponse,
    NewsListResponse,
    SiteStatusResponse,
    SnapshotResponse,
)
from labsite.services.site import SiteService

router = APIRouter(prefix="/site", tags=["site"])

MAX_NEWS_LIMIT = 50


def get_site_service(request: Request) -> SiteService:
    """Site service created by the application lifespan."""
    return request.app.state.site_service


def _ready_snapshot(service: SiteService) -> Snapshot:
    try:
        return service.snapshot
    except SiteNotReadyError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )


@router.get("/status", response_model=SiteStatusResponse)
async def get_status(service: SiteService = Depends(get_site_service)):
    """
    Get the state of the load phase.

    Reports loading, ready or error, plus the sources that fell back to
    empty defaults.
    """
    return SiteStatusResponse(
        status=service.status.value,
        message=service.error_message,
        failed_sources=service.failed_sources(),
    )


@router.get("/snapshot", response_model=SnapshotResponse)
async def get_snapshot(service: SiteService = Depends(get_site_service)):
    """
    Get every dataset in the snapshot.
    """
    snapshot = _ready_snapshot(service)
    return SnapshotResponse(
        datasets=snapshot.to_dict(),
        failed_sources=list(snapshot.failed_sources),
    )


@router.get("/datasets/{key}", response_model=DatasetResponse)
async def get_dataset(key: str, service: SiteService = Depends(get_site_service)):
    """
    Get a single dataset by its source key.
    """
    snapshot = _ready_snapshot(service)
    if key not in snapshot:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown dataset: {key}",
        )

    cardinality = Cardinality.SINGLE if isinstance(snapshot[key], Mapping) else Cardinality.MANY
    return DatasetResponse(
        key=key,
        cardinality=cardinality.value,
        data=snapshot.to_dict([key])[key],
        loaded=key not in snapshot.failed_sources,
    )


@router.get("/news", response_model=NewsListResponse)
async def get_latest_news(
    limit: Optional[int] = Query(default=None, ge=1, le=MAX_NEWS_LIMIT, description="Maximum items to return"),
    service: SiteService = Depends(get_site_service),
):
    """
    Get the latest dated honors, patents, conference papers and projects,
    newest first.
    """
    _ready_snapshot(service)
    items = service.latest_news(limit)
    return NewsListResponse(
        items=[NewsItemResponse(**item.to_dict()) for item in items],
        total=len(items),
    )
