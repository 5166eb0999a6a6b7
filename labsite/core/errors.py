"""
Exceptions raised by the ingestion pipeline and site service.
"""
from typing import Optional


class LabSiteError(Exception):
    """Base exception for lab site data errors."""
    pass


class ResourceFetchError(LabSiteError):
    """A single data resource could not be read."""
    
    def __init__(
        self,
        locator: str,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(f"{locator}: {message}")
        self.locator = locator
        self.status_code = status_code


class LoadOrchestrationError(LabSiteError):
    """The load phase itself could not run."""
    pass


class SnapshotFrozenError(LabSiteError):
    """Mutation attempted on a frozen snapshot."""
    pass


class SiteNotReadyError(LabSiteError):
    """Snapshot requested before a successful load."""
    pass
