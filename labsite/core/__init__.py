# Core module - configuration, errors and logging
from labsite.core.config import Settings, get_settings
from labsite.core.errors import (
    LabSiteError,
    LoadOrchestrationError,
    ResourceFetchError,
    SiteNotReadyError,
    SnapshotFrozenError,
)
from labsite.core.logging_config import configure_logging

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "LabSiteError",
    "LoadOrchestrationError",
    "ResourceFetchError",
    "SiteNotReadyError",
    "SnapshotFrozenError",
    # Logging
    "configure_logging",
]
