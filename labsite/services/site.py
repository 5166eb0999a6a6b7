"""
Site service owning the load phase and the frozen snapshot.
"""
import logging
from enum import Enum
from typing import Iterable, List, Optional

from labsite.core.config import Settings, get_settings
from labsite.core.errors import LoadOrchestrationError, SiteNotReadyError
from labsite.ingest.catalog import SourceDescriptor
from labsite.ingest.fetcher import ResourceFetcher
from labsite.ingest.loader import SnapshotLoader
from labsite.ingest.postprocess import derive
from labsite.models.records import LabData
from labsite.models.snapshot import Snapshot
from labsite.services.news import NewsAggregator, NewsItem

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Lab data is loading, please try again shortly."
LOAD_ERROR_MESSAGE = (
    "Unable to read lab data. Check that the data files are present in the data directory."
)


class LoadStatus(str, Enum):
    """State of the load phase."""
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class SiteService:
    """
    Runs the load phase once and serves the resulting snapshot.

    Until `load()` finishes the status is LOADING. A successful load leaves
    a frozen snapshot and status READY; an orchestration failure leaves no
    snapshot, status ERROR and a single user-facing error message.
    """

    def __init__(
        self,
        fetcher: ResourceFetcher,
        settings: Optional[Settings] = None,
        sources: Optional[Iterable[SourceDescriptor]] = None,
        aggregator: Optional[NewsAggregator] = None,
    ):
        self.settings = settings or get_settings()
        self.sources = sources
        self._loader = SnapshotLoader(fetcher)
        self._aggregator = aggregator or NewsAggregator()
        self._status = LoadStatus.LOADING
        self._snapshot: Optional[Snapshot] = None
        self._lab_data: Optional[LabData] = None
        self._error_message: Optional[str] = None

    @property
    def status(self) -> LoadStatus:
        """Get current load status."""
        return self._status

    @property
    def error_message(self) -> Optional[str]:
        return self._error_message

    async def load(self) -> LoadStatus:
        """
        Run the load phase: fetch and parse all sources, derive image paths,
        then freeze the snapshot.

        Returns:
            The resulting load status
        """
        self._status = LoadStatus.LOADING
        logger.info("Loading lab data...")

        try:
            snapshot = await self._loader.load_all(self.sources)
            derive(snapshot, self.settings)
            lab_data = LabData.from_snapshot(snapshot)
        except LoadOrchestrationError:
            logger.exception("Lab data load failed")
            self._set_error()
            return self._status
        except Exception:
            logger.exception("Unexpected error while preparing lab data")
            self._set_error()
            return self._status

        self._snapshot = snapshot.freeze()
        self._lab_data = lab_data
        self._error_message = None
        self._status = LoadStatus.READY
        logger.info("Lab data ready")
        return self._status

    @property
    def snapshot(self) -> Snapshot:
        """
        Get the loaded snapshot.

        Raises:
            SiteNotReadyError: If the load phase is pending or failed
        """
        self._ensure_ready()
        return self._snapshot

    @property
    def lab_data(self) -> LabData:
        """Typed view over the snapshot."""
        self._ensure_ready()
        return self._lab_data

    def failed_sources(self) -> List[str]:
        """Keys of sources that fell back to their empty default."""
        if self._snapshot is None:
            return []
        return list(self._snapshot.failed_sources)

    def latest_news(self, limit: Optional[int] = None) -> List[NewsItem]:
        """Ranked feed over the loaded snapshot."""
        limit = self.settings.NEWS_LIMIT if limit is None else limit
        return self._aggregator.latest(self.snapshot, limit)

    def _set_error(self) -> None:
        self._snapshot = None
        self._lab_data = None
        self._error_message = LOAD_ERROR_MESSAGE
        self._status = LoadStatus.ERROR

    def _ensure_ready(self) -> None:
        if self._status is LoadStatus.LOADING:
            raise SiteNotReadyError(LOADING_MESSAGE)
        if self._status is LoadStatus.ERROR:
            raise SiteNotReadyError(self._error_message or LOAD_ERROR_MESSAGE)
