"""
Concurrent loader that assembles a Snapshot from every configured source.

Each source is fetched and parsed in its own task. A failing source yields
a SourceLoadResult carrying a LoadError; results are reduced to datasets
(falling back to the source's empty default) only when the snapshot is
assembled. Failures of the load phase itself raise LoadOrchestrationError.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from labsite.core.errors import LoadOrchestrationError
from labsite.ingest.catalog import DEFAULT_SOURCES, Dataset, SourceDescriptor
from labsite.ingest.fetcher import ResourceFetcher
from labsite.ingest.parser import RecordParser
from labsite.models.snapshot import Snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadError:
    """Why a single source could not be loaded."""
    key: str
    locator: str
    message: str
    error_type: str


@dataclass(frozen=True)
class SourceLoadResult:
    """Outcome of loading one source: either a dataset or an error."""
    source: SourceDescriptor
    dataset: Optional[Dataset] = None
    error: Optional[LoadError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or_default(self) -> Dataset:
        """The loaded dataset, or the source's empty default on failure."""
        if self.error is not None or self.dataset is None:
            return self.source.empty_default()
        return self.dataset


class SnapshotLoader:
    """
    Loads every source concurrently and assembles a Snapshot.
    """

    def __init__(
        self,
        fetcher: ResourceFetcher,
        parser: Optional[RecordParser] = None,
    ):
        self.fetcher = fetcher
        self.parser = parser or RecordParser()

    async def load_source(self, source: SourceDescriptor) -> SourceLoadResult:
        """
        Fetch and parse one source without raising.

        Args:
            source: The source to load

        Returns:
            SourceLoadResult with the dataset, or with the error that
            prevented loading it
        """
        try:
            text = await self.fetcher.fetch_text(source.locator)
            records = self.parser.parse(text)
        except asyncio.CancelledError:
            logger.warning(f"Load of {source.key} was cancelled")
            return SourceLoadResult(
                source=source,
                error=LoadError(source.key, source.locator, "Cancelled", "CancelledError"),
            )
        except Exception as e:
            logger.warning(f"Failed to load {source.key}: {e}")
            return SourceLoadResult(
                source=source,
                error=LoadError(source.key, source.locator, str(e), type(e).__name__),
            )

        logger.debug(f"Loaded {source.key}: {len(records)} records")
        return SourceLoadResult(source=source, dataset=source.select(records))

    async def load_results(
        self,
        sources: Optional[Iterable[SourceDescriptor]] = None,
    ) -> List[SourceLoadResult]:
        """
        Load all sources concurrently and return the per-source outcomes.

        Raises:
            LoadOrchestrationError: If the sources cannot be enumerated or
                are inconsistent
        """
        descriptors = self._collect_sources(DEFAULT_SOURCES if sources is None else sources)
        tasks = [self.load_source(source) for source in descriptors]
        return list(await asyncio.gather(*tasks))

    async def load_all(
        self,
        sources: Optional[Iterable[SourceDescriptor]] = None,
    ) -> Snapshot:
        """
        Load all sources concurrently into a Snapshot.

        Args:
            sources: Descriptors to load; defaults to the built-in catalog

        Returns:
            Snapshot with an entry for every source. Sources that failed map
            to their empty default.

        Raises:
            LoadOrchestrationError: If the load phase itself fails
        """
        results = await self.load_results(sources)
        try:
            snapshot = assemble_snapshot(results)
        except Exception as e:
            raise LoadOrchestrationError(f"Failed to assemble snapshot: {e}") from e

        if snapshot.failed_sources:
            logger.warning(
                f"Loaded {len(snapshot)} sources, "
                f"{len(snapshot.failed_sources)} fell back to defaults: "
                f"{', '.join(snapshot.failed_sources)}"
            )
        else:
            logger.info(f"Loaded {len(snapshot)} sources")
        return snapshot

    @staticmethod
    def _collect_sources(sources: Iterable[SourceDescriptor]) -> List[SourceDescriptor]:
        try:
            descriptors = list(sources)
        except Exception as e:
            raise LoadOrchestrationError(f"Cannot enumerate data sources: {e}") from e

        seen = set()
        for source in descriptors:
            if not isinstance(source, SourceDescriptor):
                raise LoadOrchestrationError(f"Invalid source descriptor: {source!r}")
            if source.key in seen:
                raise LoadOrchestrationError(f"Duplicate source key: {source.key}")
            seen.add(source.key)
        return descriptors


def assemble_snapshot(results: Iterable[SourceLoadResult]) -> Snapshot:
    """Reduce per-source results to datasets and build the Snapshot."""
    datasets = {}
    failed = []
    for result in results:
        datasets[result.source.key] = result.unwrap_or_default()
        if not result.ok:
            failed.append(result.source.key)
    return Snapshot(datasets, failed_sources=failed)
