"""
Data ingestion pipeline: parsing, source catalog, fetching, loading and
post-processing of the lab data files.
"""
from labsite.ingest.catalog import DEFAULT_SOURCES, Cardinality, Dataset, SourceDescriptor
from labsite.ingest.fetcher import (
    FetcherConfig,
    HttpResourceFetcher,
    LocalResourceFetcher,
    ResourceFetcher,
    create_fetcher,
)
from labsite.ingest.loader import LoadError, SnapshotLoader, SourceLoadResult, assemble_snapshot
from labsite.ingest.parser import FieldMapping, ParserConfig, RecordParser, parse_records
from labsite.ingest.postprocess import derive

__all__ = [
    "DEFAULT_SOURCES",
    "Cardinality",
    "Dataset",
    "SourceDescriptor",
    "FetcherConfig",
    "HttpResourceFetcher",
    "LocalResourceFetcher",
    "ResourceFetcher",
    "create_fetcher",
    "LoadError",
    "SnapshotLoader",
    "SourceLoadResult",
    "assemble_snapshot",
    "FieldMapping",
    "ParserConfig",
    "RecordParser",
    "parse_records",
    "derive",
]
