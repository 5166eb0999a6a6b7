"""
Static catalog of the lab data sources.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from labsite.models.types import Dataset, FieldMapping


class Cardinality(str, Enum):
    """How many records a source contributes to the snapshot."""
    SINGLE = "single"
    MANY = "many"


@dataclass(frozen=True)
class SourceDescriptor:
    """A logical dataset, where to read it from, and its shape."""
    key: str
    locator: str
    cardinality: Cardinality = Cardinality.MANY

    def empty_default(self) -> Dataset:
        """Dataset used when the source cannot be loaded."""
        if self.cardinality is Cardinality.SINGLE:
            return {}
        return []

    def select(self, records: List[FieldMapping]) -> Dataset:
        """Shape parsed records according to the cardinality."""
        if self.cardinality is Cardinality.SINGLE:
            return dict(records[0]) if records else {}
        return records


DATA_DIR = "data"


def _source(key: str, cardinality: Cardinality = Cardinality.MANY) -> SourceDescriptor:
    return SourceDescriptor(key=key, locator=f"{DATA_DIR}/{key}.csv", cardinality=cardinality)


# Columns per source:
#   info: name, englishName, description, location, email, phone
#   professor: name, title, image_filename
#   education: year, degree, school
#   experience_main / experience_related: period, title, org
#   honors: year, title, date
#   patents: year, title, region, number, date
#   conference_intl / conference_dom: year, title, conference, location, date
#   projects: year, title, agency, role, date
#   activity_photos: id, filename, caption
DEFAULT_SOURCES: Tuple[SourceDescriptor, ...] = (
    _source("info", Cardinality.SINGLE),
    _source("professor", Cardinality.SINGLE),
    _source("education"),
    _source("experience_main"),
    _source("experience_related"),
    _source("honors"),
    _source("patents"),
    _source("conference_intl"),
    _source("conference_dom"),
    _source("projects"),
    _source("activity_photos"),
)


def source_map(sources: Tuple[SourceDescriptor, ...] = DEFAULT_SOURCES) -> Dict[str, SourceDescriptor]:
    """Index descriptors by key."""
    return {source.key: source for source in sources}
