"""
In-memory snapshot of every loaded dataset.

The snapshot is written by the loader, enriched in place by the
post-processor, then frozen. After freezing, records are exposed through
read-only views and any mutation raises SnapshotFrozenError.
"""
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from labsite.core.errors import SnapshotFrozenError
from labsite.models.types import Dataset, FieldMapping


class Snapshot(Mapping):
    """Read-mostly mapping from logical source key to its dataset."""

    def __init__(
        self,
        datasets: Dict[str, Dataset],
        failed_sources: Iterable[str] = (),
    ):
        self._datasets: Dict[str, Any] = dict(datasets)
        self._failed_sources: Tuple[str, ...] = tuple(failed_sources)
        self._frozen = False

    def __getitem__(self, key: str) -> Any:
        return self._datasets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._datasets)

    def __len__(self) -> int:
        return len(self._datasets)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"Snapshot({state}, keys={list(self._datasets)})"

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def failed_sources(self) -> Tuple[str, ...]:
        """Keys whose source fell back to its empty default."""
        return self._failed_sources

    def single(self, key: str) -> Mapping:
        """Get a singleton dataset, or an empty mapping."""
        value = self._datasets.get(key)
        return value if isinstance(value, Mapping) else {}

    def records(self, key: str) -> Sequence[Mapping]:
        """Get a repeating dataset, or an empty sequence."""
        value = self._datasets.get(key)
        if value is None or isinstance(value, Mapping):
            return ()
        return value

    def mutable_single(self, key: str) -> FieldMapping:
        """Get a singleton dataset for in-place enrichment."""
        self._ensure_mutable()
        value = self._datasets.get(key)
        if not isinstance(value, dict):
            value = {}
            self._datasets[key] = value
        return value

    def mutable_records(self, key: str) -> List[FieldMapping]:
        """Get a repeating dataset for in-place enrichment."""
        self._ensure_mutable()
        value = self._datasets.get(key)
        if not isinstance(value, list):
            value = []
            self._datasets[key] = value
        return value

    def freeze(self) -> "Snapshot":
        """Replace every dataset with a read-only view. Idempotent."""
        if self._frozen:
            return self
        for key, value in self._datasets.items():
            if isinstance(value, dict):
                self._datasets[key] = MappingProxyType(dict(value))
            else:
                self._datasets[key] = tuple(MappingProxyType(dict(r)) for r in value)
        self._frozen = True
        return self

    def to_dict(self, keys: Optional[Iterable[str]] = None) -> Dict[str, Dataset]:
        """Plain-data copy of the snapshot, suitable for JSON encoding."""
        selected = self._datasets.keys() if keys is None else keys
        result: Dict[str, Dataset] = {}
        for key in selected:
            result[key] = _copy_dataset(self._datasets[key])
        return result

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise SnapshotFrozenError("Snapshot is frozen and cannot be modified")


def _copy_dataset(value: Any) -> Dataset:
    if isinstance(value, Mapping):
        return dict(value)
    return [dict(record) for record in value]
