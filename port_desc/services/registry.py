from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from ..dataset.reader import parse_records
from ..dataset.source import BUNDLED_SOURCE, read_bundled_text, read_source_text
from ..models.index_stats import IndexStats
from ..models.port_entry import PortEntry
from ..models.transport_protocol import TransportProtocol
from .port_index import PortIndex, build_port_indexes, compute_index_stats

"""Port registry: the queryable, read-only view over the protocol indexes.

Construction runs the whole pipeline (source text -> records -> indexes) in
one call and either returns a complete registry or raises; lookups never
raise for a missing slot.
"""

__all__ = [
    "PortRegistry",
]

logger = logging.getLogger(__name__)


class PortRegistry:
    """Immutable lookup of service metadata by (port number, transport protocol).

    Indexes are read-only mappings fixed at construction, so one instance can
    be shared between threads without locking.
    """

    __slots__ = ("_indexes", "_stats")

    def __init__(
        self,
        indexes: Mapping[TransportProtocol, PortIndex],
        stats: IndexStats | None = None,
    ) -> None:
        self._indexes = {
            protocol: indexes.get(protocol, MappingProxyType({}))
            for protocol in TransportProtocol
        }
        self._stats = stats

    @classmethod
    def default(cls) -> PortRegistry:
        """Build a registry from the bundled registry excerpt.

        The bundled CSV is a curated excerpt of the IANA registry (about 160
        rows), not the full export, so most registered ports are absent.
        Use from_csv_file() with a downloaded export for complete coverage.

        Raises:
            DatasetError: the bundled text fails structural parsing
        """
        return cls.from_csv_text(read_bundled_text(), source=BUNDLED_SOURCE)

    @classmethod
    def from_csv_file(cls, path: str | Path) -> PortRegistry:
        """Build a registry from a registry CSV file on disk.

        Raises:
            SourceUnavailableError: the file cannot be read
            DatasetError: the file content fails structural parsing
        """
        return cls.from_csv_text(read_source_text(path), source=str(path))

    @classmethod
    def from_csv_text(cls, text: str, source: str = "<text>") -> PortRegistry:
        start = time.perf_counter()
        records = parse_records(text)
        indexes = build_port_indexes(records)
        stats = compute_index_stats(source, records, indexes, time.perf_counter() - start)
        counts = " ".join(f"{p.value}={stats.indexed_for(p)}" for p in TransportProtocol)
        logger.info(f"loaded {stats.total_rows} rows from {source}: {counts}")
        if stats.overwritten_rows:
            logger.debug(f"{stats.overwritten_rows} rows overwritten by later rows for the same slot")
        return cls(indexes, stats)

    @property
    def stats(self) -> IndexStats | None:
        return self._stats

    def lookup_entry(self, port_number: int, protocol: TransportProtocol) -> PortEntry | None:
        """Return the entry indexed at (protocol, port_number), or None."""
        return self._indexes[protocol].get(port_number)

    def lookup_service_name(self, port_number: int, protocol: TransportProtocol) -> str:
        """Return the service name at the slot, "" when nothing is indexed there."""
        entry = self.lookup_entry(port_number, protocol)
        return entry.service_name if entry is not None else ""

    def lookup_description(self, port_number: int, protocol: TransportProtocol) -> str:
        """Return the description at the slot, "" when nothing is indexed there."""
        entry = self.lookup_entry(port_number, protocol)
        return entry.description if entry is not None else ""

    def lookup_all(self, port_number: int) -> dict[TransportProtocol, PortEntry]:
        """Return every indexed entry for a port, keyed by protocol."""
        found: dict[TransportProtocol, PortEntry] = {}
        for protocol, index in self._indexes.items():
            entry = index.get(port_number)
            if entry is not None:
                found[protocol] = entry
        return found

    def ports(self, protocol: TransportProtocol) -> list[int]:
        """Sorted port numbers indexed for a protocol."""
        return sorted(self._indexes[protocol])

    def __repr__(self) -> str:
        sizes = ", ".join(f"{p.value}={len(i)}" for p, i in self._indexes.items())
        return f"PortRegistry({sizes})"
