from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from ..models.index_stats import IndexStats
from ..models.port_entry import PortEntry
from ..models.transport_protocol import TransportProtocol

"""Protocol index builder.

Partitions parsed registry rows into one port -> entry mapping per transport
protocol. Rows without a concrete port or a recognised protocol are skipped.
When several rows share a (protocol, port) slot the last one in source order
wins; the overwritten rows are only counted.
"""

__all__ = [
    "PortIndex",
    "build_port_index",
    "build_port_indexes",
    "compute_index_stats",
]

logger = logging.getLogger(__name__)

PortIndex = Mapping[int, PortEntry]


def build_port_index(protocol: TransportProtocol, records: Iterable[PortEntry]) -> dict[int, PortEntry]:
    """Build the port -> entry map for a single protocol (last write wins)."""
    index: dict[int, PortEntry] = {}
    for record in records:
        if record.transport_protocol is not protocol or record.port_number is None:
            continue
        previous = index.get(record.port_number)
        if previous is not None:
            logger.debug(
                f"{protocol.value}/{record.port_number}: "
                f"'{previous.service_name}' replaced by '{record.service_name}'"
            )
        index[record.port_number] = record
    return index


def build_port_indexes(records: Sequence[PortEntry]) -> dict[TransportProtocol, PortIndex]:
    """Build read-only indexes for every TransportProtocol member.

    Every member gets a mapping, possibly empty, so lookups never need a
    membership check on the protocol.
    """
    return {
        protocol: MappingProxyType(build_port_index(protocol, records))
        for protocol in TransportProtocol
    }


def compute_index_stats(
    source: str,
    records: Sequence[PortEntry],
    indexes: Mapping[TransportProtocol, PortIndex],
    elapsed_seconds: float = 0.0,
) -> IndexStats:
    """Derive construction counters from the parsed rows and the built indexes."""
    missing_port = sum(1 for r in records if r.port_number is None)
    missing_protocol = sum(1 for r in records if r.transport_protocol is None)
    indexable = sum(1 for r in records if r.indexable)
    indexed = {protocol: len(index) for protocol, index in indexes.items()}
    return IndexStats(
        source=source,
        total_rows=len(records),
        indexed=indexed,
        missing_port_rows=missing_port,
        missing_protocol_rows=missing_protocol,
        overwritten_rows=indexable - sum(indexed.values()),
        elapsed_seconds=elapsed_seconds,
    )
