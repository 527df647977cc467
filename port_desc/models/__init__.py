"""Domain models for the port description registry."""

from .index_stats import IndexStats
from .port_entry import PortEntry
from .transport_protocol import TransportProtocol

__all__ = [
    "IndexStats",
    "PortEntry",
    "TransportProtocol",
]
