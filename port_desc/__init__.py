"""Well-known port lookup over the IANA service-names-port-numbers registry.

    >>> from port_desc import PortRegistry, TransportProtocol
    >>> registry = PortRegistry.default()
    >>> registry.lookup_service_name(80, TransportProtocol.TCP)
    'www-http'
"""

from .dataset.reader import DatasetError, MalformedRowError, MissingColumnsError, PortDescError
from .dataset.source import SourceUnavailableError
from .models.index_stats import IndexStats
from .models.port_entry import PortEntry
from .models.transport_protocol import TransportProtocol
from .services.registry import PortRegistry

__all__ = [
    "DatasetError",
    "IndexStats",
    "MalformedRowError",
    "MissingColumnsError",
    "PortDescError",
    "PortEntry",
    "PortRegistry",
    "SourceUnavailableError",
    "TransportProtocol",
]

__version__ = "0.1.0"
