from __future__ import annotations

import json
from dataclasses import dataclass

from .transport_protocol import TransportProtocol

"""PortEntry model: one parsed data row of the service-names registry.

Optional fields use None for "absent" so that port 0 or an empty service
name remain distinguishable from a missing value.
"""

__all__ = [
    "PortEntry",
]


@dataclass(frozen=True)
class PortEntry:
    """Logical representation of a single registry row after parsing.

    Rows without a concrete port number or a recognised protocol are still
    produced by the parser; they are simply never indexed.
    """
    service_name: str  # may be empty (reserved / unassigned rows)
    port_number: int | None  # None: empty, range or non-numeric cell
    transport_protocol: TransportProtocol | None  # None: unrecognised protocol text
    description: str

    @property
    def indexable(self) -> bool:
        """True when the row resolves to a single (protocol, port) slot."""
        return self.port_number is not None and self.transport_protocol is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "service_name": self.service_name,
            "port_number": self.port_number,
            "transport_protocol": (
                self.transport_protocol.value if self.transport_protocol is not None else None
            ),
            "description": self.description,
        }

    def to_json_line(self) -> str:
        """Serialize the entry as a single JSON object line."""
        return json.dumps(self.to_dict(), ensure_ascii=False)
