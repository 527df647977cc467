from __future__ import annotations

from enum import Enum

"""TransportProtocol enum for the port registry.

The registry recognises exactly four transport protocols. Member values are
the canonical lowercase identifiers used by the IANA registry CSV; input text
is matched case-insensitively.
"""

__all__ = [
    "TransportProtocol",
]


class TransportProtocol(Enum):
    """Closed set of transport protocols indexed by the registry.

    - TCP: Transmission Control Protocol
    - UDP: User Datagram Protocol
    - SCTP: Stream Control Transmission Protocol
    - DCCP: Datagram Congestion Control Protocol
    """
    TCP = "tcp"
    UDP = "udp"
    SCTP = "sctp"
    DCCP = "dccp"

    @classmethod
    def from_text(cls, text: object) -> TransportProtocol | None:
        """Return the member whose identifier equals the lowercased text, else None.

        No trimming is applied: ``" tcp"`` or ``"tcp-mux"`` are not protocols.
        """
        if not isinstance(text, str):
            return None
        try:
            return cls(text.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value
