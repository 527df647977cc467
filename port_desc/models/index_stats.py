from __future__ import annotations

import json
from dataclasses import dataclass, field

from .transport_protocol import TransportProtocol

"""Index statistics captured while a registry is constructed.

Feeds the SUMMARY line rendered by services.summary and the ``stats`` CLI
command. Counters only; no reference to the records themselves.
"""


@dataclass(frozen=True)
class IndexStats:
    """Aggregated counters for one registry construction."""
    source: str  # file path or "<bundled>"
    total_rows: int  # data rows parsed (indexed or not)
    indexed: dict[TransportProtocol, int] = field(default_factory=dict)  # slots per protocol
    missing_port_rows: int = 0  # port cell empty / range / non-numeric
    missing_protocol_rows: int = 0  # protocol cell not tcp|udp|sctp|dccp
    overwritten_rows: int = 0  # rows replaced by a later row for the same slot
    elapsed_seconds: float = 0.0

    @property
    def total_indexed(self) -> int:
        return sum(self.indexed.values())

    def indexed_for(self, protocol: TransportProtocol) -> int:
        return self.indexed.get(protocol, 0)

    def to_dict(self) -> dict[str, object]:
        return {
            "source": self.source,
            "rows": self.total_rows,
            **{p.value: self.indexed_for(p) for p in TransportProtocol},
            "no_port": self.missing_port_rows,
            "no_protocol": self.missing_protocol_rows,
            "overwritten": self.overwritten_rows,
            "elapsed_sec": self.elapsed_seconds,
        }

    def to_json_line(self) -> str:
        """Serialize the counters as one JSON object keyed like the SUMMARY fields."""
        return json.dumps(self.to_dict(), ensure_ascii=False)
