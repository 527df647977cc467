from __future__ import annotations

from ..models.index_stats import IndexStats
from ..models.transport_protocol import TransportProtocol

"""SUMMARY line rendering for a constructed registry.

Format:
SUMMARY source={source} rows={rows} tcp={n} udp={n} sctp={n} dccp={n}
no_port={n} no_protocol={n} overwritten={n} elapsed_sec={elapsed}
(single line, fields separated by one space)
"""


def _format_seconds(seconds: float) -> str:
    # integers without a decimal point; tiny values without scientific notation
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return str(round(seconds, 3))


def render_summary_line(stats: IndexStats) -> str:
    """Render the SUMMARY line for an IndexStats snapshot.

    Examples:
        >>> from port_desc.models.index_stats import IndexStats
        >>> stats = IndexStats(source="<bundled>", total_rows=10,
        ...     indexed={TransportProtocol.TCP: 6, TransportProtocol.UDP: 3},
        ...     missing_port_rows=1, elapsed_seconds=2.0)
        >>> render_summary_line(stats)
        'SUMMARY source=<bundled> rows=10 tcp=6 udp=3 sctp=0 dccp=0 no_port=1 no_protocol=0 overwritten=0 elapsed_sec=2'
    """
    per_protocol = " ".join(
        f"{p.value}={stats.indexed_for(p)}" for p in TransportProtocol
    )
    # whitespace in a file path would break the key=value contract
    source = stats.source.replace(" ", "%20")
    return (
        f"SUMMARY source={source} "
        f"rows={stats.total_rows} "
        f"{per_protocol} "
        f"no_port={stats.missing_port_rows} "
        f"no_protocol={stats.missing_protocol_rows} "
        f"overwritten={stats.overwritten_rows} "
        f"elapsed_sec={_format_seconds(stats.elapsed_seconds)}"
    )
