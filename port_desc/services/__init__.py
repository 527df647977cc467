"""Index building, registry and summary services."""

from .port_index import build_port_indexes
from .registry import PortRegistry
from .summary import render_summary_line

__all__ = [
    "PortRegistry",
    "build_port_indexes",
    "render_summary_line",
]
