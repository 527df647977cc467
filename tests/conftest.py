# Shared pytest fixtures
from __future__ import annotations
import csv
import io
import tempfile
from pathlib import Path
import pytest

from port_desc.logging.init import reset_logging

REGISTRY_HEADER = [
    "Service Name",
    "Port Number",
    "Transport Protocol",
    "Description",
    "Assignee",
    "Contact",
    "Registration Date",
    "Modification Date",
    "Reference",
    "Service Code",
    "Unauthorized Use Reported",
    "Assignment Notes",
]


def _render_csv(rows: list[list[str]], header: list[str]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(header)
    for row in rows:
        # short rows are padded so tests only spell out the leading columns
        writer.writerow(list(row) + [""] * (len(header) - len(row)))
    return buf.getvalue()


@pytest.fixture()
def make_csv():
    """Factory: rows of [service, port, protocol, description, ...] -> registry CSV text."""
    def _make(rows: list[list[str]], header: list[str] | None = None) -> str:
        return _render_csv(rows, header or REGISTRY_HEADER)
    return _make


@pytest.fixture()
def sample_csv_text(make_csv) -> str:
    return make_csv([
        ["", "0", "tcp", "Reserved"],
        ["echo", "7", "tcp", "Echo"],
        ["echo", "7", "udp", "Echo"],
        ["discard", "9", "sctp", "Discard"],
        ["discard", "9", "dccp", "Discard"],
        ["http", "80", "tcp", "World Wide Web HTTP"],
        ["www", "80", "tcp", "World Wide Web HTTP"],
        ["www-http", "80", "tcp", "World Wide Web HTTP"],
        ["x11", "6000-6063", "tcp", "X Window System"],
        ["airplay", "", "tcp", "Apple AirPlay"],
        ["rbsp", "2", "TCP-MUX", "Reserved"],
        ["Syslog", "514", "UDP", "Remote logging, RFC 5426"],
    ])


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def write_csv(temp_workdir: Path, sample_csv_text: str) -> Path:
    path = temp_workdir / "data" / "service-names-port-numbers.csv"
    path.write_text(sample_csv_text, encoding="utf-8")
    return path


@pytest.fixture()
def sample_config_yaml() -> str:
    return """dataset_path: ./data/service-names-port-numbers.csv
default_protocol: udp
log_level: INFO
output_format: text
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "port_desc.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()
