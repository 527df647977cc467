from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from importlib import resources
from pathlib import Path

import pytest

from port_desc import PortRegistry, TransportProtocol

TCP = TransportProtocol.TCP
UDP = TransportProtocol.UDP


@pytest.fixture(scope="module")
def default_registry() -> PortRegistry:
    return PortRegistry.default()


def test_default_construction_succeeds(default_registry: PortRegistry):
    stats = default_registry.stats
    assert stats.source == "<bundled>"
    assert stats.total_rows > 0
    for protocol in TransportProtocol:
        assert stats.indexed_for(protocol) == len(default_registry.ports(protocol))
    assert stats.indexed_for(TCP) > 0
    assert stats.indexed_for(UDP) > 0


def test_default_docstring_states_excerpt():
    assert "excerpt" in PortRegistry.default.__doc__


def test_www_http_on_port_80(default_registry: PortRegistry):
    assert default_registry.lookup_service_name(80, TCP) == "www-http"
    assert default_registry.lookup_service_name(80, UDP) == "www-http"
    assert default_registry.lookup_service_name(80, TransportProtocol.SCTP) == "http"


def test_well_known_entries(default_registry: PortRegistry):
    assert default_registry.lookup_service_name(22, TCP) == "ssh"
    assert default_registry.lookup_service_name(53, UDP) == "domain"
    assert default_registry.lookup_description(443, TCP) == "http protocol over TLS/SSL"
    assert default_registry.lookup_service_name(1701, TCP) == "l2f"
    assert default_registry.lookup_service_name(1701, UDP) == "l2tp"
    assert default_registry.lookup_service_name(9, TransportProtocol.DCCP) == "discard"


def test_every_indexed_slot_matches_its_key(default_registry: PortRegistry):
    for protocol in TransportProtocol:
        for port in default_registry.ports(protocol):
            entry = default_registry.lookup_entry(port, protocol)
            assert entry.port_number == port
            assert entry.transport_protocol is protocol


def test_absent_slots(default_registry: PortRegistry):
    assert default_registry.lookup_entry(6379, UDP) is None
    assert default_registry.lookup_service_name(6379, UDP) == ""
    assert default_registry.lookup_description(6379, UDP) == ""


def test_range_rows_are_not_indexed(default_registry: PortRegistry):
    for port in (6000, 6063, 6665, 8000, 49152, 65535):
        assert default_registry.lookup_all(port) == {}


def test_unrecognised_protocol_does_not_overwrite(default_registry: PortRegistry):
    # "rbsp,2,TCP-MUX" must not replace compressnet on port 2
    assert default_registry.lookup_service_name(2, TCP) == "compressnet"


def test_reserved_port_zero(default_registry: PortRegistry):
    entry = default_registry.lookup_entry(0, TCP)
    assert entry is not None
    assert entry.service_name == ""
    assert entry.description == "Reserved"


def test_from_csv_file_matches_default(default_registry: PortRegistry):
    with resources.as_file(
        resources.files("port_desc.assets").joinpath("service-names-port-numbers.csv")
    ) as path:
        from_file = PortRegistry.from_csv_file(Path(path))
    for protocol in TransportProtocol:
        assert from_file.ports(protocol) == default_registry.ports(protocol)
        for port in default_registry.ports(protocol):
            assert from_file.lookup_entry(port, protocol) == default_registry.lookup_entry(port, protocol)


def test_concurrent_reads(default_registry: PortRegistry):
    queries = [(port, protocol) for port in range(0, 2000) for protocol in TransportProtocol]
    expected = [default_registry.lookup_entry(p, proto) for p, proto in queries]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda q: default_registry.lookup_entry(*q), queries))
    assert results == expected
