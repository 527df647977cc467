from __future__ import annotations

import pytest

from port_desc.models.transport_protocol import TransportProtocol


@pytest.mark.parametrize(
    "text,expected",
    [
        ("tcp", TransportProtocol.TCP),
        ("UDP", TransportProtocol.UDP),
        ("Sctp", TransportProtocol.SCTP),
        ("dCCP", TransportProtocol.DCCP),
    ],
)
def test_from_text_is_case_insensitive(text, expected):
    assert TransportProtocol.from_text(text) is expected


@pytest.mark.parametrize("text", ["", " tcp", "tcp ", "tcp-mux", "icmp", "6", None, 6])
def test_from_text_unrecognised_is_none(text):
    assert TransportProtocol.from_text(text) is None


def test_members_and_canonical_values():
    assert [p.value for p in TransportProtocol] == ["tcp", "udp", "sctp", "dccp"]
    assert str(TransportProtocol.SCTP) == "sctp"


def test_equality_by_identity():
    assert TransportProtocol("tcp") is TransportProtocol.TCP
    assert TransportProtocol.TCP != TransportProtocol.UDP
