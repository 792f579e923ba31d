"""Tests for TunnelConfig."""

import pytest

from gre_backend.models import TunnelConfig


def test_iran_endpoints(iran_tunnel):
    assert iran_tunnel.local_tunnel_ip == "10.10.10.1"
    assert iran_tunnel.remote_tunnel_ip == "10.10.10.2"
    assert iran_tunnel.iran_ip == "1.2.3.4"
    assert iran_tunnel.kharej_ip == "5.6.7.8"


def test_kharej_endpoints(kharej_tunnel):
    assert kharej_tunnel.local_tunnel_ip == "10.10.10.2"
    assert kharej_tunnel.remote_tunnel_ip == "10.10.10.1"
    assert kharej_tunnel.iran_ip == "1.2.3.4"
    assert kharej_tunnel.kharej_ip == "5.6.7.8"


def test_defaults(iran_tunnel):
    assert iran_tunnel.interface == "GRE"
    assert iran_tunnel.mtu == 1420


def test_unknown_role():
    with pytest.raises(ValueError):
        TunnelConfig(role="germany", local_ip="1.1.1.1", remote_ip="2.2.2.2", prefix="10.0.0")
