"""Tests for tunnel state persistence."""

import json

from gre_backend.state import clear_state, load_state, save_state


def test_roundtrip(tmp_path, iran_tunnel):
    path = tmp_path / "sub" / "state.json"
    save_state(iran_tunnel, path)

    assert json.loads(path.read_text())["prefix"] == "10.10.10"
    assert load_state(path) == iran_tunnel


def test_load_missing(tmp_path):
    assert load_state(tmp_path / "missing.json") is None


def test_load_without_optional_fields(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({
        "role": "kharej", "local_ip": "5.6.7.8", "remote_ip": "1.2.3.4", "prefix": "10.1.1",
    }))
    t = load_state(path)
    assert t.interface == "GRE"
    assert t.local_tunnel_ip == "10.1.1.2"


def test_clear(tmp_path, iran_tunnel):
    path = tmp_path / "state.json"
    save_state(iran_tunnel, path)
    assert clear_state(path) is True
    assert not path.exists()
    assert clear_state(path) is False
