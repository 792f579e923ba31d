# src/gre_backend/state.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Optional

from .config import STATE_PATH
from .models import TunnelConfig


def state_to_dict(t: TunnelConfig) -> dict:
    return {
        "role": t.role,
        "local_ip": t.local_ip,
        "remote_ip": t.remote_ip,
        "prefix": t.prefix,
        "interface": t.interface,
        "mtu": t.mtu,
    }


def dict_to_state(data: dict) -> TunnelConfig:
    t = TunnelConfig(
        role=data["role"],
        local_ip=data["local_ip"],
        remote_ip=data["remote_ip"],
        prefix=data["prefix"],
    )
    if "interface" in data:
        t.interface = data["interface"]
    if "mtu" in data:
        t.mtu = int(data["mtu"])
    return t


def load_state(path: Optional[Path] = None) -> Optional[TunnelConfig]:
    path = path or STATE_PATH
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return dict_to_state(data)


def save_state(t: TunnelConfig, path: Optional[Path] = None) -> None:
    path = path or STATE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(state_to_dict(t), f, indent=2)


def clear_state(path: Optional[Path] = None) -> bool:
    path = path or STATE_PATH
    if not path.exists():
        return False
    path.unlink()
    return True
