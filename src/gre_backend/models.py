# src/gre_backend/models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .config import TUNNEL_INTERFACE, TUNNEL_MTU

IRAN = "iran"
KHAREJ = "kharej"
ROLES = (IRAN, KHAREJ)


@dataclass
class TunnelConfig:
    role: str              # "iran" ou "kharej"
    local_ip: str          # IP publique de ce serveur
    remote_ip: str         # IP publique de l'autre serveur
    prefix: str            # ex "10.10.10"
    interface: str = TUNNEL_INTERFACE
    mtu: int = TUNNEL_MTU

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown role '{self.role}'")

    @property
    def iran_tunnel_ip(self) -> str:
        return f"{self.prefix}.1"

    @property
    def kharej_tunnel_ip(self) -> str:
        return f"{self.prefix}.2"

    @property
    def local_tunnel_ip(self) -> str:
        return self.iran_tunnel_ip if self.role == IRAN else self.kharej_tunnel_ip

    @property
    def remote_tunnel_ip(self) -> str:
        return self.kharej_tunnel_ip if self.role == IRAN else self.iran_tunnel_ip

    @property
    def iran_ip(self) -> str:
        return self.local_ip if self.role == IRAN else self.remote_ip

    @property
    def kharej_ip(self) -> str:
        return self.remote_ip if self.role == IRAN else self.local_ip


@dataclass
class TeardownReport:
    tunnel_removed: bool = False
    rules_deleted: int = 0
    chains_flushed: List[str] = field(default_factory=list)
    boot_script_removed: bool = False
    notes: List[str] = field(default_factory=list)
