# src/gre_backend/config_builder.py
from __future__ import annotations

from .config import TUNNEL_MASK
from .firewall import nat_rules, render_rule
from .models import IRAN, KHAREJ, TunnelConfig

HEADER_TEMPLATE = """#!/bin/bash

# Enable IPv4 forwarding
sysctl -w net.ipv4.conf.all.forwarding=1

# Configure GRE tunnel
ip tunnel add {iface} mode gre {endpoints}
ip addr add {tunnel_ip}/{mask} dev {iface}
ip link set {iface} mtu {mtu}
ip link set {iface} up
"""

NAT_TEMPLATE = """
# Configure iptables NAT rules
{rules}
"""

FOOTER = """
exit 0
"""


def _endpoints(t: TunnelConfig) -> str:
    # Iran : remote puis local, Kharej : local puis remote
    if t.role == IRAN:
        return f"remote {t.remote_ip} local {t.local_ip}"
    return f"local {t.local_ip} remote {t.remote_ip}"


def render_boot_script(t: TunnelConfig) -> str:
    script = HEADER_TEMPLATE.format(
        iface=t.interface,
        endpoints=_endpoints(t),
        tunnel_ip=t.local_tunnel_ip,
        mask=TUNNEL_MASK,
        mtu=t.mtu,
    )

    if t.role == IRAN:
        rules = nat_rules(t.iran_tunnel_ip, t.kharej_tunnel_ip)
        script += NAT_TEMPLATE.format(
            rules="\n".join(render_rule(r) for r in rules)
        )

    return script + FOOTER


def counterpart_command(t: TunnelConfig, prog: str = "gretun") -> str:
    """
    Ligne de commande à lancer sur l'autre serveur pour configurer l'autre extrémité du tunnel.
    """
    other = KHAREJ if t.role == IRAN else IRAN
    return f"{prog} {other} --local {t.remote_ip} --remote {t.local_ip} --prefix {t.prefix}"
