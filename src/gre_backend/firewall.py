# src/gre_backend/firewall.py
from __future__ import annotations

import logging
from typing import List

from .system import run_cmd, _which

logger = logging.getLogger(__name__)

NAT_CHAINS = ("PREROUTING", "POSTROUTING")


# -----------------------------
# Règles
# -----------------------------

def nat_rules(iran_tunnel_ip: str, kharej_tunnel_ip: str) -> List[List[str]]:
    """
    Règles NAT du serveur Iran, sans l'action (-A / -D).
    Le premier élément est la chaîne.

    SSH (22/tcp) reste sur le serveur Iran, tout le reste part vers
    l'extrémité Kharej du tunnel.
    """
    return [
        ["PREROUTING", "-p", "tcp", "--dport", "22",
         "-j", "DNAT", "--to-destination", iran_tunnel_ip],
        ["PREROUTING", "-p", "tcp", "--dport", "1:65535",
         "-j", "DNAT", "--to-destination", f"{kharej_tunnel_ip}:1-65535"],
        ["PREROUTING", "-p", "udp", "--dport", "1:65535",
         "-j", "DNAT", "--to-destination", f"{kharej_tunnel_ip}:1-65535"],
        ["POSTROUTING", "-j", "MASQUERADE"],
    ]


def render_rule(rule: List[str], action: str = "-A") -> str:
    return " ".join(["iptables", "-t", "nat", action, *rule])


# -----------------------------
# Low-level helpers
# -----------------------------

def _iptables(*args: str, check: bool = True) -> bool:
    _which("iptables")
    return run_cmd(["iptables", *args], check=check).returncode == 0


# -----------------------------
# Nettoyage (best effort)
# -----------------------------

def delete_nat_rules(rules: List[List[str]]) -> int:
    """
    Supprime chaque règle si elle existe. Retourne le nombre supprimé.
    """
    deleted = 0
    for rule in rules:
        if _iptables("-t", "nat", "-D", *rule, check=False):
            deleted += 1
        else:
            logger.debug("rule not present: %s", render_rule(rule, "-D"))
    return deleted


def flush_nat_chains() -> List[str]:
    """
    Vide PREROUTING et POSTROUTING de la table nat.
    Retourne les chaînes effectivement vidées.
    """
    flushed = []
    for chain in NAT_CHAINS:
        if _iptables("-t", "nat", "-F", chain, check=False):
            flushed.append(chain)
        else:
            logger.warning("could not flush nat %s", chain)
    return flushed
