# src/gre_backend/validation.py
from __future__ import annotations
import re

_IPV4_RE = re.compile(r"[0-9]{1,3}(\.[0-9]{1,3}){3}")
_PREFIX_RE = re.compile(r"[0-9]{1,3}(\.[0-9]{1,3}){2}")


def validate_ipv4(ip: str) -> str:
    """
    Vérifie une adresse IPv4 pointée (4 octets, 0-255).
    Retourne l'adresse nettoyée, lève ValueError sinon.
    """
    ip = ip.strip()
    if not _IPV4_RE.fullmatch(ip):
        raise ValueError(f"Invalid IPv4 address: {ip}")
    if any(int(octet) > 255 for octet in ip.split(".")):
        raise ValueError(f"Invalid IPv4 address: {ip}")
    return ip


def validate_prefix(prefix: str) -> str:
    """
    Vérifie un préfixe de tunnel : les 3 premiers octets, ex "10.10.10".
    """
    prefix = prefix.strip()
    if not _PREFIX_RE.fullmatch(prefix):
        raise ValueError("Invalid prefix format. Use three octets like 10.10.10 or 192.168.77")
    if any(int(octet) > 255 for octet in prefix.split(".")):
        raise ValueError("Invalid prefix: each octet must be 0-255")
    return prefix
