# src/gre_backend/config.py
"""Constantes du provisionneur GRE."""
import os
from pathlib import Path

# Script exécuté au boot
BOOT_SCRIPT_PATH = Path(os.environ.get("GRETUN_BOOT_SCRIPT", "/etc/rc.local"))

# Dernier tunnel appliqué (sert au nettoyage)
STATE_PATH = Path(os.environ.get("GRETUN_STATE_FILE", "/var/lib/gretun/state.json"))

# Tunnel
TUNNEL_INTERFACE = "GRE"
TUNNEL_MTU = 1420
TUNNEL_MASK = 30

# Ancien préfixe codé en dur, nettoyé quand aucun état n'est enregistré
LEGACY_PREFIX = "172.16.1"

LOG_LEVEL = os.environ.get("GRETUN_LOG_LEVEL", "WARNING").upper()
