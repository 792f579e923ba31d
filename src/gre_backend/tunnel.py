# src/gre_backend/tunnel.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from .config import BOOT_SCRIPT_PATH, LEGACY_PREFIX, TUNNEL_INTERFACE
from .config_builder import render_boot_script
from .firewall import delete_nat_rules, flush_nat_chains, nat_rules
from .models import KHAREJ, TeardownReport, TunnelConfig
from .state import clear_state, load_state, save_state
from .system import _which, run_cmd

logger = logging.getLogger(__name__)


# ---------- Script de boot ----------

def write_boot_script(t: TunnelConfig, path: Optional[Path] = None) -> Path:
    """
    Écrit le script de boot (/etc/rc.local par défaut) et le rend exécutable.
    """
    path = path or BOOT_SCRIPT_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    with path.open("w", encoding="utf-8") as f:
        f.write(render_boot_script(t))
    path.chmod(0o755)
    logger.info("boot script written: %s", path)
    return path


def run_boot_script(path: Optional[Path] = None) -> None:
    path = path or BOOT_SCRIPT_PATH
    _which("bash")
    proc = run_cmd(["bash", str(path)], check=False)
    if proc.returncode != 0:
        raise RuntimeError(
            f"Failed to execute {path} (exit {proc.returncode}): {proc.stderr.strip()}"
        )


def configure(
    t: TunnelConfig,
    boot_path: Optional[Path] = None,
    state_path: Optional[Path] = None,
) -> Path:
    """
    Écrit le script, l'exécute tout de suite, puis mémorise le tunnel.
    """
    path = write_boot_script(t, boot_path)
    run_boot_script(path)
    save_state(t, state_path)
    return path


# ---------- Suppression ----------

def remove_tunnel(
    boot_path: Optional[Path] = None,
    state_path: Optional[Path] = None,
) -> TeardownReport:
    boot_path = boot_path or BOOT_SCRIPT_PATH
    report = TeardownReport()

    try:
        previous = load_state(state_path)
    except (ValueError, KeyError) as e:
        # JSONDecodeError hérite de ValueError
        logger.warning("unreadable state file, falling back to legacy rules: %s", e)
        report.notes.append(f"Unreadable state file ignored: {e}")
        previous = None

    iface = previous.interface if previous else TUNNEL_INTERFACE
    try:
        _which("ip")
        if run_cmd(["ip", "tunnel", "del", iface], check=False).returncode == 0:
            report.tunnel_removed = True
        else:
            report.notes.append(f"No {iface} tunnel found or already removed.")
    except FileNotFoundError as e:
        report.notes.append(str(e))

    try:
        # Règles exactes du dernier tunnel, sinon l'ancien préfixe codé en dur
        if previous is None:
            prefix = LEGACY_PREFIX
            report.rules_deleted = delete_nat_rules(nat_rules(f"{prefix}.1", f"{prefix}.2"))
        elif previous.role != KHAREJ:
            report.rules_deleted = delete_nat_rules(
                nat_rules(previous.iran_tunnel_ip, previous.kharej_tunnel_ip)
            )
        report.chains_flushed = flush_nat_chains()
    except FileNotFoundError as e:
        report.notes.append(str(e))

    if boot_path.exists():
        boot_path.unlink()
        report.boot_script_removed = True
    else:
        report.notes.append(f"{boot_path} does not exist.")

    clear_state(state_path)
    return report
