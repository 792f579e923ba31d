# src/gre_backend/system.py
from __future__ import annotations
import logging
import os
import shutil
import subprocess
from typing import List

logger = logging.getLogger(__name__)


def is_root() -> bool:
    return hasattr(os, "geteuid") and os.geteuid() == 0


def _which(tool: str) -> str:
    path = shutil.which(tool)
    if path is None:
        raise FileNotFoundError(f"'{tool}' not found in PATH")
    return path


def run_cmd(cmd: List[str], check: bool = True) -> subprocess.CompletedProcess:
    """
    Lance une commande et capture stdout/stderr.
    Avec check=True, un code retour non nul lève RuntimeError.
    """
    logger.debug("run: %s", " ".join(cmd))
    proc = subprocess.run(cmd, text=True, capture_output=True)
    if proc.returncode != 0:
        logger.debug("exit %s: %s", proc.returncode, proc.stderr.strip())
        if check:
            raise RuntimeError(
                f"Command failed ({proc.returncode}): {' '.join(cmd)}: {proc.stderr.strip()}"
            )
    return proc
