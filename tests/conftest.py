"""Pytest configuration"""

import subprocess
from unittest.mock import patch

import pytest

from gre_backend.models import IRAN, KHAREJ, TunnelConfig


@pytest.fixture
def iran_tunnel():
    return TunnelConfig(role=IRAN, local_ip="1.2.3.4", remote_ip="5.6.7.8", prefix="10.10.10")


@pytest.fixture
def kharej_tunnel():
    return TunnelConfig(role=KHAREJ, local_ip="5.6.7.8", remote_ip="1.2.3.4", prefix="10.10.10")


@pytest.fixture
def fake_run():
    """Replace subprocess.run; every command succeeds unless the test changes returncode."""
    with patch("gre_backend.system.shutil.which", return_value="/usr/bin/tool"), \
            patch("gre_backend.system.subprocess.run") as run:
        run.side_effect = lambda cmd, **kw: subprocess.CompletedProcess(cmd, 0, "", "")
        yield run
