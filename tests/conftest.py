"""
Pytest configuration for the corosync parser tests
"""

import sys
from pathlib import Path

import pytest

# Ensure the parent directory is in the Python path for imports
parent_dir = Path(__file__).resolve().parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import corosync.env as env_config  # noqa: E402

# Ensure tests operate with runtime environment rather than .env overrides during imports
env_config.reload_env({"COROSYNC_FORCE_ENV_OVERRIDE": "false"})

RING_STATUS_OUTPUT = """Printing ring status.
Local node ID 1084780051
RING ID 0
\t\tid      = 10.0.0.1
\t\tstatus  = ring 0 active with no faults
RING ID 1
\t\tid      = 172.16.0.1
\t\tstatus  = ring 1 active with no faults"""

QUORUM_STATUS_OUTPUT = """Quorum information
------------------
Date:             Sun Sep 29 16:10:37 2019
Quorum provider:  corosync_votequorum
Nodes:            2
Node ID:          1084780051
Ring ID:          1084780051/44
Quorate:          Yes

Votequorum information
----------------------
Expected votes:   232
Highest expected: 22
Total votes:      21
Quorum:           421  
Flags:            2Node Quorate WaitForAll 

Membership information
----------------------
\tNodeid      Votes Name
1084780051          1 dma-dog-hana01 (local)
1084780052          1 dma-dog-hana02"""


@pytest.fixture
def ring_status_output() -> bytes:
    return RING_STATUS_OUTPUT.encode("utf-8")


@pytest.fixture
def quorum_status_output() -> bytes:
    return QUORUM_STATUS_OUTPUT.encode("utf-8")


@pytest.fixture(autouse=True)
def disable_force_env_override(monkeypatch):
    """Default tests to runtime environment visibility unless they explicitly opt in."""

    monkeypatch.setenv("COROSYNC_FORCE_ENV_OVERRIDE", "false")
    monkeypatch.delenv("COROSYNC_OUTPUT_ENCODING", raising=False)
    env_config.reload_env({"COROSYNC_FORCE_ENV_OVERRIDE": "false"})
    yield
    env_config.reload_env({"COROSYNC_FORCE_ENV_OVERRIDE": "false"})
