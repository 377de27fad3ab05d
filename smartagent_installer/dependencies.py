from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from .lib.command import command_exists, run_cmd
from .lib.env import EVERCLAW_CLAWHUB_NAME, EVERCLAW_REPO, NODE_MIN_VERSION, Paths
from .lib.resolver import Dependency
from .lib.strategies import (
    BootstrapFnmStrategy,
    ClawHubStrategy,
    FnmStrategy,
    GitCloneStrategy,
    NpmGlobalStrategy,
    NvmStrategy,
    OfficialInstallerStrategy,
)

NODE = "node"
OPENCLAW = "openclaw"
EVERCLAW = "everclaw"


def detect_node() -> Optional[str]:
    r = run_cmd(["node", "-v"], check=False)
    if not r.ok:
        return None
    return r.stdout.strip() or None


def detect_openclaw() -> Optional[str]:
    if not command_exists("openclaw"):
        return None
    r = run_cmd(["openclaw", "--version"], check=False)
    lines = r.stdout.strip().splitlines() if r.ok else []
    return lines[0].strip() if lines else "unknown"


def detect_skill(location: Path) -> Optional[str]:
    return "installed" if location.is_dir() else None


def build_dependencies(paths: Paths) -> Dict[str, Dependency]:
    """The fixed table of managed dependencies, rebuilt on every run."""

    return {
        NODE: Dependency(
            name="Node.js",
            detect=detect_node,
            min_version=NODE_MIN_VERSION,
            strategies=[
                FnmStrategy(version=NODE_MIN_VERSION),
                NvmStrategy(version=NODE_MIN_VERSION, nvm_sh=paths.home / ".nvm" / "nvm.sh"),
                BootstrapFnmStrategy(version=NODE_MIN_VERSION, home=paths.home),
            ],
        ),
        OPENCLAW: Dependency(
            name="OpenClaw",
            detect=detect_openclaw,
            strategies=[
                OfficialInstallerStrategy(),
                NpmGlobalStrategy(package="openclaw"),
            ],
        ),
        EVERCLAW: Dependency(
            name="Everclaw",
            detect=lambda: detect_skill(paths.skill_dir),
            strategies=[
                ClawHubStrategy(package=EVERCLAW_CLAWHUB_NAME, workspace=paths.workspace),
                GitCloneStrategy(repo_url=EVERCLAW_REPO, dest=paths.skill_dir),
            ],
        ),
    }
