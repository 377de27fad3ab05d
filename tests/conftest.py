from __future__ import annotations

from pathlib import Path

import pytest

from smartagent_installer.lib.env import Paths
from smartagent_installer.lib.probe import Arch, OsFamily, Platform


@pytest.fixture
def paths(tmp_path: Path) -> Paths:
    home = tmp_path / "home"
    home.mkdir()
    openclaw_home = home / ".openclaw"
    return Paths(
        home=home,
        openclaw_home=openclaw_home,
        workspace=openclaw_home / "workspace",
        log_path=openclaw_home / "logs" / "smartagent-install.log",
    )


@pytest.fixture
def linux() -> Platform:
    return Platform(os_family=OsFamily.LINUX, arch=Arch.X86_64)


@pytest.fixture
def macos() -> Platform:
    return Platform(os_family=OsFamily.MACOS, arch=Arch.ARM64)
