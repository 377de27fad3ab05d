from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from ..errors import CommandError
from .command import command_exists, prepend_path, run_cmd
from .net import download
from .probe import OsFamily, Platform
from .resolver import Dependency
from .shell_config import ensure_fnm_hook

logger = logging.getLogger(__name__)

FNM_INSTALL_URL = "https://fnm.vercel.app/install"
OPENCLAW_INSTALL_URL = "https://clawd.bot/install.sh"

# Installer scripts and package managers may take a while on slow links.
INSTALL_TIMEOUT_S = 900.0


def activate_fnm_env() -> None:
    """Load `fnm env` into this process so `node` resolves for later steps."""

    argv = ["fnm", "env", "--json"]
    r = run_cmd(argv)
    try:
        env = json.loads(r.stdout or "{}")
    except ValueError as e:
        raise CommandError(argv, r.returncode, f"unreadable output: {e}") from e
    if not isinstance(env, dict):
        raise CommandError(argv, r.returncode, "expected a JSON object")
    for key, value in env.items():
        os.environ[str(key)] = str(value)
    multishell = env.get("FNM_MULTISHELL_PATH")
    if multishell:
        prepend_path(str(Path(multishell) / "bin"))


def _fnm_install_node(version: str) -> None:
    activate_fnm_env()
    run_cmd(["fnm", "install", version], timeout_s=INSTALL_TIMEOUT_S)
    run_cmd(["fnm", "use", version])
    run_cmd(["fnm", "default", version])


def _run_script(url: str, *args: str) -> None:
    with tempfile.TemporaryDirectory(prefix="smartagent-") as tmp:
        script = download(url, Path(tmp) / "install.sh")
        run_cmd(["bash", str(script), *args], timeout_s=INSTALL_TIMEOUT_S)


# Node.js runtime


@dataclass(frozen=True)
class FnmStrategy:
    """Install Node with an fnm that is already on PATH."""

    version: str
    name: str = "fnm"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        if not command_exists("fnm"):
            logger.debug("fnm not on PATH")
            return False
        _fnm_install_node(self.version)
        return True


@dataclass(frozen=True)
class NvmStrategy:
    """Install Node with an existing nvm checkout (nvm is a shell function, so source it)."""

    version: str
    nvm_sh: Path
    name: str = "nvm"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        if not self.nvm_sh.is_file():
            logger.debug("nvm not found at %s", self.nvm_sh)
            return False
        script = (
            f'source "{self.nvm_sh}" && nvm install {self.version} >/dev/null '
            f"&& nvm alias default {self.version} >/dev/null && nvm which {self.version}"
        )
        r = run_cmd(["bash", "-c", script], timeout_s=INSTALL_TIMEOUT_S)
        lines = r.stdout.strip().splitlines()
        if lines:
            prepend_path(str(Path(lines[-1]).parent))
        return True


@dataclass(frozen=True)
class BootstrapFnmStrategy:
    """Install fnm itself (Homebrew on macOS, install script elsewhere), then Node."""

    version: str
    home: Path
    name: str = "fnm-bootstrap"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        logger.info("Installing fnm (Node version manager)...")
        if platform.os_family is OsFamily.MACOS and command_exists("brew"):
            run_cmd(["brew", "install", "fnm"], timeout_s=INSTALL_TIMEOUT_S)
        else:
            _run_script(FNM_INSTALL_URL, "--skip-shell")
            prepend_path(str(self.home / ".local" / "share" / "fnm"))

        _fnm_install_node(self.version)
        ensure_fnm_hook(self.home)
        return True


# OpenClaw framework


@dataclass(frozen=True)
class OfficialInstallerStrategy:
    url: str = OPENCLAW_INSTALL_URL
    name: str = "official-installer"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        _run_script(self.url)
        return True


@dataclass(frozen=True)
class NpmGlobalStrategy:
    package: str
    name: str = "npm"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        if not command_exists("npm"):
            logger.debug("npm not on PATH")
            return False
        run_cmd(["npm", "install", "-g", self.package], timeout_s=INSTALL_TIMEOUT_S)
        return True


# Everclaw plugin


@dataclass(frozen=True)
class ClawHubStrategy:
    package: str
    workspace: Path
    name: str = "clawhub"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        if not command_exists("clawhub"):
            logger.debug("clawhub not on PATH")
            return False
        self.workspace.mkdir(parents=True, exist_ok=True)
        run_cmd(
            ["clawhub", "install", self.package],
            cwd=str(self.workspace),
            timeout_s=INSTALL_TIMEOUT_S,
        )
        return True


@dataclass(frozen=True)
class GitCloneStrategy:
    repo_url: str
    dest: Path
    name: str = "git-clone"

    def attempt(self, platform: Platform, dependency: Dependency) -> bool:
        self.dest.parent.mkdir(parents=True, exist_ok=True)
        run_cmd(
            ["git", "clone", "--quiet", self.repo_url, str(self.dest)],
            timeout_s=INSTALL_TIMEOUT_S,
        )
        return True
