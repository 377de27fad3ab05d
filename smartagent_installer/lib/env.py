from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

EVERCLAW_REPO = "https://github.com/profbernardoj/everclaw.git"
EVERCLAW_CLAWHUB_NAME = "everclaw-inference"
NODE_MIN_VERSION = "22"
DEFAULT_WEBCHAT_URL = "http://localhost:4200"


@dataclass(frozen=True)
class Paths:
    home: Path
    openclaw_home: Path
    workspace: Path
    log_path: Path

    @property
    def skill_dir(self) -> Path:
        return self.workspace / "skills" / "everclaw"

    @property
    def memory_dir(self) -> Path:
        return self.workspace / "memory"

    @property
    def gateway_config(self) -> Path:
        return self.openclaw_home / "openclaw.json"

    @property
    def bootstrap_script(self) -> Path:
        return self.skill_dir / "scripts" / "bootstrap-gateway.mjs"

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Paths":
        env = os.environ if environ is None else environ
        home = Path(env.get("HOME") or Path.home()).expanduser()
        openclaw_home = Path(env.get("OPENCLAW_HOME") or home / ".openclaw").expanduser()
        workspace = Path(env.get("OPENCLAW_WORKSPACE") or openclaw_home / "workspace").expanduser()
        log_path = Path(env.get("SMARTAGENT_LOG") or openclaw_home / "logs" / "smartagent-install.log").expanduser()
        return cls(home=home, openclaw_home=openclaw_home, workspace=workspace, log_path=log_path)
