from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

FNM_MARKER = "fnm env"

_RC_CANDIDATES = (".zshrc", ".bashrc")


def find_shell_rc(home: Path) -> Optional[Path]:
    for name in _RC_CANDIDATES:
        p = home / name
        if p.is_file():
            return p
    return None


def fnm_hook_line(shell: Optional[str] = None) -> str:
    shell_name = os.path.basename(shell or os.environ.get("SHELL") or "bash")
    return f'eval "$(fnm env --use-on-cd --shell {shell_name})"'


def ensure_fnm_hook(home: Path, shell: Optional[str] = None) -> Optional[Path]:
    """Append the fnm activation line to the user's shell rc, once.

    Returns the rc file that was changed, or None when nothing was written
    (no rc file, or a hook is already present).
    """

    rc = find_shell_rc(home)
    if rc is None:
        return None

    if FNM_MARKER in rc.read_text(encoding="utf-8", errors="ignore"):
        return None

    with rc.open("a", encoding="utf-8") as f:
        f.write("\n" + fnm_hook_line(shell) + "\n")
    logger.info("Added fnm to %s", rc)
    return rc
