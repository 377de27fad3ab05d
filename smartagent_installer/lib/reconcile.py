"""Inspect a previously installed plugin directory and decide how to treat it.

A skill directory can end up occupied by a different package that happens to
share the name (a registry namespace collision). Those impostors are
recognized by text in their marker file and removed so the real plugin can
be installed in their place. Source checkouts are updated; anything else is
left alone, since it may carry user changes.
"""

from __future__ import annotations

import enum
import logging
import shutil
from pathlib import Path
from typing import Iterable, Optional

from ..errors import CommandError
from .command import run_cmd

logger = logging.getLogger(__name__)

VCS_MARKER = ".git"
MARKER_FILE = "SKILL.md"


class Action(str, enum.Enum):
    ABSENT = "absent"
    NOOP = "noop"
    UPDATE_IN_PLACE = "update_in_place"
    RECREATE = "recreate"


def _read_marker(location: Path) -> Optional[str]:
    p = location / MARKER_FILE
    try:
        return p.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None


def matches_impostor(text: Optional[str], signatures: Iterable[str]) -> Optional[str]:
    """Return the first signature found in text, if any."""

    if not text:
        return None
    for sig in signatures:
        if sig and sig in text:
            return sig
    return None


def reconcile(location: Path, signatures: Iterable[str]) -> Action:
    if not location.exists():
        return Action.ABSENT

    if (location / VCS_MARKER).exists():
        return Action.UPDATE_IN_PLACE

    sig = matches_impostor(_read_marker(location), signatures)
    if sig is not None:
        logger.debug("Impostor signature %r found in %s", sig, location / MARKER_FILE)
        return Action.RECREATE

    return Action.NOOP


def apply_action(action: Action, location: Path) -> bool:
    """Carry out a reconcile decision.

    Returns False only when an in-place update failed; the existing revision
    is kept in that case.
    """

    if action is Action.UPDATE_IN_PLACE:
        logger.info("%s already installed, updating...", location.name)
        try:
            run_cmd(["git", "pull", "--quiet"], cwd=str(location))
        except CommandError as e:
            logger.warning("Could not update %s, keeping current revision (%s)", location, e.message)
            return False
        logger.info("%s updated ✓", location.name)
        return True

    if action is Action.RECREATE:
        logger.warning("Namespace collision detected, removing impostor at %s...", location)
        shutil.rmtree(location)
        return True

    return True
