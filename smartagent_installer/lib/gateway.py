from __future__ import annotations

import logging
import time

from ..errors import CommandError, LaunchFailed
from .command import command_exists, run_cmd
from .env import DEFAULT_WEBCHAT_URL
from .probe import OsFamily, Platform

logger = logging.getLogger(__name__)


class Gateway:
    """The OpenClaw gateway service, driven through the `openclaw` CLI."""

    def __init__(self, *, binary: str = "openclaw", settle_s: float = 2.0) -> None:
        self.binary = binary
        self.settle_s = settle_s

    def is_running(self) -> bool:
        r = run_cmd([self.binary, "gateway", "status"], check=False)
        return r.ok

    def ensure_running(self) -> bool:
        """Start the gateway unless it already runs.

        Returns True when it was already running. Raises LaunchFailed.
        """

        if self.is_running():
            logger.info("Gateway already running")
            return True
        try:
            run_cmd([self.binary, "gateway", "start"])
        except CommandError as e:
            raise LaunchFailed("Could not start gateway automatically", detail=e.message) from e
        logger.info("Gateway started ✓")
        return False

    def endpoint_url(self) -> str:
        # Give the gateway a moment to initialize before asking for its URL.
        if self.settle_s:
            time.sleep(self.settle_s)
        r = run_cmd([self.binary, "webchat", "url"], check=False)
        url = r.stdout.strip().splitlines()[0].strip() if r.ok and r.stdout.strip() else ""
        return url or DEFAULT_WEBCHAT_URL


def open_url(url: str, platform: Platform) -> None:
    """Best-effort: hand the URL to the desktop's default handler."""

    if platform.os_family is OsFamily.MACOS:
        argv = ["open", url]
    elif command_exists("xdg-open"):
        argv = ["xdg-open", url]
    else:
        return
    r = run_cmd(argv, check=False)
    if not r.ok:
        logger.debug("Could not open %s (%s)", url, r.returncode)
