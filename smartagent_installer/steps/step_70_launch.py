from __future__ import annotations

import logging

from ..lib.gateway import open_url
from ..pipeline import BootstrapResult, InstallCtx, Outcome, Policy

logger = logging.getLogger(__name__)


class LaunchStep:
    step_id = "launching"
    title = "Launch"
    policy = Policy.TERMINAL

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        logger.info("Starting SmartAgent...")
        already = ctx.gateway.ensure_running()
        ctx.endpoint = ctx.gateway.endpoint_url()
        open_url(ctx.endpoint, ctx.require_platform())
        state = "already running" if already else "started"
        return BootstrapResult(self.step_id, Outcome.OK, f"gateway {state} at {ctx.endpoint}")
