from __future__ import annotations

import logging

from ..lib.probe import probe
from ..pipeline import BootstrapResult, InstallCtx, Outcome, Policy

logger = logging.getLogger(__name__)


class ProbePlatformStep:
    step_id = "probing"
    title = None
    policy = Policy.FATAL

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        ctx.platform = probe()
        return BootstrapResult(self.step_id, Outcome.OK, str(ctx.platform))
