from __future__ import annotations

import logging

from ..dependencies import EVERCLAW
from ..lib.reconcile import Action, apply_action, reconcile
from ..lib.resolver import resolve
from ..pipeline import BootstrapResult, InstallCtx, Outcome, Policy
from .step_20_resolve_runtime import describe

logger = logging.getLogger(__name__)


class ResolvePluginStep:
    step_id = "resolving_plugin"
    title = "Everclaw"
    policy = Policy.CONTINUE

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        location = ctx.paths.skill_dir
        action = reconcile(location, ctx.impostor_signatures)
        logger.debug("Reconcile %s -> %s", location, action.value)

        applied = apply_action(action, location)

        resolution = resolve(ctx.dependencies[EVERCLAW], ctx.require_platform())

        if action is Action.UPDATE_IN_PLACE and not applied:
            return BootstrapResult(self.step_id, Outcome.DEGRADED, "update failed, kept existing revision")
        if action is Action.RECREATE:
            return BootstrapResult(self.step_id, Outcome.OK, f"impostor replaced, {describe(resolution)}")
        if action is Action.UPDATE_IN_PLACE:
            return BootstrapResult(self.step_id, Outcome.OK, "updated to latest revision")
        return BootstrapResult(self.step_id, Outcome.OK, describe(resolution))
