from __future__ import annotations

import logging

from ..dependencies import NODE
from ..lib.resolver import Resolution, resolve
from ..pipeline import BootstrapResult, InstallCtx, Outcome, Policy

logger = logging.getLogger(__name__)


def describe(resolution: Resolution) -> str:
    version = resolution.version or "unknown version"
    if resolution.fast_path:
        return f"{version} (already installed)"
    return f"{version} (installed via {resolution.installed_by})"


class ResolveRuntimeStep:
    step_id = "resolving_runtime"
    title = "Node.js"
    policy = Policy.FATAL
    dependency_key = NODE

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        dependency = ctx.dependencies[self.dependency_key]
        resolution = resolve(dependency, ctx.require_platform())
        return BootstrapResult(self.step_id, Outcome.OK, describe(resolution))
