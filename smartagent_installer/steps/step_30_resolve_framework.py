from __future__ import annotations

from ..dependencies import OPENCLAW
from ..pipeline import Policy
from .step_20_resolve_runtime import ResolveRuntimeStep


class ResolveFrameworkStep(ResolveRuntimeStep):
    step_id = "resolving_framework"
    title = "OpenClaw"
    policy = Policy.FATAL
    dependency_key = OPENCLAW
