from __future__ import annotations

import logging
from typing import List

from ..errors import FetchFailed
from ..lib.materialize import Materialized, materialize_remote
from ..pipeline import BootstrapResult, InstallCtx, Outcome, Policy

logger = logging.getLogger(__name__)


class ConfigureWorkspaceStep:
    step_id = "configuring_workspace"
    title = "Workspace"
    policy = Policy.CONTINUE

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        logger.info("Configuring SmartAgent workspace...")
        workspace = ctx.paths.workspace
        ctx.paths.memory_dir.mkdir(parents=True, exist_ok=True)

        manifest = ctx.workspace_manifest
        base_url = str(manifest.get("base_url") or "").rstrip("/")
        documents = [str(d) for d in manifest.get("documents") or []]

        created: List[str] = []
        kept: List[str] = []
        failed: List[str] = []
        for name in documents:
            try:
                status = materialize_remote(workspace / name, f"{base_url}/{name}")
            except (FetchFailed, OSError) as e:
                logger.warning("  Could not download %s (will use OpenClaw defaults)", name)
                logger.debug("  %s", e)
                failed.append(name)
                continue
            (created if status is Materialized.CREATED else kept).append(name)

        detail = f"created {len(created)}, kept {len(kept)}, failed {len(failed)}"
        if failed:
            return BootstrapResult(self.step_id, Outcome.DEGRADED, f"{detail} ({', '.join(failed)})")
        logger.info("Workspace configured ✓")
        return BootstrapResult(self.step_id, Outcome.OK, detail)
