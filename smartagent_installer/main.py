from __future__ import annotations

import argparse
import logging
from typing import Optional

from . import report
from .dependencies import build_dependencies
from .logging_utils import configure_logging
from .lib.env import Paths
from .lib.gateway import Gateway
from .lib.manifests import load_impostor_signatures, load_workspace_manifest
from .pipeline import InstallCtx, PipelineResult, run_pipeline
from .steps import (
    BootstrapInferenceStep,
    ConfigureWorkspaceStep,
    LaunchStep,
    ProbePlatformStep,
    ResolveFrameworkStep,
    ResolvePluginStep,
    ResolveRuntimeStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        ProbePlatformStep(),
        ResolveRuntimeStep(),
        ResolveFrameworkStep(),
        ResolvePluginStep(),
        BootstrapInferenceStep(),
        ConfigureWorkspaceStep(),
        LaunchStep(),
    ]


def build_context(paths: Paths) -> InstallCtx:
    return InstallCtx(
        paths=paths,
        dependencies=build_dependencies(paths),
        gateway=Gateway(),
        impostor_signatures=load_impostor_signatures(),
        workspace_manifest=load_workspace_manifest(),
    )


def run(*, paths: Optional[Paths] = None) -> PipelineResult:
    """Run the installer once and print the end-of-run report."""

    paths = paths or Paths.from_environ()
    actual_log_path = configure_logging(log_path=str(paths.log_path))
    logger.debug("Workspace=%s log=%s", paths.workspace, actual_log_path)

    report.banner()
    ctx = build_context(paths)

    try:
        result = run_pipeline(ctx=ctx, steps=build_steps())
    except Exception:
        logger.exception("Installer failed")
        raise

    report.final(result, platform=ctx.platform, endpoint=ctx.endpoint)
    logger.debug("Full log: %s", actual_log_path)
    return result


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="smartagent-install",
        description=(
            "Install and start SmartAgent: Node.js, OpenClaw, Everclaw and a "
            "default Morpheus inference config. Safe to re-run. Honors "
            "OPENCLAW_HOME, OPENCLAW_WORKSPACE and SMARTAGENT_LOG."
        ),
    )
    p.parse_args(argv)

    return run().exit_code


if __name__ == "__main__":
    raise SystemExit(main())
