from __future__ import annotations

import logging

from ..lib.command import run_cmd
from ..lib.materialize import Materialized, default_gateway_config, materialize, render_gateway_config
from ..pipeline import BootstrapResult, InstallCtx, Outcome, Policy

logger = logging.getLogger(__name__)

PRIMARY_MODEL = "mor-gateway/kimi-k2.5"


class BootstrapInferenceStep:
    """Configure decentralized inference through the Morpheus API Gateway.

    The plugin ships a bootstrap script that does this properly. When the
    script is missing or fails, a minimal provider config is written instead
    (only if the user has no config yet).
    """

    step_id = "bootstrapping_inference"
    title = "Decentralized Inference"
    policy = Policy.CONTINUE

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        script = ctx.paths.bootstrap_script

        if script.is_file():
            r = run_cmd(["node", str(script)], check=False)
            if r.ok:
                logger.info("Decentralized inference configured ✓")
                logger.info("Using: %s (no API key needed)", PRIMARY_MODEL)
                return BootstrapResult(self.step_id, Outcome.OK, f"bootstrap script succeeded, using {PRIMARY_MODEL}")
            logger.warning("Gateway bootstrap script returned an error (%s)", r.returncode)
            reason = f"bootstrap script exited {r.returncode}"
        else:
            logger.warning("Bootstrap script not found, configuring manually...")
            reason = "bootstrap script not found"

        written = materialize(ctx.paths.gateway_config, render_gateway_config(default_gateway_config()))
        if written is Materialized.CREATED:
            logger.info("Default config written ✓")
            return BootstrapResult(self.step_id, Outcome.DEGRADED, f"{reason}; default config written")
        return BootstrapResult(self.step_id, Outcome.DEGRADED, f"{reason}; existing config preserved")
