from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .errors import InstallerError
from .lib.env import Paths
from .lib.gateway import Gateway
from .lib.probe import Platform
from .lib.resolver import Dependency

logger = logging.getLogger(__name__)


class Outcome(str, enum.Enum):
    OK = "ok"
    DEGRADED = "degraded"
    FAILED = "failed"


class Policy(str, enum.Enum):
    # Failure stops the run with a non-zero exit.
    FATAL = "fatal"
    # Failure is recorded; the next step runs.
    CONTINUE = "continue"
    # Failure stops the run, but the install still counts as complete.
    TERMINAL = "terminal"


@dataclass(frozen=True)
class BootstrapResult:
    step_id: str
    outcome: Outcome
    detail: str = ""


@dataclass
class InstallCtx:
    paths: Paths
    dependencies: Dict[str, Dependency]
    gateway: Gateway
    impostor_signatures: List[str]
    workspace_manifest: Dict[str, Any]
    platform: Optional[Platform] = None
    endpoint: Optional[str] = None

    def require_platform(self) -> Platform:
        if self.platform is None:
            raise RuntimeError("platform not probed yet")
        return self.platform


class Step(Protocol):
    """A single idempotent step."""

    step_id: str
    title: Optional[str]
    policy: Policy

    def run(self, ctx: InstallCtx) -> BootstrapResult:
        ...


@dataclass
class PipelineResult:
    results: List[BootstrapResult] = field(default_factory=list)
    failed_step: Optional[str] = None
    stopped_at: Optional[str] = None

    @property
    def fatal(self) -> bool:
        return self.failed_step is not None

    @property
    def exit_code(self) -> int:
        return 1 if self.fatal else 0

    @property
    def degraded(self) -> List[BootstrapResult]:
        return [r for r in self.results if r.outcome is not Outcome.OK]

    def outcome_of(self, step_id: str) -> Optional[Outcome]:
        for r in self.results:
            if r.step_id == step_id:
                return r.outcome
        return None


def run_pipeline(*, ctx: InstallCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, applying each step's failure policy."""

    result = PipelineResult()
    numbered = [s for s in steps if s.title]

    for step in steps:
        if step.title:
            logger.info("Step %d/%d: %s", numbered.index(step) + 1, len(numbered), step.title)

        try:
            step_result = step.run(ctx)
        except (InstallerError, OSError) as e:
            message = getattr(e, "message", None) or str(e)
            step_result = BootstrapResult(step.step_id, Outcome.FAILED, message)
        except Exception as e:
            logger.exception("%s crashed", step.step_id)
            step_result = BootstrapResult(step.step_id, Outcome.FAILED, f"unexpected error: {e!r}")

        result.results.append(step_result)

        if step_result.outcome is Outcome.DEGRADED:
            logger.warning("%s degraded: %s", step.step_id, step_result.detail)

        if step_result.outcome is not Outcome.FAILED:
            continue

        if step.policy is Policy.FATAL:
            logger.error("%s failed: %s", step.step_id, step_result.detail)
            result.failed_step = step.step_id
            break
        if step.policy is Policy.TERMINAL:
            logger.warning("%s failed: %s", step.step_id, step_result.detail)
            result.stopped_at = step.step_id
            break
        logger.warning("%s failed, continuing: %s", step.step_id, step_result.detail)

    return result
