"""Dependency resolution: detect first, then walk an ordered strategy chain."""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

from ..errors import InstallerError, InstallExhausted
from .probe import Platform

logger = logging.getLogger(__name__)

_VERSION_RE = re.compile(r"(\d+(?:\.\d+)*)")


class DependencyState(str, enum.Enum):
    ABSENT = "absent"
    BELOW_MINIMUM = "below_minimum"
    SATISFIED = "satisfied"


class Strategy(Protocol):
    """One way of installing a dependency."""

    name: str

    def attempt(self, platform: Platform, dependency: "Dependency") -> bool:
        ...


@dataclass
class Dependency:
    name: str
    detect: Callable[[], Optional[str]]
    strategies: Sequence[Strategy]
    min_version: Optional[str] = None
    state: DependencyState = DependencyState.ABSENT


@dataclass(frozen=True)
class Resolution:
    dependency: str
    state: DependencyState
    version: Optional[str] = None
    installed_by: Optional[str] = None
    attempted: List[str] = field(default_factory=list)

    @property
    def fast_path(self) -> bool:
        return self.installed_by is None


def parse_version(text: Optional[str]) -> Optional[Tuple[int, ...]]:
    """Pull the first dotted number out of tool output ("v22.3.0" -> (22, 3, 0))."""

    if not text:
        return None
    m = _VERSION_RE.search(text)
    if not m:
        return None
    return tuple(int(p) for p in m.group(1).split("."))


def version_satisfies(found: Optional[str], minimum: Optional[str]) -> bool:
    if found is None:
        return False
    if minimum is None:
        return True
    have = parse_version(found)
    want = parse_version(minimum)
    if have is None or want is None:
        return False
    width = max(len(have), len(want))
    return have + (0,) * (width - len(have)) >= want + (0,) * (width - len(want))


def classify(found: Optional[str], minimum: Optional[str]) -> DependencyState:
    if found is None:
        return DependencyState.ABSENT
    if version_satisfies(found, minimum):
        return DependencyState.SATISFIED
    return DependencyState.BELOW_MINIMUM


def resolve(dependency: Dependency, platform: Platform) -> Resolution:
    """Ensure a dependency is present, installing it if needed.

    Strategies run in declared order, each at most once; the first one that
    reports success wins and the rest are skipped. Side effects of failed
    strategies are left in place. Raises InstallExhausted when none succeed.
    """

    found = dependency.detect()
    dependency.state = classify(found, dependency.min_version)

    if dependency.state is DependencyState.SATISFIED:
        logger.info("%s %s ✓", dependency.name, found)
        return Resolution(dependency=dependency.name, state=dependency.state, version=found)

    if dependency.state is DependencyState.BELOW_MINIMUM:
        logger.warning(
            "%s %s found, but %s+ required.", dependency.name, found, dependency.min_version
        )
    logger.info("Installing %s...", dependency.name)

    attempted: List[str] = []
    for strategy in dependency.strategies:
        attempted.append(strategy.name)
        try:
            ok = strategy.attempt(platform, dependency)
        except (InstallerError, OSError) as e:
            logger.debug("Strategy %s raised: %s", strategy.name, e)
            ok = False
        except Exception:
            # Any other error still only disqualifies this strategy.
            logger.exception("Strategy %s crashed", strategy.name)
            ok = False

        if ok:
            dependency.state = DependencyState.SATISFIED
            version = dependency.detect() or found
            logger.info("%s installed via %s ✓", dependency.name, strategy.name)
            return Resolution(
                dependency=dependency.name,
                state=dependency.state,
                version=version,
                installed_by=strategy.name,
                attempted=attempted,
            )
        logger.warning("%s: %s did not succeed", dependency.name, strategy.name)

    raise InstallExhausted(dependency.name, attempted)
