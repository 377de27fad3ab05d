"""Stand-ins for the external tools the installer drives."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

from smartagent_installer.errors import LaunchFailed


class FakeTool:
    """A tool whose detected version changes when a strategy 'installs' it."""

    def __init__(self, version: Optional[str] = None) -> None:
        self.version = version

    def detect(self) -> Optional[str]:
        return self.version


class RecordingStrategy:
    def __init__(
        self,
        name: str,
        *,
        succeed: bool = True,
        effect: Optional[Callable[[], None]] = None,
        raises: Optional[Exception] = None,
    ) -> None:
        self.name = name
        self.succeed = succeed
        self.effect = effect
        self.raises = raises
        self.calls = 0
        self.seen_states: List[str] = []

    def attempt(self, platform, dependency) -> bool:
        self.calls += 1
        self.seen_states.append(dependency.state.value)
        if self.raises is not None:
            raise self.raises
        if self.effect is not None:
            self.effect()
        return self.succeed


def installs(tool: FakeTool, version: str) -> Callable[[], None]:
    def _effect() -> None:
        tool.version = version

    return _effect


def clones_plugin(location: Path, *, with_script: bool = True) -> Callable[[], None]:
    def _effect() -> None:
        location.mkdir(parents=True, exist_ok=True)
        (location / "SKILL.md").write_text("# Everclaw\nDecentralized inference via Morpheus.\n", encoding="utf-8")
        if with_script:
            script = location / "scripts" / "bootstrap-gateway.mjs"
            script.parent.mkdir(parents=True, exist_ok=True)
            script.write_text("// bootstrap\n", encoding="utf-8")

    return _effect


class FakeGateway:
    def __init__(self, *, running: bool = False, start_fails: bool = False, url: str = "http://localhost:4200") -> None:
        self.running = running
        self.start_fails = start_fails
        self.url = url
        self.starts = 0

    def ensure_running(self) -> bool:
        if self.running:
            return True
        if self.start_fails:
            raise LaunchFailed("Could not start gateway automatically")
        self.starts += 1
        self.running = True
        return False

    def endpoint_url(self) -> str:
        return self.url
