from __future__ import annotations

import sys
from typing import Optional, TextIO

from . import __version__
from .lib.probe import Platform
from .pipeline import Outcome, PipelineResult

_MARKS = {
    Outcome.OK: "✓",
    Outcome.DEGRADED: "⚠",
    Outcome.FAILED: "✗",
}


def _box(lines: list[str], width: int = 47) -> str:
    out = ["  ┌" + "─" * width + "┐"]
    for line in lines:
        out.append("  │ " + line.ljust(width - 2) + " │")
    out.append("  └" + "─" * width + "┘")
    return "\n".join(out)


def banner(stream: TextIO = sys.stdout) -> None:
    print("", file=stream)
    print(
        _box(
            [
                "",
                f"🤖 SmartAgent v{__version__}",
                "Your Personal AI Agent",
                "",
                "Powered by OpenClaw + Morpheus",
                "",
            ]
        ),
        file=stream,
    )
    print("", file=stream)


def summary(result: PipelineResult, stream: TextIO = sys.stdout) -> None:
    print("", file=stream)
    print("  Summary", file=stream)
    for r in result.results:
        print(f"    {_MARKS[r.outcome]} {r.step_id:<24} {r.outcome.value:<9} {r.detail}", file=stream)
    if result.degraded and not result.fatal:
        print(f"  Completed with {len(result.degraded)} warning(s).", file=stream)


def fatal(result: PipelineResult, platform: Optional[Platform], stream: TextIO = sys.stdout) -> None:
    failed = next(r for r in result.results if r.step_id == result.failed_step)
    print("", file=stream)
    print(f"  ❌ Installation stopped at {failed.step_id}: {failed.detail}", file=stream)
    if platform is not None:
        print(f"     Platform: {platform}", file=stream)
    print("     Fix the problem above and re-run the installer; anything already installed is kept.", file=stream)


def ready(url: str, stream: TextIO = sys.stdout) -> None:
    print("", file=stream)
    print(
        _box(
            [
                "",
                "🎉 SmartAgent is ready!",
                "",
                f"WebChat: {url}",
                "",
                "Your agent is using Morpheus decentralized",
                "inference, no API key needed.",
                "",
                "Say hello to get started!",
                "",
            ]
        ),
        file=stream,
    )
    print("", file=stream)
    print("  To stop:    openclaw gateway stop", file=stream)
    print("  To restart: openclaw gateway restart", file=stream)
    print("  Logs:       openclaw gateway logs", file=stream)
    print("", file=stream)
    print("  Next steps:", file=stream)
    print("    • Get your own API key at https://app.mor.org", file=stream)
    print("    • Add Venice for premium models (Claude, GPT)", file=stream)
    print("    • Stake MOR for self-sovereign inference", file=stream)
    print("", file=stream)
    print("  Docs:   https://smartagent.org", file=stream)
    print("  GitHub: https://github.com/SmartAgentProtocol/smartagent", file=stream)


def manual_start(stream: TextIO = sys.stdout) -> None:
    print("", file=stream)
    print("  SmartAgent is installed! Start it with:", file=stream)
    print("    openclaw gateway start", file=stream)
    print("", file=stream)


def final(result: PipelineResult, *, platform: Optional[Platform], endpoint: Optional[str], stream: TextIO = sys.stdout) -> None:
    summary(result, stream)
    if result.fatal:
        fatal(result, platform, stream)
    elif result.stopped_at is None and endpoint:
        ready(endpoint, stream)
    else:
        manual_start(stream)
