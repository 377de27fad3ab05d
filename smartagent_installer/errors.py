from __future__ import annotations

from typing import Any, Sequence


class InstallerError(RuntimeError):
    """Base class for errors the pipeline knows how to report."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context


class UnsupportedPlatform(InstallerError):
    def __init__(self, os_name: str, machine: str) -> None:
        super().__init__(
            f"Unsupported platform: {os_name} ({machine}). SmartAgent supports macOS and Linux on x86_64/arm64.",
            os_name=os_name,
            machine=machine,
        )
        self.os_name = os_name
        self.machine = machine


class InstallExhausted(InstallerError):
    def __init__(self, dependency: str, attempted: Sequence[str]) -> None:
        tried = ", ".join(attempted) or "none"
        super().__init__(
            f"Could not install {dependency} (strategies tried: {tried})",
            dependency=dependency,
            attempted=list(attempted),
        )
        self.dependency = dependency
        self.attempted = list(attempted)


class LaunchFailed(InstallerError):
    pass


class CommandError(InstallerError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str) -> None:
        super().__init__(
            f"Command failed ({returncode}): {' '.join(argv)}\n{stderr}".rstrip(),
            argv=list(argv),
            returncode=returncode,
        )
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr


class FetchFailed(InstallerError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Could not fetch {url}: {reason}", url=url)
        self.url = url
        self.reason = reason
