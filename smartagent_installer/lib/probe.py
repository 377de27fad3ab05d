from __future__ import annotations

import enum
import logging
import platform
from dataclasses import dataclass
from typing import Optional

from ..errors import UnsupportedPlatform

logger = logging.getLogger(__name__)


class OsFamily(str, enum.Enum):
    MACOS = "macos"
    LINUX = "linux"


class Arch(str, enum.Enum):
    X86_64 = "x86_64"
    ARM64 = "arm64"


@dataclass(frozen=True)
class Platform:
    os_family: OsFamily
    arch: Arch

    def __str__(self) -> str:
        return f"{self.os_family.value} ({self.arch.value})"


_OS_MAP = {
    "darwin": OsFamily.MACOS,
    "linux": OsFamily.LINUX,
}

_ARCH_MAP = {
    "x86_64": Arch.X86_64,
    "amd64": Arch.X86_64,
    "arm64": Arch.ARM64,
    "aarch64": Arch.ARM64,
}


def normalize_os(system: str) -> Optional[OsFamily]:
    return _OS_MAP.get(system.strip().lower())


def normalize_arch(machine: str) -> Optional[Arch]:
    return _ARCH_MAP.get(machine.strip().lower())


def probe(system: Optional[str] = None, machine: Optional[str] = None) -> Platform:
    """Detect the running platform, raising UnsupportedPlatform for anything else."""

    system = platform.system() if system is None else system
    machine = platform.machine() if machine is None else machine

    os_family = normalize_os(system)
    arch = normalize_arch(machine)
    if os_family is None or arch is None:
        raise UnsupportedPlatform(system, machine)

    detected = Platform(os_family=os_family, arch=arch)
    logger.info("Detected: %s", detected)
    return detected
