"""Tests for platform detection."""

from __future__ import annotations

import platform

import pytest

from smartagent_installer.errors import UnsupportedPlatform
from smartagent_installer.lib.probe import Arch, OsFamily, Platform, normalize_arch, probe


class TestProbe:
    @pytest.mark.parametrize(
        "system, machine, expected",
        [
            ("Darwin", "arm64", Platform(OsFamily.MACOS, Arch.ARM64)),
            ("Darwin", "x86_64", Platform(OsFamily.MACOS, Arch.X86_64)),
            ("Linux", "x86_64", Platform(OsFamily.LINUX, Arch.X86_64)),
            ("Linux", "amd64", Platform(OsFamily.LINUX, Arch.X86_64)),
            ("Linux", "aarch64", Platform(OsFamily.LINUX, Arch.ARM64)),
            ("Linux", "arm64", Platform(OsFamily.LINUX, Arch.ARM64)),
        ],
    )
    def test_supported_pairs(self, system: str, machine: str, expected: Platform) -> None:
        """Every supported OS/arch combination yields a Platform."""
        assert probe(system, machine) == expected

    @pytest.mark.parametrize(
        "system, machine",
        [
            ("Windows", "AMD64"),
            ("FreeBSD", "amd64"),
            ("Linux", "armv7l"),
            ("Linux", "riscv64"),
            ("Darwin", "ppc"),
        ],
    )
    def test_unsupported_pairs(self, system: str, machine: str) -> None:
        """Anything else is rejected with the offending names attached."""
        with pytest.raises(UnsupportedPlatform) as exc:
            probe(system, machine)
        assert exc.value.os_name == system
        assert exc.value.machine == machine

    def test_reads_running_platform(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without arguments the host platform is used."""
        monkeypatch.setattr(platform, "system", lambda: "Linux")
        monkeypatch.setattr(platform, "machine", lambda: "aarch64")
        assert probe() == Platform(OsFamily.LINUX, Arch.ARM64)

    def test_platform_is_immutable(self) -> None:
        p = Platform(OsFamily.LINUX, Arch.X86_64)
        with pytest.raises(Exception):
            p.arch = Arch.ARM64  # type: ignore[misc]

    def test_normalize_arch_unknown(self) -> None:
        assert normalize_arch("sparc") is None
        assert normalize_arch(" AMD64 ") is Arch.X86_64
