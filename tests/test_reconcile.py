"""Tests for plugin state reconciliation."""

from __future__ import annotations

from pathlib import Path

import pytest

from smartagent_installer.errors import CommandError
from smartagent_installer.lib import reconcile as reconcile_mod
from smartagent_installer.lib.manifests import load_impostor_signatures
from smartagent_installer.lib.reconcile import Action, apply_action, matches_impostor, reconcile

SIGNATURES = ["Everclaw Vault", "everclaw.chong-eae.workers.dev"]


def _skill(location: Path, text: str) -> Path:
    location.mkdir(parents=True)
    (location / "SKILL.md").write_text(text, encoding="utf-8")
    return location


class TestReconcile:
    def test_absent(self, tmp_path: Path) -> None:
        assert reconcile(tmp_path / "everclaw", SIGNATURES) is Action.ABSENT

    def test_git_checkout_is_updated(self, tmp_path: Path) -> None:
        loc = _skill(tmp_path / "everclaw", "# Everclaw\n")
        (loc / ".git").mkdir()
        assert reconcile(loc, SIGNATURES) is Action.UPDATE_IN_PLACE

    def test_git_marker_wins_over_signature(self, tmp_path: Path) -> None:
        loc = _skill(tmp_path / "everclaw", "Everclaw Vault\n")
        (loc / ".git").mkdir()
        assert reconcile(loc, SIGNATURES) is Action.UPDATE_IN_PLACE

    @pytest.mark.parametrize(
        "text",
        [
            "# Everclaw Vault\nStore your secrets.\n",
            "See https://everclaw.chong-eae.workers.dev for details\n",
        ],
    )
    def test_impostor_is_recreated(self, tmp_path: Path, text: str) -> None:
        loc = _skill(tmp_path / "everclaw", text)
        assert reconcile(loc, SIGNATURES) is Action.RECREATE

    def test_plain_install_is_left_alone(self, tmp_path: Path) -> None:
        loc = _skill(tmp_path / "everclaw", "# Everclaw\nMorpheus inference.\n")
        assert reconcile(loc, SIGNATURES) is Action.NOOP

    def test_missing_marker_file_is_left_alone(self, tmp_path: Path) -> None:
        loc = tmp_path / "everclaw"
        loc.mkdir()
        assert reconcile(loc, SIGNATURES) is Action.NOOP

    def test_matches_impostor(self) -> None:
        assert matches_impostor("xx Everclaw Vault xx", SIGNATURES) == "Everclaw Vault"
        assert matches_impostor("everclaw", SIGNATURES) is None
        assert matches_impostor(None, SIGNATURES) is None

    def test_signatures_come_from_manifest(self) -> None:
        sigs = load_impostor_signatures()
        assert "Everclaw Vault" in sigs
        assert "everclaw.chong-eae.workers.dev" in sigs


class TestApplyAction:
    def test_recreate_removes_location(self, tmp_path: Path) -> None:
        loc = _skill(tmp_path / "everclaw", "Everclaw Vault")
        (loc / "nested").mkdir()
        assert apply_action(Action.RECREATE, loc) is True
        assert not loc.exists()

    def test_noop_keeps_user_content(self, tmp_path: Path) -> None:
        loc = _skill(tmp_path / "everclaw", "my edits")
        assert apply_action(Action.NOOP, loc) is True
        assert (loc / "SKILL.md").read_text(encoding="utf-8") == "my edits"

    def test_update_pulls_in_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(reconcile_mod, "run_cmd", lambda argv, **kw: calls.append((argv, kw)))
        loc = _skill(tmp_path / "everclaw", "# Everclaw")

        assert apply_action(Action.UPDATE_IN_PLACE, loc) is True
        assert calls == [(["git", "pull", "--quiet"], {"cwd": str(loc)})]

    def test_failed_update_is_not_fatal(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def _fail(argv, **kw):
            raise CommandError(argv, 1, "no network")

        monkeypatch.setattr(reconcile_mod, "run_cmd", _fail)
        loc = _skill(tmp_path / "everclaw", "# Everclaw")

        assert apply_action(Action.UPDATE_IN_PLACE, loc) is False
        assert (loc / "SKILL.md").exists()
