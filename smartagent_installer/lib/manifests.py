from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml


def _manifests_root() -> Path:
    # smartagent_installer/lib/manifests.py -> smartagent_installer/manifests
    return Path(__file__).resolve().parents[1] / "manifests"


def load_manifest(name: str) -> Dict[str, Any]:
    """Load a packaged YAML manifest (manifests/<name>.yaml)."""

    p = _manifests_root() / f"{name}.yaml"
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Manifest must be a mapping/dict: {p}")
    return data


def load_impostor_signatures() -> List[str]:
    sigs = load_manifest("impostors").get("signatures") or []
    if not isinstance(sigs, list):
        raise ValueError("manifests/impostors.yaml: signatures must be a list")
    return [str(s) for s in sigs if str(s).strip()]


def load_workspace_manifest() -> Dict[str, Any]:
    data = load_manifest("workspace")
    docs = data.get("documents") or []
    if not isinstance(docs, list):
        raise ValueError("manifests/workspace.yaml: documents must be a list")
    return data


def load_gateway_defaults() -> Dict[str, Any]:
    return load_manifest("gateway_defaults")
