from __future__ import annotations

import enum
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .manifests import load_gateway_defaults
from .net import fetch_text

logger = logging.getLogger(__name__)


class Materialized(str, enum.Enum):
    CREATED = "created"
    ALREADY_PRESENT = "already_present"


def needs_materialize(target: Path) -> bool:
    # Presence alone counts: an empty or broken file is still the user's file.
    return not target.exists()


def _write(target: Path, content: str) -> None:
    # target only ever appears complete; a partial file would be preserved forever.
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_name(f".{target.name}.tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        os.replace(tmp, target)
    finally:
        if tmp.exists():
            tmp.unlink()


def materialize(target: Path, default_content: str) -> Materialized:
    """Write default_content to target unless something is already there."""

    if not needs_materialize(target):
        logger.info("%s already exists, preserving...", target.name)
        return Materialized.ALREADY_PRESENT
    _write(target, default_content)
    logger.info("Created %s", target)
    return Materialized.CREATED


def materialize_remote(target: Path, url: str) -> Materialized:
    """Like materialize(), but the default content is fetched from url.

    Nothing is fetched when the file exists. Raises FetchFailed when the
    download does not succeed; target is not created in that case.
    """

    if not needs_materialize(target):
        logger.info("%s already exists, skipping", target.name)
        return Materialized.ALREADY_PRESENT
    body = fetch_text(url)
    _write(target, body)
    logger.info("Created %s", target.name)
    return Materialized.CREATED


def default_gateway_config() -> Dict[str, Any]:
    return load_gateway_defaults()


def render_gateway_config(config: Dict[str, Any]) -> str:
    return json.dumps(config, indent=2) + "\n"
