"""Selected-planet persistence. Stores the raw catalog row as JSON between sessions."""

import json
import logging
import re
from pathlib import Path

from goldilocks.models import RawRecord

logger = logging.getLogger(__name__)

_SESSION_KEY = re.compile(r"[0-9a-f]{32}")


class SelectionError(Exception):
    """The selection could not be written or removed."""


def session_selection_path(base: Path, session_key: str) -> Path:
    """Per-session variant of base: selection.json → selection-<key>.json.

    Raises:
        SelectionError: If session_key is not a 32-digit hex token.
    """
    if not _SESSION_KEY.fullmatch(session_key):
        raise SelectionError(f"Invalid session key: {session_key!r}")
    return base.with_name(f"{base.stem}-{session_key}{base.suffix}")


def save_selection(record: RawRecord, path: Path) -> Path:
    """Write the chosen row to path, creating parent directories.

    Raises:
        SelectionError: On any filesystem failure (read-only, disk full, ...).
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(dict(record), ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise SelectionError(f"Could not save selection to {path}: {e}") from e
    return path


def load_selection(path: Path) -> dict | None:
    """Read a stored row back.

    Returns None when nothing is stored, or when the stored data cannot be
    used (the caller then shows the "no selection" state).
    """
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Discarding unreadable selection %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Discarding selection %s: expected an object", path)
        return None
    return data


def clear_selection(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        raise SelectionError(f"Could not remove selection {path}: {e}") from e
