"""Environment helpers for locating the current crate's manifest."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import ManifestDirNotFoundError

__all__ = ["MANIFEST_DIR", "MANIFEST_FILE", "manifest_path"]

MANIFEST_DIR = "CARGO_MANIFEST_DIR"
MANIFEST_FILE = "Cargo.toml"


def manifest_path() -> Path:
    """Return the path of ``Cargo.toml`` inside ``CARGO_MANIFEST_DIR``.

    Returns
    -------
    Path
        ``$CARGO_MANIFEST_DIR/Cargo.toml``. Existence is not checked here.

    Raises
    ------
    ManifestDirNotFoundError
        Raised when the environment variable is unset or empty.
    """
    value = os.environ.get(MANIFEST_DIR)
    if not value:
        msg = f"`{MANIFEST_DIR}` environment variable not found"
        raise ManifestDirNotFoundError(msg)
    return Path(value) / MANIFEST_FILE
