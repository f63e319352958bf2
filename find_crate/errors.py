"""Error types raised while locating and querying a Cargo manifest."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "CrateNotFoundError",
    "FindCrateError",
    "InvalidManifestError",
    "ManifestDirNotFoundError",
    "ManifestReadError",
]


class FindCrateError(RuntimeError):
    """Base class for failures reported by :mod:`find_crate`.

    Parameters
    ----------
    message : str
        Human-readable error description.
    path : Path, optional
        Manifest path associated with the failure, when one is known.

    Attributes
    ----------
    path : Path or None
        The manifest path associated with this error.

    Notes
    -----
    Failures raised by ``tomllib`` or the filesystem are only reachable through
    the standard ``__cause__`` chain.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ManifestDirNotFoundError(FindCrateError):
    """Raised when ``CARGO_MANIFEST_DIR`` is unset or empty."""


class ManifestReadError(FindCrateError):
    """Raised when the manifest file is missing, unreadable, or invalid TOML."""


class InvalidManifestError(FindCrateError):
    """Raised when the manifest lacks a required field.

    Examples
    --------
    >>> err = InvalidManifestError("`package.name` is missing")
    >>> str(err)
    'The manifest is invalid because: `package.name` is missing'
    >>> err.reason
    '`package.name` is missing'
    """

    def __init__(self, reason: str, *, path: Path | None = None) -> None:
        super().__init__(f"The manifest is invalid because: {reason}", path=path)
        self.reason = reason


class CrateNotFoundError(FindCrateError):
    """Raised by :func:`find_crate.find_crate` when no dependency matches."""
