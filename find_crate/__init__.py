"""Find the name a dependency goes by in the current ``Cargo.toml``.

Code generators frequently need to refer to a crate from generated code, but
the name a crate is published under and the identifier it is imported as can
differ: dependencies may be renamed with ``package = "..."`` and hyphens are
not allowed in identifiers. This package searches the manifest for the
dependency and reports the identifier to use.

Examples
--------
Look up the name of ``foo`` (or its ``foo-core`` facade) in the manifest of
the crate being built::

    >>> from find_crate import find_crate
    >>> find_crate(lambda name: name in {"foo", "foo-core"}).name
    'foo_core'

Search several crates against a single parsed manifest::

    >>> from find_crate import Dependencies, Manifest
    >>> manifest = Manifest.new()
    >>> manifest.dependencies = Dependencies.ALL
    >>> [manifest.find(lambda name: name == crate) for crate in ("foo", "bar")]
"""

from __future__ import annotations

import typing as typ

from .dependencies import Dependencies
from .environment import MANIFEST_DIR, manifest_path
from .errors import (
    CrateNotFoundError,
    FindCrateError,
    InvalidManifestError,
    ManifestDirNotFoundError,
    ManifestReadError,
)
from .manifest import ANY_VERSION, Manifest, find_in_table
from .package import Package, normalize_ident

if typ.TYPE_CHECKING:
    import collections.abc as cabc

__all__ = [
    "ANY_VERSION",
    "MANIFEST_DIR",
    "CrateNotFoundError",
    "Dependencies",
    "FindCrateError",
    "InvalidManifestError",
    "Manifest",
    "ManifestDirNotFoundError",
    "ManifestReadError",
    "Package",
    "find_crate",
    "find_in_table",
    "manifest_path",
    "normalize_ident",
]


def find_crate(predicate: cabc.Callable[[str], bool]) -> Package:
    """Find a dependency of the crate in ``CARGO_MANIFEST_DIR``.

    Searches ``[dependencies]`` and ``[dev-dependencies]`` (and their
    ``[target.<cfg>]`` variants) of ``$CARGO_MANIFEST_DIR/Cargo.toml``.

    Parameters
    ----------
    predicate
        Called with each candidate package name.

    Returns
    -------
    Package
        The first matching dependency.

    Raises
    ------
    ManifestDirNotFoundError
        If ``CARGO_MANIFEST_DIR`` is not set.
    ManifestReadError
        If the manifest cannot be read or parsed.
    CrateNotFoundError
        If no dependency satisfies ``predicate``.
    """
    path = manifest_path()
    package = Manifest.from_path(path).find(predicate)
    if package is None:
        msg = f"the crate with the specified name not found in dependencies of {path}"
        raise CrateNotFoundError(msg, path=path)
    return package
