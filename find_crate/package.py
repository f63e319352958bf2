"""Package descriptors returned by manifest queries."""

from __future__ import annotations

import dataclasses

__all__ = ["Package", "normalize_ident"]


def normalize_ident(name: str) -> str:
    """Return ``name`` with every hyphen replaced by an underscore.

    The result is not otherwise validated, so names starting with a digit are
    returned as they are.

    Examples
    --------
    >>> normalize_ident("serde-json")
    'serde_json'
    >>> normalize_ident("serde_json")
    'serde_json'
    """
    return name.replace("-", "_")


@dataclasses.dataclass(frozen=True, slots=True)
class Package:
    """A dependency (or the current crate) located in a manifest.

    Attributes
    ----------
    key : str
        The key of the dependency as written in the manifest.
    name : str
        ``key`` normalised into an identifier (hyphens become underscores).
    version : str
        The version requirement, ``"*"`` when none is declared.
    package : str or None
        The upstream package name when the dependency is renamed with
        ``package = "..."``; ``None`` otherwise.
    """

    key: str
    name: str
    version: str
    package: str | None = None

    @classmethod
    def from_entry(cls, key: str, version: str, package: str | None = None) -> Package:
        """Build a descriptor for the manifest entry ``key``."""
        return cls(key=key, name=normalize_ident(key), version=version, package=package)

    @property
    def original_name(self) -> str:
        """Return the published package name."""
        return self.package if self.package is not None else self.key

    def is_original(self) -> bool:
        """Return ``True`` when the dependency is not renamed."""
        return self.package is None
