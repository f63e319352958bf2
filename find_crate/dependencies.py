"""Dependency table selectors.

Cargo keeps dependencies in separate tables depending on when they are
needed. :class:`Dependencies` names the combinations the manifest engine can
search, and each member resolves to a fixed, ordered tuple of table names.
The order matters: when a key appears in more than one table the first table
in the tuple wins.

Examples
--------
>>> Dependencies.DEFAULT.tables
('dependencies', 'dev-dependencies')
>>> Dependencies.parse("Build").tables
('build-dependencies',)
"""

from __future__ import annotations

import enum

__all__ = ["Dependencies"]

_NORMAL = "dependencies"
_DEV = "dev-dependencies"
_BUILD = "build-dependencies"

_TABLES: dict[str, tuple[str, ...]] = {
    "default": (_NORMAL, _DEV),
    "release": (_NORMAL,),
    "dev": (_DEV,),
    "build": (_BUILD,),
    "all": (_NORMAL, _DEV, _BUILD),
}


class Dependencies(enum.Enum):
    """Kinds of dependency tables searched by :class:`~find_crate.Manifest`."""

    DEFAULT = "default"
    RELEASE = "release"
    DEV = "dev"
    BUILD = "build"
    ALL = "all"

    @property
    def tables(self) -> tuple[str, ...]:
        """Return the table names probed for this selector, in priority order."""
        return _TABLES[self.value]

    @classmethod
    def parse(cls, value: str | Dependencies) -> Dependencies:
        """Convert a selector name into a :class:`Dependencies` member.

        Parameters
        ----------
        value
            A member, or a case-insensitive member name such as ``"dev"``.

        Returns
        -------
        Dependencies
            The matching selector.

        Raises
        ------
        ValueError
            If ``value`` does not name a selector.
        """
        if isinstance(value, cls):
            return value
        normalised = str(value).strip().lower()
        try:
            return cls(normalised)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            msg = f"Unknown dependency selector {value!r}. Expected one of: {supported}"
            raise ValueError(msg) from exc
