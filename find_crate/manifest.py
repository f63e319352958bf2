r"""Query engine for Cargo manifests.

:class:`Manifest` owns a parsed ``Cargo.toml`` document and answers
predicate-based lookups against its dependency tables. Lookups first probe the
top-level tables named by the configured :class:`Dependencies` selector and
only then fall back to the ``[target.<cfg>.*]`` tables, so unconditional
dependencies always win over platform-specific ones.

Examples
--------
Locating a renamed dependency::

    >>> manifest = Manifest.from_str('''
    ... [dependencies]
    ... foo-renamed = { package = "foo", version = "0.1" }
    ... ''')
    >>> package = manifest.find(lambda name: name == "foo")
    >>> package.name, package.original_name, package.version
    ('foo_renamed', 'foo', '0.1')

Restricting the search to build dependencies::

    >>> manifest.dependencies = Dependencies.BUILD
    >>> manifest.find(lambda name: name == "foo") is None
    True
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import tomllib
import typing as typ
from pathlib import Path

from .dependencies import Dependencies
from .environment import manifest_path
from .errors import InvalidManifestError, ManifestReadError
from .package import Package, normalize_ident

__all__ = ["ANY_VERSION", "Manifest", "find_in_table"]

logger = logging.getLogger(__name__)

ANY_VERSION = "*"

Table = dict[str, typ.Any]
NamePredicate = cabc.Callable[[str], bool]
VersionPredicate = cabc.Callable[[str, str], bool]


def _as_table(value: object) -> Table | None:
    return value if isinstance(value, dict) else None


def _entry_version(value: object) -> str:
    """Return the version requirement declared by a dependency entry."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        version = value.get("version")
        if isinstance(version, str):
            return version
    return ANY_VERSION


def _renamed_package(value: object) -> str | None:
    """Return the ``package`` field of a table entry, if it is a string."""
    if not isinstance(value, dict):
        return None
    package = value.get("package")
    return package if isinstance(package, str) else None


def find_in_table(table: Table, predicate: VersionPredicate) -> Package | None:
    """Return the first entry of ``table`` accepted by ``predicate``.

    Parameters
    ----------
    table : dict[str, Any]
        A single dependency table such as ``[dependencies]``.
    predicate : Callable[[str, str], bool]
        Called with a package name and its version requirement.

    Returns
    -------
    Package or None
        A descriptor for the first match in document order.

    Notes
    -----
    A renamed entry (``key = { package = "P" }``) is matched on ``P`` only;
    its local key is what the descriptor reports as ``name``.
    """
    for key, value in table.items():
        version = _entry_version(value)
        renamed = _renamed_package(value)
        if renamed is not None:
            if predicate(renamed, version):
                return Package.from_entry(key, version, renamed)
            continue
        if predicate(key, version):
            return Package.from_entry(key, version)
    return None


def _find_in_tables(
    document: Table, names: cabc.Iterable[str], predicate: VersionPredicate
) -> Package | None:
    for table_name in names:
        table = _as_table(document.get(table_name))
        if table is None:
            continue
        if (package := find_in_table(table, predicate)) is not None:
            logger.debug("Matched %r in [%s]", package.key, table_name)
            return package
    return None


def _iter_target_tables(document: Table) -> typ.Iterator[tuple[str, Table]]:
    """Yield ``(cfg, table)`` pairs for every ``[target.<cfg>]`` table."""
    targets = _as_table(document.get("target"))
    if targets is None:
        return
    for cfg, target in targets.items():
        if (table := _as_table(target)) is not None:
            yield cfg, table


def _require_string(package: Table, field: str, path: Path | None) -> str:
    value = package.get(field)
    if value is None:
        msg = f"`package.{field}` field is missing"
        raise InvalidManifestError(msg, path=path)
    if not isinstance(value, str):
        msg = f"`package.{field}` field must be a string"
        raise InvalidManifestError(msg, path=path)
    return value


class Manifest:
    """A parsed Cargo manifest and the dependency tables it searches.

    Parameters
    ----------
    manifest : dict[str, Any]
        Parsed TOML document, as returned by :func:`tomllib.load`.
    dependencies : Dependencies or str, optional
        Tables to search. Defaults to :attr:`Dependencies.DEFAULT`.
    path : Path, optional
        Where the document was read from; used in error reports.

    Notes
    -----
    Queries never modify the document, so a single instance can serve
    concurrent lookups.
    """

    def __init__(
        self,
        manifest: Table,
        dependencies: Dependencies | str = Dependencies.DEFAULT,
        *,
        path: Path | None = None,
    ) -> None:
        self._manifest = manifest
        self._dependencies = Dependencies.parse(dependencies)
        self.path = path

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(path={self.path!r}, "
            f"dependencies={self._dependencies})"
        )

    @classmethod
    def new(cls) -> Manifest:
        """Read ``Cargo.toml`` from the directory in ``CARGO_MANIFEST_DIR``."""
        return cls.from_path(manifest_path())

    @classmethod
    def from_path(cls, path: Path | str) -> Manifest:
        """Load the manifest at ``path``.

        Raises
        ------
        ManifestReadError
            If the file does not exist, cannot be read, is not UTF-8, or is not
            valid TOML.
        """
        path = Path(path)
        if not path.is_file():
            msg = f"the manifest file not found: {path}"
            raise ManifestReadError(msg, path=path)
        try:
            with path.open("rb") as handle:
                document = tomllib.load(handle)
        except OSError as exc:
            msg = f"an error occurred while reading {path}: {exc}"
            raise ManifestReadError(msg, path=path) from exc
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            msg = f"an error occurred while parsing {path}: {exc}"
            raise ManifestReadError(msg, path=path) from exc
        return cls(document, path=path)

    @classmethod
    def from_str(cls, text: str) -> Manifest:
        """Parse ``text`` as a manifest document.

        Raises
        ------
        ManifestReadError
            If ``text`` is not valid TOML.
        """
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            msg = f"an error occurred while parsing the manifest: {exc}"
            raise ManifestReadError(msg) from exc
        return cls(document)

    @classmethod
    def from_toml(cls, manifest: Table) -> Manifest:
        """Wrap an already parsed document."""
        return cls(manifest)

    @property
    def manifest(self) -> Table:
        """The parsed document."""
        return self._manifest

    @property
    def dependencies(self) -> Dependencies:
        """The kinds of dependencies searched by :meth:`find`."""
        return self._dependencies

    @dependencies.setter
    def dependencies(self, value: Dependencies | str) -> None:
        self._dependencies = Dependencies.parse(value)

    def set_dependencies(self, value: Dependencies | str) -> None:
        """Change the kinds of dependencies searched by later queries."""
        self.dependencies = value

    def find_name(self, predicate: NamePredicate) -> str | None:
        """Return the identifier of the first dependency accepted by ``predicate``.

        Shorthand for ``find(predicate).name``.
        """
        package = self.find(predicate)
        return package.name if package is not None else None

    def find(self, predicate: NamePredicate) -> Package | None:
        """Find the first dependency whose name satisfies ``predicate``.

        Equivalent to :meth:`find2` with the version requirement ignored.

        Examples
        --------
        >>> manifest = Manifest({"dependencies": {"foo-core": "1"}})
        >>> manifest.find(lambda name: name in {"foo", "foo-core"}).name
        'foo_core'
        """
        return self.find2(lambda name, _version: predicate(name))

    def find2(self, predicate: VersionPredicate) -> Package | None:
        """Find the first dependency accepted by ``predicate``.

        Parameters
        ----------
        predicate : Callable[[str, str], bool]
            Called with each candidate name and its version requirement
            (``"*"`` when the manifest declares none).

        Returns
        -------
        Package or None
            The first match. Top-level tables are searched in selector order
            before any ``[target.<cfg>]`` table.
        """
        names = self._dependencies.tables
        package = _find_in_tables(self._manifest, names, predicate)
        if package is not None:
            return package

        for cfg, target in _iter_target_tables(self._manifest):
            package = _find_in_tables(target, names, predicate)
            if package is not None:
                logger.debug("Matched %r under target %r", package.key, cfg)
                return package
        return None

    def crate_package(self) -> Package:
        """Return the name and version of the crate described by this manifest.

        Raises
        ------
        InvalidManifestError
            If ``[package]`` is missing or its ``name``/``version`` fields are
            missing or not strings.

        Examples
        --------
        >>> Manifest({"package": {"name": "my-crate", "version": "0.3.0"}}).crate_package()
        Package(key='my-crate', name='my_crate', version='0.3.0', package=None)
        """
        package = self._manifest.get("package")
        if package is None:
            msg = "[package] section is missing"
            raise InvalidManifestError(msg, path=self.path)
        if not isinstance(package, dict):
            msg = "[package] section must be a table"
            raise InvalidManifestError(msg, path=self.path)
        name = _require_string(package, "name", self.path)
        version = _require_string(package, "version", self.path)
        return Package(key=name, name=normalize_ident(name), version=version)
