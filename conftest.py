"""Pytest configuration for find-crate tests."""

from __future__ import annotations

import textwrap
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class ManifestWriter(typ.Protocol):
    """Callable fixture that writes a ``Cargo.toml`` and returns its path."""

    def __call__(self, content: str, *, directory: Path | None = None) -> Path:
        """Write ``content`` (dedented) to ``Cargo.toml``."""
        ...


@pytest.fixture
def write_manifest(tmp_path: Path) -> ManifestWriter:
    """Return a helper that writes manifests under ``tmp_path``."""

    def _write(content: str, *, directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / "Cargo.toml"
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def manifest_dir(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> cabc.Iterator[Path]:
    """Point ``CARGO_MANIFEST_DIR`` at ``tmp_path``."""
    monkeypatch.setenv("CARGO_MANIFEST_DIR", str(tmp_path))
    yield tmp_path


@pytest.fixture
def github_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Route ``GITHUB_OUTPUT`` and ``GITHUB_WORKSPACE`` into ``tmp_path``."""
    output_file = tmp_path / "outputs"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output_file))
    monkeypatch.setenv("GITHUB_WORKSPACE", str(tmp_path))
    return output_file
