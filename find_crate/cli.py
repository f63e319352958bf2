"""Export a dependency lookup as GitHub Actions outputs.

Searches a Cargo manifest for one of several candidate crate names and
writes the identifier, original package name and version requirement to
``GITHUB_OUTPUT`` so later workflow steps (typically code generators) can use
them.

Examples
--------
Run with inputs taken from the environment::

    INPUT_NAMES=foo,foo-core INPUT_MANIFEST_PATH=Cargo.toml find-crate

Search build dependencies only::

    INPUT_NAMES=cc INPUT_DEPENDENCIES=build find-crate
"""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .dependencies import Dependencies
from .environment import manifest_path as env_manifest_path
from .errors import FindCrateError
from .manifest import Manifest

if typ.TYPE_CHECKING:
    from .package import Package

app = App(config=cyclopts.config.Env("INPUT_", command=False))


def _escape(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _emit_error(title: str, message: str, *, path: Path | None = None) -> None:
    """Print an error in the format expected by GitHub Actions."""
    metadata_parts: list[str] = []
    if path is not None:
        metadata_parts.append(f"file={_escape(str(path))}")
        metadata_parts.append("line=1")
    metadata_parts.append(f"title={_escape(title)}")
    metadata = ",".join(metadata_parts)
    print(f"::error {metadata}::{_escape(message)}")


def _format_output(name: str, value: str) -> str:
    """Format one output, using heredoc syntax for multi-line values."""
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"gh_{name.upper().replace('-', '_')}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def _write_outputs(values: dict[str, str]) -> None:
    """Append output variables for downstream steps."""
    output_path = os.environ.get("GITHUB_OUTPUT")
    if not output_path:
        return
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        for name, value in values.items():
            handle.write(_format_output(name, value))


def _resolve_manifest_path(manifest_path: str) -> Path:
    """Resolve the manifest path, considering GITHUB_WORKSPACE.

    An empty ``manifest_path`` falls back to ``CARGO_MANIFEST_DIR``.
    """
    if not manifest_path.strip():
        return env_manifest_path()
    resolved_path = Path(manifest_path)
    if resolved_path.is_absolute():
        return resolved_path
    workspace = os.environ.get("GITHUB_WORKSPACE", "")
    if workspace:
        return Path(workspace) / resolved_path
    return resolved_path


def _split_names(names: str) -> list[str]:
    return [name.strip() for name in names.split(",") if name.strip()]


def _lookup(manifest: Manifest, candidates: list[str]) -> Package | None:
    wanted = frozenset(candidates)
    return manifest.find(lambda name: name in wanted)


def package_outputs(package: Package) -> dict[str, str]:
    """Return the workflow outputs describing ``package``."""
    return {
        "crate-name": package.name,
        "original-name": package.original_name,
        "version": package.version,
    }


@app.default
def main(
    *,
    names: typ.Annotated[str, Parameter()],
    manifest_path: typ.Annotated[str, Parameter()] = "",
    dependencies: typ.Annotated[str, Parameter()] = "default",
) -> None:
    """Find a dependency in a Cargo manifest and export its name and version."""
    candidates = _split_names(names)
    if not candidates:
        _emit_error("Invalid input", "No crate names were provided")
        raise SystemExit(1)

    try:
        selector = Dependencies.parse(dependencies)
    except ValueError as exc:
        _emit_error("Invalid input", str(exc))
        raise SystemExit(1) from exc

    try:
        resolved_path = _resolve_manifest_path(manifest_path)
        manifest = Manifest.from_path(resolved_path)
    except FindCrateError as exc:
        _emit_error("Cargo.toml read failure", str(exc), path=exc.path)
        raise SystemExit(1) from exc

    manifest.dependencies = selector
    package = _lookup(manifest, candidates)
    if package is None:
        joined = ", ".join(candidates)
        tables = ", ".join(selector.tables)
        _emit_error(
            "Crate not found",
            f"None of [{joined}] is declared in {tables} of {resolved_path}",
            path=resolved_path,
        )
        raise SystemExit(1)

    outputs = package_outputs(package)
    _write_outputs(outputs)
    print("Found: " + ", ".join(f"{key}={value}" for key, value in outputs.items()))


if __name__ == "__main__":
    app()
