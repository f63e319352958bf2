"""Tests for :mod:`find_crate.dependencies`."""

from __future__ import annotations

import pytest

from find_crate import Dependencies


class TestTables:
    """Tests for :attr:`Dependencies.tables`."""

    @pytest.mark.parametrize(
        ("selector", "expected"),
        [
            (Dependencies.DEFAULT, ("dependencies", "dev-dependencies")),
            (Dependencies.RELEASE, ("dependencies",)),
            (Dependencies.DEV, ("dev-dependencies",)),
            (Dependencies.BUILD, ("build-dependencies",)),
            (
                Dependencies.ALL,
                ("dependencies", "dev-dependencies", "build-dependencies"),
            ),
        ],
    )
    def test_resolves_fixed_table_order(
        self, selector: Dependencies, expected: tuple[str, ...]
    ) -> None:
        """Each selector should map to its ordered list of table names."""
        assert selector.tables == expected

    def test_every_selector_has_tables(self) -> None:
        """No selector may resolve to an empty list."""
        assert all(member.tables for member in Dependencies)


class TestParse:
    """Tests for :meth:`Dependencies.parse`."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("default", Dependencies.DEFAULT),
            ("Release", Dependencies.RELEASE),
            (" DEV ", Dependencies.DEV),
            ("build", Dependencies.BUILD),
            ("all", Dependencies.ALL),
            (Dependencies.ALL, Dependencies.ALL),
        ],
    )
    def test_accepts_member_names(
        self, value: str | Dependencies, expected: Dependencies
    ) -> None:
        """Names are matched case-insensitively and members pass through."""
        assert Dependencies.parse(value) is expected

    def test_rejects_unknown_names(self) -> None:
        """An unknown selector should list the supported names."""
        with pytest.raises(ValueError, match="Expected one of: default, release"):
            Dependencies.parse("optional")
