"""Tests for the shared command plumbing."""

from __future__ import annotations

import pytest
import typer

from hevy_bridge.commands.common import validate_timestamp


class TestValidateTimestamp:
    @pytest.mark.parametrize(
        "value",
        [
            "2024-01-01T00:00:00Z",
            "2024-01-01T00:00:00z",
            "2024-01-01T00:00:00+02:00",
            "2024-01-01T00:00:00",
            "2024-01-01",
        ],
    )
    def test_accepts_iso_8601_unchanged(self, value: str) -> None:
        assert validate_timestamp(value) == value

    def test_none_passes_through(self) -> None:
        assert validate_timestamp(None) is None

    @pytest.mark.parametrize("value", ["yesterday", "2024-13-01", "01/02/2024", ""])
    def test_rejects_garbage(self, value: str) -> None:
        with pytest.raises(typer.BadParameter, match="ISO 8601"):
            validate_timestamp(value)
