"""Shared fixtures for perch tests."""

from pathlib import Path

import pytest

from perch.errorpage import ErrorPageRenderer


@pytest.fixture
def custom_robots() -> bytes:
    return b"I AM A ROBOT!!!"


@pytest.fixture
def error_renderer() -> ErrorPageRenderer:
    return ErrorPageRenderer("{{ title }}")


@pytest.fixture
def custom_dir(tmp_path: Path, custom_robots: bytes) -> Path:
    """Override directory containing a custom robots.txt."""
    directory = tmp_path / "custom"
    directory.mkdir()
    (directory / "robots.txt").write_bytes(custom_robots)
    return directory
