"""Shared pytest fixtures for segpath tests."""

from pathlib import Path, PurePath

import pytest

from segpath.models import AbsolutePath, RelativePath


@pytest.fixture
def root() -> PurePath:
    """The host filesystem root anchor."""
    return PurePath(Path.cwd().anchor)


@pytest.fixture
def home(root: PurePath) -> AbsolutePath:
    """An absolute path two levels below the root."""
    return AbsolutePath(root, ("home", "alice"))


@pytest.fixture
def sample_relative_paths() -> list[RelativePath]:
    """A mixed bag of relative paths for ordering tests."""
    return [
        RelativePath(0, ("b",)),
        RelativePath(2, ()),
        RelativePath(0, ("a", "b")),
        RelativePath(1, ("z",)),
        RelativePath(0, ("a",)),
        RelativePath(0, ()),
        RelativePath(1, ("a", "a")),
    ]
