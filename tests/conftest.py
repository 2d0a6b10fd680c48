# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Shared fixtures for utilkit tests."""

from pathlib import Path
from typing import Iterator

import pytest

from utilkit.config import reset_default_config


@pytest.fixture(autouse=True)
def isolated_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test from an empty directory so no stray .utilkit.yml is picked up."""
    monkeypatch.chdir(tmp_path)
    reset_default_config()
    yield
    reset_default_config()


@pytest.fixture
def write_config(tmp_path: Path):
    """Return a helper that writes YAML text to a config file and returns its path."""

    def _write(text: str, name: str = ".utilkit.yml") -> Path:
        config_path = tmp_path / name
        config_path.write_text(text, encoding="utf-8")
        return config_path

    return _write
