"""Shared test fixtures and utilities."""

import pytest
from pathlib import Path
from typing import List


class RecordingRunner:
    """Stands in for the compiler: records commands and returns a fixed status."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: List[List[str]] = []

    def __call__(self, cmd: List[str]) -> int:
        self.calls.append(list(cmd))
        return self.returncode


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point the tool at a test config.yaml and clear environment overrides."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
manifest:
    filename: bolt.toml
compiler:
    name: bolt-compiler
logging:
    level: WARNING
"""
    )
    monkeypatch.setenv("BOLT_CONFIG_PATH", str(config_path))
    for key in ("BOLT_COMPILER", "BOLT_MANIFEST", "BOLT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return config_path


@pytest.fixture
def project_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Create an empty project directory and make it the working directory."""
    path = tmp_path / "project"
    path.mkdir()
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()
