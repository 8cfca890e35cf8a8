"""Pytest configuration and shared fixtures for lookup3_tools tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path
from unittest.mock import Mock

import pytest
from click.testing import CliRunner

from lookup3_tools.core.config import AppConfig


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_config(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config location at an empty temp directory."""
    monkeypatch.setattr("lookup3_tools.core.config.DEFAULT_CONFIG_DIR", temp_dir)
    return temp_dir


@pytest.fixture
def sample_file(temp_dir: Path) -> Path:
    """File whose hashlittle2 digest is known."""
    path = temp_dir / "sample.bin"
    path.write_bytes(b"abc")
    return path


@pytest.fixture
def mock_config() -> Mock:
    """Create standardized mock app config for CLI testing."""
    config = Mock(spec=AppConfig)
    config.output_format = "rich"
    config.digest_width = 64
    config.text_encoding = "utf-8"
    config.uppercase_hex = False
    config.log_level = "WARNING"
    return config


# Pytest configuration
def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest settings."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    """Add the unit marker to every test not already marked slow."""
    for item in items:
        if not any(marker.name == "slow" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
