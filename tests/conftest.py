"""Shared pytest fixtures for pathglob tests."""

import textwrap
from pathlib import Path

import pytest

from pathglob.config import CONFIG_DIR, CONFIG_FILE


@pytest.fixture
def config_yaml() -> str:
    """Return a simple valid config YAML string."""
    return textwrap.dedent("""\
        patterns:
          docs: "/docs/**"
          sources: "/src/**|/lib/*.py"
          readme: "/README.md"
        strict: false
        """)


@pytest.fixture
def project_root(tmp_path: Path, config_yaml: str) -> Path:
    """Create a project directory with a .pathglob/config.yml.

    Returns:
        Path to the project directory
    """
    root = tmp_path / "project"
    config_dir = root / CONFIG_DIR
    config_dir.mkdir(parents=True)
    (config_dir / CONFIG_FILE).write_text(config_yaml)
    return root
