"""Shared pytest fixtures for the test suite."""

import sys
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

sys.path.insert(0, str(Path(__file__).parent.parent))

from nimbridge.nim.runner import NimRunner  # noqa: E402


@pytest.fixture
def mock_runner() -> MagicMock:
    """NimRunner double that records calls instead of starting processes.

    Returns:
        MagicMock with NimRunner's interface; ``run`` returns "ok".
    """
    runner = MagicMock(spec=NimRunner)
    runner.run.return_value = "ok"
    return runner


@pytest.fixture
def app_spec_data() -> dict:
    """App spec with two serverless components and two static sites.

    Returns:
        Dictionary in app spec YAML shape.
    """
    return {
        "name": "sample-app",
        "region": "nyc",
        "serverless": [
            {
                "name": "api",
                "github": {"repo": "org/repo", "branch": "main"},
                "source_dir": "packages",
            },
            {
                "name": "jobs",
                "local": {"path": "/work/jobs"},
            },
        ],
        "static_sites": [
            {
                "name": "web",
                "build_command": "npm run build",
                "envs": [
                    {"key": "NODE_ENV", "value": "production", "scope": "BUILD_TIME"},
                ],
            },
            {"name": "docs"},
        ],
    }


@pytest.fixture
def temp_spec_file(tmp_path: Path, app_spec_data: dict) -> Generator[Path, None, None]:
    """Write the sample app spec to a temporary YAML file.

    Yields:
        Path to the app spec file.
    """
    spec_file = tmp_path / "app.yaml"
    spec_file.write_text(yaml.safe_dump(app_spec_data))
    yield spec_file
