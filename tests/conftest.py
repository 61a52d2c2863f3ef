"""Shared test fixtures for gl-share tests."""

import io
import sys
from pathlib import Path
from typing import Any

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gl_share.client import GitLabClient
from gl_share.config import GitLabConfig
from gl_share.output import make_console

# Constants for use in tests - pytest makes conftest.py fixtures available,
# but these constants need to be imported directly from tests
MOCK_GITLAB_URL = "https://gitlab.example.com"
MOCK_API_URL = f"{MOCK_GITLAB_URL}/api/v4"


class ScriptedPrompter:
    """Prompter that replays canned answers and remembers what it was asked."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.asked: list[str] = []

    def ask(self, message: str) -> str:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message!r}")
        return self.answers.pop(0)


@pytest.fixture
def mock_config() -> GitLabConfig:
    return GitLabConfig(url=MOCK_GITLAB_URL, token="test-token")


@pytest.fixture
def mock_client(mock_config):
    """GitLabClient pointing at mock server."""
    return GitLabClient(mock_config)


@pytest.fixture
def console():
    """Console writing to a buffer; read it back with console.file.getvalue()."""
    return make_console(file=io.StringIO(), width=200)


def make_project(id: int, name: str, namespace: str = "myorg", shared_with: tuple = ()) -> dict[str, Any]:
    """Project JSON as returned by GET /projects."""
    return {
        "id": id,
        "name": name,
        "path_with_namespace": f"{namespace}/{name}",
        "namespace": {"id": 1, "name": namespace, "path": namespace},
        "shared_with_groups": [
            {"group_id": 900 + i, "group_name": group, "group_access_level": 20} for i, group in enumerate(shared_with)
        ],
    }


def make_group(id: int, name: str) -> dict[str, Any]:
    """Group JSON as returned by GET /groups."""
    return {"id": id, "name": name, "full_path": name.lower()}
