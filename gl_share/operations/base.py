"""Base class and registry for operations."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rich.console import Console

from gl_share.logging_utils import LOGGER_NAME
from gl_share.models import Group, Options, Project
from gl_share.output import make_console, project_table
from gl_share.prompts import ConsolePrompter, Prompter

if TYPE_CHECKING:
    from gl_share.client import GitLabClient

# ---------------------------------------------------------------------------
# Operation Registry
# ---------------------------------------------------------------------------

_operation_registry: dict[str, type[Operation]] = {}


def register_operation(name: str):
    """Decorator to register an operation class under a mode name."""

    def decorator(cls):
        _operation_registry[name] = cls
        cls.operation_name = name
        return cls

    return decorator


def get_operation_registry() -> dict[str, type[Operation]]:
    """Get the operation registry."""
    return _operation_registry


# ---------------------------------------------------------------------------
# Operation Base Class
# ---------------------------------------------------------------------------


def is_blank(value: str | None) -> bool:
    return value is None or value == ""


class Operation(ABC):
    """Base class for all operations."""

    operation_name: str = ""

    def __init__(
        self,
        client: GitLabClient,
        options: Options,
        console: Console | None = None,
        prompter: Prompter | None = None,
    ):
        self.client = client
        self.options = options
        self.console = console or make_console()
        self.prompter = prompter or ConsolePrompter(self.console)
        self.logger = logging.getLogger(LOGGER_NAME)

    @abstractmethod
    def run(self) -> None:
        """Execute the operation. Raises GlShareError subclasses to abort."""
        ...

    def say(self, message: str = "") -> None:
        self.console.print(message)

    def find_projects(self, project_name: str) -> list[Project]:
        """Search projects and print the matches as a table when there are any."""
        self.say(f"Searching for projects matching '{project_name}'")
        projects = self.client.search_projects(project_name)
        if projects:
            self.say(f"Found {len(projects)} project(s) matching '{project_name}':")
            self.console.print(project_table(projects))
            self.say()
        return projects

    def find_groups(self, group_name: str) -> list[Group]:
        self.say(f"Searching for groups matching '{group_name}'")
        return self.client.search_groups(group_name)
