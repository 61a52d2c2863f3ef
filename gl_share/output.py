"""Console rendering of search results."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from gl_share.models import GROUP_ACCESS_WIDTH, Group, Project


def make_console(**kwargs) -> Console:
    """Console for user-facing output. API strings are never parsed as markup."""
    kwargs.setdefault("markup", False)
    kwargs.setdefault("highlight", False)
    return Console(**kwargs)


def project_table(projects: Sequence[Project]) -> Table:
    table = Table(box=None, header_style="bold", pad_edge=False)
    table.add_column("ID", justify="right")
    table.add_column("NAMESPACE")
    table.add_column("NAME")
    table.add_column("GROUP_ACCESS", max_width=GROUP_ACCESS_WIDTH, overflow="fold")
    for project in projects:
        table.add_row(str(project.id), project.namespace, project.name, project.group_access)
    return table


def group_table(groups: Sequence[Group]) -> Table:
    table = Table(box=None, header_style="bold", pad_edge=False)
    table.add_column("ID", justify="right")
    table.add_column("NAME")
    for group in groups:
        table.add_row(str(group.id), group.name)
    return table
