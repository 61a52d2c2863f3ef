"""Search operation: list projects or groups matching a name."""

from __future__ import annotations

from gl_share.errors import NotFoundError
from gl_share.operations.base import Operation, is_blank, register_operation
from gl_share.output import group_table


@register_operation("search")
class SearchOperation(Operation):
    """List projects (or, when no project is given, groups) matching a name."""

    def run(self) -> None:
        project_name = self.options.project_name
        group_name = self.options.group_name

        if is_blank(project_name) and is_blank(group_name):
            self.say("Nothing to search for. Please use the `--project` or `--group` arguments.")
            return

        # A project name wins; the group is not searched even if given
        if not is_blank(project_name):
            if not self.find_projects(project_name):
                raise NotFoundError(f"No projects found matching '{project_name}'")
            return

        groups = self.find_groups(group_name)
        if not groups:
            raise NotFoundError(f"No groups found matching '{group_name}'")

        self.say(f"Found {len(groups)} group(s) matching '{group_name}':")
        self.console.print(group_table(groups))
        self.say()
