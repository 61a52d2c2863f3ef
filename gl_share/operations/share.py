"""Share operation: grant a group access to every matching project."""

from __future__ import annotations

import requests

from gl_share.errors import AmbiguousSelectionError, ConfirmationDeclined, NotFoundError, UserInputError
from gl_share.models import AccessLevel, Group, Project, ShareResult
from gl_share.operations.base import Operation, is_blank, register_operation
from gl_share.output import group_table


def classify_failure(exc: requests.RequestException) -> str:
    """Map a failed share call to a short reason code."""
    response = getattr(exc, "response", None)
    if response is None:
        return "network"
    status = response.status_code
    if status in (401, 403):
        return "forbidden"
    if status == 404:
        return "not_found"
    if status == 409:
        return "already_shared"
    return "http_error"


@register_operation("share")
class ShareOperation(Operation):
    """Share the projects matching a name with a group at an access level."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.results: list[ShareResult] = []

    def run(self) -> None:
        project_name = self.options.project_name
        group_name = self.options.group_name
        access_name = self.options.access_level

        if is_blank(project_name):
            raise UserInputError("The `--project` argument was not specified.")
        if is_blank(group_name):
            raise UserInputError("The `--group` argument was not specified.")

        access_level = AccessLevel.from_name(access_name)
        if access_level is None:
            raise UserInputError(f"Invalid access level '{access_name}' was specified.")

        self.say(
            f"Attempting to share projects matching '{project_name}' with group '{group_name}' "
            f"using access level '{access_name}'."
        )
        projects = self.find_projects(project_name)
        groups = self.find_groups(group_name)

        if not projects:
            raise NotFoundError(f"No projects found matching '{project_name}'")
        if not groups:
            raise NotFoundError(f"No groups found matching '{group_name}'")

        group_id = self.select_group(group_name, groups)
        self.confirm(access_level)
        self.share_projects(projects, group_id, access_level)
        self.report()

    def select_group(self, group_name: str, groups: list[Group]) -> int:
        """Return the id of the only match, or ask the user to pick one."""
        if len(groups) == 1:
            return groups[0].id

        self.say(f"Multiple groups found matching '{group_name}':")
        self.console.print(group_table(groups))
        self.say()
        answer = self.prompter.ask("Select a group to use by entering the Group ID: ")
        self.say()

        try:
            selected = int(answer)
        except ValueError:
            selected = None
        if selected not in {g.id for g in groups}:
            raise AmbiguousSelectionError("You have selected an invalid Group ID.")
        return selected

    def confirm(self, access_level: AccessLevel) -> None:
        """Ask before granting developer access or above. Raises ConfirmationDeclined on anything but y."""
        if not access_level.requires_confirmation:
            return

        self.say("You have selected above or equal to developer level access.")
        self.say("Are you sure you want to continue?")
        choice = self.prompter.ask("(y/N): ").upper()

        if choice == "N":
            raise ConfirmationDeclined("")
        if choice != "Y":
            raise ConfirmationDeclined("You entered an invalid option.")

    def share_projects(self, projects: list[Project], group_id: int, access_level: AccessLevel) -> list[ShareResult]:
        for project in projects:
            self.say(f"Sharing project {project.name} (id = {project.id})")
            try:
                self.client.share_project_with_group(project.id, group_id, access_level)
            except requests.RequestException as e:
                self._record(
                    ShareResult(
                        project=project,
                        group_id=group_id,
                        access_level=access_level,
                        action="error",
                        reason=classify_failure(e),
                        detail=str(e),
                    )
                )
                continue
            self._record(ShareResult(project=project, group_id=group_id, access_level=access_level, action="shared"))
        return self.results

    def report(self) -> None:
        """Log a one-line summary of the share run, unless failures are silenced."""
        if self.options.silent_failures:
            return
        shared = sum(1 for r in self.results if r.ok)
        failed = len(self.results) - shared
        self.logger.info(f"Done: {len(self.results)} projects, {shared} shared, {failed} failed")

    def _record(self, result: ShareResult) -> ShareResult:
        self.results.append(result)
        if result.ok:
            self.logger.debug(f"✓ {result.project.name}: shared with group {result.group_id}")
        elif self.options.silent_failures:
            self.logger.debug(f"✗ {result.project.name}: {result.reason} ({result.detail})")
        else:
            self.logger.warning(
                f"✗ {result.project.name} (id = {result.project.id}): "
                f"{result.reason}{' (' + result.detail + ')' if result.detail else ''}"
            )
        return result
