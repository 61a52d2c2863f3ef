"""CLI entry point for gl-share."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping, Sequence

import requests
from rich.console import Console

# Ensure all operations are registered by importing the operations package
import gl_share.operations  # noqa: F401
from gl_share.client import GitLabClient
from gl_share.config import load_config
from gl_share.errors import ConfigError, GlShareError
from gl_share.logging_utils import setup_logging
from gl_share.models import DEFAULT_ACCESS_LEVEL, AccessLevel, Options
from gl_share.operations import get_operation_registry
from gl_share.output import make_console
from gl_share.prompts import Prompter


class ListAccessLevelsAction(argparse.Action):
    """Print the access levels and exit, like --version."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print(f"Access levels: {', '.join(AccessLevel.names())}")
        parser.exit()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gl-share",
        usage="gl-share [options]",
        description="Search GitLab projects and groups, and share projects with a group.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    GITLAB_TOKEN - GitLab Personal Access Token (required)
    GITLAB_URL   - GitLab instance URL (default: https://gitlab.com)

Examples:
    # Search projects
    gl-share --search --project "Project Name"

    # Search groups
    gl-share --search --group "Group Name"

    # Share matching projects with a group
    gl-share --project "Project Name" --group "Group Name" --access developer

    # List available access levels
    gl-share --list-access-levels
""",
    )
    parser.add_argument("--search", "-s", action="store_true", dest="search_mode", help="Enable search mode")
    parser.add_argument("--project", "-p", dest="project_name", metavar="PROJECT", help="Specify a project name")
    parser.add_argument("--group", "-g", dest="group_name", metavar="GROUP", help="Specify a group name")
    parser.add_argument(
        "--access",
        "-a",
        dest="access_level",
        metavar="ACCESS_LEVEL",
        default=DEFAULT_ACCESS_LEVEL,
        help=f"Specify an access level name (default: {DEFAULT_ACCESS_LEVEL})",
    )
    parser.add_argument("--list-access-levels", "-l", action=ListAccessLevelsAction, help="Print a list of access levels")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--gitlab-url", default=None, help="GitLab instance URL (default: from GITLAB_URL env or https://gitlab.com)"
    )
    parser.add_argument(
        "--silent-failures",
        action="store_true",
        help="Do not report projects that could not be shared",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> Options:
    return Options(
        search_mode=args.search_mode,
        project_name=args.project_name,
        group_name=args.group_name,
        access_level=args.access_level,
        silent_failures=args.silent_failures,
    )


def run(
    options: Options,
    client: GitLabClient,
    console: Console | None = None,
    prompter: Prompter | None = None,
) -> int:
    """Dispatch to the search or share operation and map errors to an exit code."""
    console = console or make_console()
    registry = get_operation_registry()
    op_cls = registry["search" if options.search_mode else "share"]
    operation = op_cls(client=client, options=options, console=console, prompter=prompter)

    try:
        operation.run()
    except GlShareError as e:
        if str(e):
            console.print(str(e))
        return e.exit_code
    except requests.RequestException as e:
        operation.logger.error(f"Fatal API error: {e}")
        return 1
    return 0


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(environ, url_override=args.gitlab_url)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code

    logger = setup_logging(verbose=args.verbose)
    logger.debug(f"Using GitLab instance {config.url}")

    client = GitLabClient(config)
    try:
        return run(options_from_args(args), client)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
