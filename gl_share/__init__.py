"""
gl-share: search a GitLab instance for projects or groups by name, and share
matching projects with a group at a chosen access level.

Environment:
    GITLAB_TOKEN - GitLab Personal Access Token (required)
    GITLAB_URL   - GitLab instance URL (default: https://gitlab.com)
"""

from gl_share.cli import main

__version__ = "0.1.0"
__all__ = ["main", "__version__"]
