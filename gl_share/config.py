"""Configuration for gl-share, sourced from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from gl_share.errors import ConfigError
from gl_share.models import DEFAULT_GITLAB_URL

TOKEN_ENV = "GITLAB_TOKEN"
URL_ENV = "GITLAB_URL"


@dataclass(frozen=True)
class GitLabConfig:
    """Connection settings for a GitLab instance."""

    url: str
    token: str

    def __repr__(self) -> str:
        return f"GitLabConfig(url={self.url!r}, token='***')"


def load_config(environ: Mapping[str, str] | None = None, url_override: str | None = None) -> GitLabConfig:
    """
    Build a GitLabConfig from environment variables.

    When ``environ`` is omitted, a ``.env`` file in the working directory is loaded
    first (without overriding variables that are already set) and ``os.environ`` is used.

    Raises:
        ConfigError: if GITLAB_TOKEN is missing or blank.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True), override=False)
        environ = os.environ

    token = (environ.get(TOKEN_ENV) or "").strip()
    if not token:
        raise ConfigError(f"ERROR: {TOKEN_ENV} environment variable is not set.")

    url = url_override or environ.get(URL_ENV) or DEFAULT_GITLAB_URL
    return GitLabConfig(url=url.rstrip("/"), token=token)
