"""GitLab API client with pagination support."""

from __future__ import annotations

import logging
from typing import Any

import requests

from gl_share.config import GitLabConfig
from gl_share.logging_utils import LOGGER_NAME
from gl_share.models import API_V4, PER_PAGE, AccessLevel, Group, Project


class GitLabClient:
    """Thin wrapper around the GitLab REST API v4 calls gl-share needs."""

    def __init__(self, config: GitLabConfig, session: requests.Session | None = None):
        self.base_url = config.url.rstrip("/")
        self.api_url = f"{self.base_url}{API_V4}"
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "PRIVATE-TOKEN": config.token,
                "Content-Type": "application/json",
            }
        )
        self.logger = logging.getLogger(LOGGER_NAME)

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        url = f"{self.api_url}{endpoint}"
        self.logger.debug(f"{method.upper()} {url} {kwargs.get('params', '')} {kwargs.get('json', '')}")
        resp = self.session.request(method, url, **kwargs)
        if resp.status_code >= 400:
            self.logger.debug(f"API error {resp.status_code}: {resp.text[:500]}")
        resp.raise_for_status()
        return resp

    def get(self, endpoint: str, params: dict | None = None) -> Any:
        return self._request("GET", endpoint, params=params).json()

    def paginate(self, endpoint: str, params: dict | None = None) -> list[dict]:
        """Fetch all pages of a paginated endpoint."""
        params = dict(params or {})
        params.setdefault("per_page", PER_PAGE)
        page = 1
        results = []
        while True:
            params["page"] = page
            resp = self._request("GET", endpoint, params=params)
            data = resp.json()
            if not data:
                break
            results.extend(data)
            # Prefer x-next-page; x-total-pages is omitted by GitLab for large collections
            next_page = resp.headers.get("x-next-page")
            if next_page is not None:
                if not next_page.strip():
                    break
                page = int(next_page)
                continue
            total_pages = int(resp.headers.get("x-total-pages", page))
            if page >= total_pages:
                break
            page += 1
        return results

    # -- gl-share calls --

    def search_projects(self, name: str, per_page: int = PER_PAGE) -> list[Project]:
        """Projects whose name matches ``name``, in API order, across all pages."""
        data = self.paginate("/projects", params={"search": name, "per_page": per_page})
        return [Project.from_api(p) for p in data]

    def search_groups(self, name: str) -> list[Group]:
        """Groups whose name matches ``name``. Single request, first page only."""
        data = self.get("/groups", params={"search": name})
        return [Group.from_api(g) for g in data]

    def share_project_with_group(self, project_id: int, group_id: int, access_level: AccessLevel) -> requests.Response:
        # Body is not decoded: a 2xx share may have no content
        return self._request(
            "POST",
            f"/projects/{project_id}/share",
            json={"group_id": group_id, "group_access": access_level.value},
        )
