"""GitLab API operations: paginated listing of a group's projects."""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import urlencode

from .constants import API_PATH, FIRST_PAGE, HTTP_TIMEOUT_SEC, PER_PAGE, USER_AGENT

logger = logging.getLogger(__name__)


class GitLabError(RuntimeError):
    pass


class GitLabClient:
    def __init__(self, host: str, token: str, first_page: int = FIRST_PAGE) -> None:
        self.host = host
        self.token = token
        self.first_page = first_page

    # ---------- low-level HTTP ----------
    def _request_json(self, url: str) -> Any:
        req = urllib.request.Request(url)
        req.add_header("Accept", "application/json")
        req.add_header("User-Agent", USER_AGENT)
        try:
            with urllib.request.urlopen(req, timeout=HTTP_TIMEOUT_SEC) as resp:
                body = resp.read()
        except urllib.error.HTTPError as e:
            raise GitLabError(f"Failed to access gitlab: HTTP {e.code} {e.reason}") from e
        except (urllib.error.URLError, OSError, http.client.HTTPException) as e:
            raise GitLabError(f"Failed to access gitlab: {e}") from e

        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as e:
            raise GitLabError(f"Failed to decode response: {e}") from e

    def projects_url(self, group: str, page: int) -> str:
        # access_token goes in the query string; nothing is sent in headers.
        query = urlencode({"access_token": self.token, "page": page, "per_page": PER_PAGE})
        return f"https://{self.host}{API_PATH}/groups/{group}/projects?{query}"

    # ---------- public API ----------
    def list_group_projects(self, group: str) -> list[str]:
        """Return the names of every project in ``group``, in API order.

        Pages are requested from ``first_page`` upward until one comes back
        empty. Any failure aborts the whole listing with :class:`GitLabError`.
        """
        names: list[str] = []
        page = self.first_page
        while True:
            logger.debug("Listing %s projects, page %d", group, page)
            data = self._request_json(self.projects_url(group, page))
            if not isinstance(data, list):
                raise GitLabError(f"Unexpected response for page {page}: expected a JSON array")
            if not data:
                break
            for p in data:
                name = p.get("name") if isinstance(p, dict) else None
                if not isinstance(name, str):
                    raise GitLabError(f"Unexpected response for page {page}: project without a name")
                names.append(name)
            page += 1
        logger.debug("Found %d projects in %s", len(names), group)
        return names
