# =============================================
# app/services/github_service.py
# =============================================
from typing import Any, List, Optional
from urllib.parse import quote
import httpx
import logging

from app.config.settings import Settings
from app.core.exceptions import GithubProfileNotFoundError

logger = logging.getLogger(__name__)

REPO_LIMIT = 5
REPO_SORT = "created:asc"
USER_AGENT = "devconnector-api"

class GithubService:
    """Read-only proxy for a GitHub user's latest public repositories"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_base = settings.GITHUB_API_URL.rstrip("/")
        self.timeout = settings.GITHUB_TIMEOUT
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": USER_AGENT,
        }
        if settings.GITHUB_TOKEN:
            self.headers["Authorization"] = f"token {settings.GITHUB_TOKEN}"

    async def get_repos(self, username: str) -> List[Any]:
        """
        Fetch up to five repositories of ``username``.

        The upstream JSON list is returned untouched. Every failure (network
        error, timeout, non-200 status, unexpected payload) is reported as
        :class:`GithubProfileNotFoundError`.
        """
        url = f"{self.api_base}/users/{quote(username, safe='')}/repos"
        params = {"per_page": REPO_LIMIT, "sort": REPO_SORT}

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=self.headers,
                transport=self.transport
            ) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"GitHub request for {username} failed: {e}")
            raise GithubProfileNotFoundError(username, reason=str(e))

        if response.status_code != 200:
            logger.info(f"GitHub returned {response.status_code} for {username}")
            raise GithubProfileNotFoundError(username, reason=f"status {response.status_code}")

        try:
            repos = response.json()
        except ValueError:
            raise GithubProfileNotFoundError(username, reason="invalid JSON")
        if not isinstance(repos, list):
            raise GithubProfileNotFoundError(username, reason="unexpected payload")

        return repos
