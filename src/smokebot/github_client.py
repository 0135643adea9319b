"""Thin GitHub REST API client using httpx."""

from __future__ import annotations

import logging

import httpx

from .errors import TransportError

logger = logging.getLogger(__name__)

GITHUB_API = "https://api.github.com"
DEFAULT_USER_AGENT = "smokebot"


class GitHubClient:
    def __init__(
        self,
        token: str,
        api_url: str = GITHUB_API,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Args:
            token: GitHub token allowed to comment on the target repository.
            api_url: REST API root, e.g. for GitHub Enterprise.
            timeout: Per-request timeout in seconds.
            user_agent: Value of the User-Agent header.
        """
        self._client = httpx.Client(
            base_url=api_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": user_agent,
            },
            timeout=timeout,
        )

    def _raise(self, resp: httpx.Response, action: str) -> None:
        if not resp.is_success:
            logger.warning(
                "GitHub API %s %s → %s",
                resp.request.method,
                resp.request.url,
                resp.status_code,
            )
            message = f"Failed to {action}: {resp.status_code} {resp.reason_phrase}"
            if resp.text:
                message += f"\n{resp.text}"
            raise TransportError(message, status_code=resp.status_code, body=resp.text)

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Execute an HTTP request. Network failures are not retried."""
        try:
            return self._client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise TransportError(f"GitHub API {method} {url} failed: {e}") from e

    def post_comment(self, owner: str, repo: str, issue_number: int, body: str) -> dict:
        """Create a comment on an issue or pull request and return it."""
        resp = self._request(
            "POST",
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            json={"body": body},
        )
        self._raise(resp, "create comment")
        return resp.json()

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()
