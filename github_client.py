# FILE PATH: github_client.py
# LOCATION: Root directory of your project
# DESCRIPTION: Async wrapper around the GitHub REST API calls the generator needs

"""
Thin async client for the GitHub REST API.

Only four endpoints are used:
1. Repository metadata
2. One-level directory listing (contents API)
3. Language byte counts
4. Single file contents (base64 encoded)

Listing failures never raise: they are logged, remembered in
``failed_paths`` and reported as an empty listing so that a traversal can
carry on with a partial tree.
"""

import base64
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import httpx

DEFAULT_API_URL = "https://api.github.com"
REPO_URL_PATTERN = re.compile(r"github\.com/([^/\s]+)/([^/\s?#]+)", re.IGNORECASE)


class RepositoryUrlError(ValueError):
    """Raised when the input does not look like a GitHub repository URL."""


class RepositoryNotFoundError(RuntimeError):
    """Raised when repository metadata cannot be fetched."""


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "dir"


@dataclass
class DirectoryEntry:
    name: str
    kind: EntryKind
    path: str
    api_type: str = "file"

    @classmethod
    def from_api(cls, item: Dict) -> "DirectoryEntry":
        api_type = item.get("type", "file")
        kind = EntryKind.DIRECTORY if api_type == "dir" else EntryKind.FILE
        return cls(
            name=item.get("name", ""),
            kind=kind,
            path=item.get("path", item.get("name", "")),
            api_type=api_type,
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass
class RepositoryInfo:
    """Repository metadata used by the README template."""

    name: str
    description: Optional[str]
    clone_url: str
    html_url: str
    stargazers_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    license_name: Optional[str] = None
    topics: List[str] = field(default_factory=list)
    default_branch: str = "main"
    owner_login: str = ""
    owner_html_url: str = ""

    @classmethod
    def from_api(cls, data: Dict) -> "RepositoryInfo":
        owner = data.get("owner") or {}
        license_info = data.get("license") or {}
        return cls(
            name=data.get("name", ""),
            description=data.get("description"),
            clone_url=data.get("clone_url", ""),
            html_url=data.get("html_url", ""),
            stargazers_count=data.get("stargazers_count", 0),
            forks_count=data.get("forks_count", 0),
            watchers_count=data.get("watchers_count", 0),
            open_issues_count=data.get("open_issues_count", 0),
            license_name=license_info.get("name"),
            topics=list(data.get("topics") or []),
            default_branch=data.get("default_branch", "main"),
            owner_login=owner.get("login", ""),
            owner_html_url=owner.get("html_url", ""),
        )


def parse_repo_url(url: str) -> Tuple[str, str]:
    """Extract ``(owner, repo)`` from a GitHub URL, dropping a ``.git`` suffix."""
    if not url or not url.strip():
        raise RepositoryUrlError("Please enter a GitHub repository URL")

    match = REPO_URL_PATTERN.search(url.strip())
    if not match:
        raise RepositoryUrlError(
            "Invalid GitHub URL. Please use format: https://github.com/owner/repo"
        )

    owner, repo = match.groups()
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo:
        raise RepositoryUrlError(
            "Invalid GitHub URL. Please use format: https://github.com/owner/repo"
        )

    logging.debug(f"Parsed URL: owner='{owner}', repo='{repo}' from '{url}'")
    return owner, repo


class GitHubClient:
    """Async GitHub API client. Use as ``async with GitHubClient(...) as client``."""

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "repo-readme-generator",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self.base_url = base_url.rstrip("/")
        self.failed_paths: List[str] = []
        self.request_count = 0
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, url: str) -> httpx.Response:
        self.request_count += 1
        return await self._client.get(url)

    async def get_repository(self, owner: str, repo: str) -> RepositoryInfo:
        try:
            response = await self._get(f"/repos/{owner}/{repo}")
        except httpx.HTTPError as e:
            logging.error(f"Error fetching repository {owner}/{repo}: {str(e)}")
            raise RepositoryNotFoundError(
                "Repository not found or not accessible"
            ) from e

        if not response.is_success:
            logging.error(
                f"Repository {owner}/{repo} returned status {response.status_code}"
            )
            raise RepositoryNotFoundError("Repository not found or not accessible")

        try:
            data = response.json()
        except ValueError as e:
            logging.error(f"Repository {owner}/{repo} returned invalid JSON: {str(e)}")
            raise RepositoryNotFoundError(
                "Repository not found or not accessible"
            ) from e

        if not isinstance(data, dict):
            logging.error(f"Repository {owner}/{repo} returned an unexpected payload")
            raise RepositoryNotFoundError("Repository not found or not accessible")

        return RepositoryInfo.from_api(data)

    async def list_directory(
        self, owner: str, repo: str, path: str = ""
    ) -> List[DirectoryEntry]:
        """Return the immediate children of ``path``; ``[]`` if the listing fails."""
        url = f"/repos/{owner}/{repo}/contents/{path}"
        display_path = path or "/"

        try:
            response = await self._get(url)
        except httpx.HTTPError as e:
            logging.warning(f"Listing failed for {display_path}: {str(e)}")
            self.failed_paths.append(display_path)
            return []

        if not response.is_success:
            logging.warning(
                f"Listing failed for {display_path}: status {response.status_code}"
            )
            self.failed_paths.append(display_path)
            return []

        try:
            payload = response.json()
        except ValueError as e:
            logging.warning(f"Listing for {display_path} is not valid JSON: {str(e)}")
            self.failed_paths.append(display_path)
            return []

        # A file path returns a single object instead of a list
        if not isinstance(payload, list):
            logging.warning(f"Listing for {display_path} is not a directory")
            self.failed_paths.append(display_path)
            return []

        return [DirectoryEntry.from_api(item) for item in payload]

    async def get_languages(self, owner: str, repo: str) -> Dict[str, int]:
        try:
            response = await self._get(f"/repos/{owner}/{repo}/languages")
        except httpx.HTTPError as e:
            logging.warning(f"Error fetching languages for {owner}/{repo}: {str(e)}")
            return {}

        if not response.is_success:
            logging.warning(
                f"Languages for {owner}/{repo} returned status {response.status_code}"
            )
            return {}

        try:
            data = response.json()
        except ValueError as e:
            logging.warning(
                f"Languages for {owner}/{repo} are not valid JSON: {str(e)}"
            )
            return {}

        return dict(data) if isinstance(data, dict) else {}

    async def get_file_content(
        self, owner: str, repo: str, path: str
    ) -> Optional[str]:
        """Fetch and decode one file, or ``None`` if it is unavailable."""
        try:
            response = await self._get(f"/repos/{owner}/{repo}/contents/{path}")
        except httpx.HTTPError as e:
            logging.error(f"Failed to fetch {path}: {str(e)}")
            return None

        if not response.is_success:
            logging.warning(f"Failed to fetch {path}: status {response.status_code}")
            return None

        try:
            data = response.json()
        except ValueError as e:
            logging.warning(f"Response for {path} is not valid JSON: {str(e)}")
            return None

        if not isinstance(data, dict):
            return None
        if not data.get("content") or data.get("encoding") != "base64":
            logging.debug(f"No inline base64 content for {path}")
            return None

        try:
            raw = base64.b64decode(data["content"])
        except (ValueError, TypeError) as e:
            logging.warning(f"Could not decode {path}: {str(e)}")
            return None

        return raw.decode("utf-8", errors="replace")
