import asyncio
import base64
import json
import logging
import sys
from typing import Dict, List, Optional, Union

import httpx
import pytest

from github_client import GitHubClient

# Configure logging for tests
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

OWNER = "octo"
REPO = "demo"
REPO_URL = f"https://github.com/{OWNER}/{REPO}"


def dir_entry(name: str, parent: str = "") -> Dict:
    path = f"{parent}/{name}" if parent else name
    return {"name": name, "type": "dir", "path": path}


def file_entry(name: str, parent: str = "") -> Dict:
    path = f"{parent}/{name}" if parent else name
    return {"name": name, "type": "file", "path": path}


class FakeGitHubAPI:
    """
    In-memory stand-in for the GitHub REST API.

    ``listings`` maps a directory path ("" for the root) to either a list of
    entries or an integer status code to answer with.
    """

    def __init__(
        self,
        repo_data: Optional[Dict] = None,
        listings: Optional[Dict[str, Union[List[Dict], int]]] = None,
        languages: Optional[Dict[str, int]] = None,
        files: Optional[Dict[str, str]] = None,
        broken_paths: Optional[List[str]] = None,
        owner: str = OWNER,
        repo: str = REPO,
    ):
        self.repo_data = repo_data
        self.listings = listings or {}
        self.languages = languages or {}
        self.files = files or {}
        self.broken_paths = set(broken_paths or [])
        self.prefix = f"/repos/{owner}/{repo}"
        self.requested: List[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requested.append(path)

        if path == self.prefix:
            if self.repo_data is None:
                return httpx.Response(404, json={"message": "Not Found"})
            return httpx.Response(200, json=self.repo_data)

        if path == f"{self.prefix}/languages":
            return httpx.Response(200, json=self.languages)

        contents_prefix = f"{self.prefix}/contents/"
        if path.startswith(contents_prefix) or path == contents_prefix.rstrip("/"):
            rel_path = path[len(contents_prefix):].strip("/")
            if rel_path in self.broken_paths:
                raise httpx.ConnectError("connection reset", request=request)
            if rel_path in self.listings:
                listing = self.listings[rel_path]
                if isinstance(listing, int):
                    return httpx.Response(listing, json={"message": "error"})
                return httpx.Response(200, json=listing)
            if rel_path in self.files:
                encoded = base64.b64encode(self.files[rel_path].encode("utf-8"))
                return httpx.Response(
                    200,
                    json={
                        "name": rel_path.rsplit("/", 1)[-1],
                        "path": rel_path,
                        "type": "file",
                        "encoding": "base64",
                        "content": encoded.decode("ascii"),
                    },
                )

        return httpx.Response(404, json={"message": "Not Found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def listing_requests(self) -> List[str]:
        contents_prefix = f"{self.prefix}/contents/"
        return [
            p[len(contents_prefix):].strip("/")
            for p in self.requested
            if p.startswith(contents_prefix)
        ]


class FakeChatAPI:
    """Records chat-completion requests and answers with a fixed status/body."""

    def __init__(self, status_code: int = 200, content: str = "Recreated project"):
        self.status_code = status_code
        self.content = content
        self.requests: List[Dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "failure"})
        return httpx.Response(
            200,
            json={"choices": [{"message": {"role": "assistant", "content": self.content}}]},
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def repo_data():
    return {
        "name": REPO,
        "description": "A demo repository",
        "clone_url": f"{REPO_URL}.git",
        "html_url": REPO_URL,
        "stargazers_count": 42,
        "forks_count": 7,
        "watchers_count": 42,
        "open_issues_count": 3,
        "license": {"name": "MIT License"},
        "topics": ["cli", "docs"],
        "default_branch": "main",
        "owner": {"login": OWNER, "html_url": f"https://github.com/{OWNER}"},
    }


@pytest.fixture
def sample_listings():
    """A small repository with an ignored dependency folder and nested sources"""
    return {
        "": [
            file_entry("package.json"),
            dir_entry("src"),
            file_entry("README.md"),
            dir_entry("node_modules"),
            dir_entry("tests"),
        ],
        "src": [
            file_entry("index.js", "src"),
            dir_entry("lib", "src"),
        ],
        "src/lib": [
            file_entry("util.js", "src/lib"),
            dir_entry("deep", "src/lib"),
        ],
        "src/lib/deep": [file_entry("leaf.js", "src/lib/deep")],
        "tests": [file_entry("index.test.js", "tests")],
        "node_modules": [file_entry("x.js", "node_modules")],
    }


@pytest.fixture
def fake_github(repo_data, sample_listings):
    return FakeGitHubAPI(
        repo_data=repo_data,
        listings=sample_listings,
        languages={"JavaScript": 12000, "CSS": 800, "HTML": 300},
        files={
            "package.json": '{"name": "demo"}',
            "README.md": "# demo",
            "src/index.js": "console.log('hi');",
            "src/lib/util.js": "module.exports = {};",
            "src/lib/deep/leaf.js": "// leaf",
            "tests/index.test.js": "test('x', () => {});",
        },
    )


@pytest.fixture
def run_with_client():
    """Run ``action(client)`` against a GitHubClient bound to a fake API."""

    def runner(fake: FakeGitHubAPI, action):
        async def scenario():
            async with GitHubClient(transport=fake.transport) as client:
                return await action(client)

        return asyncio.run(scenario())

    return runner


def pytest_configure(config):
    config.addinivalue_line("markers", "critical: marks tests as critical (must pass)")
    config.addinivalue_line(
        "markers", "important: marks tests as important (should pass)"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks fast tests of pure helpers")
    config.addinivalue_line("markers", "validation: marks edge-case validation tests")
    config.addinivalue_line("markers", "slow: marks tests as slow running")
    config.addinivalue_line("markers", "skip_on_windows: skip test on Windows")


def pytest_runtest_setup(item):
    """Skip certain tests on Windows"""
    if "skip_on_windows" in [marker.name for marker in item.iter_markers()]:
        if sys.platform.startswith("win"):
            pytest.skip("Skipped on Windows")
