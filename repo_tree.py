# FILE PATH: repo_tree.py
# LOCATION: Root directory of your project
# DESCRIPTION: Remote directory traversal and ASCII tree rendering

"""
Repository tree acquisition and rendering.

build_tree    - bounded-depth traversal producing sorted TreeNode lists
render_tree   - box-drawing text for a TreeNode list
collect_files - unbounded traversal producing a flat file manifest

Traversals are strictly sequential: every listing is awaited before the
next request is issued.
"""

import fnmatch
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from github_client import DirectoryEntry, EntryKind, GitHubClient

DEFAULT_MAX_DEPTH = 3

IGNORE_DIRS = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".next",
    "coverage",
    "__pycache__",
    "venv",
    ".venv",
)

LAST_CONNECTOR = "└── "
MID_CONNECTOR = "├── "
VERTICAL_PAD = "│   "
BLANK_PAD = "    "
DIR_GLYPH = "📁 "
FILE_GLYPH = "📄 "


@dataclass
class TreeNode:
    name: str
    kind: EntryKind
    children: Optional[List["TreeNode"]] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


def should_ignore_name(name: str, ignore_patterns: Iterable[str]) -> bool:
    """Match a single path component against exact names or wildcards."""
    for pattern in ignore_patterns:
        clean_pattern = pattern.rstrip("/\\")
        if not clean_pattern:
            continue
        if name == clean_pattern or fnmatch.fnmatchcase(name, clean_pattern):
            return True
    return False


def node_sort_key(node: TreeNode):
    # Directories first, then case-insensitive with lowercase ahead of uppercase
    return (not node.is_dir, node.name.casefold(), node.name.swapcase())


def sort_nodes(nodes: List[TreeNode]) -> List[TreeNode]:
    return sorted(nodes, key=node_sort_key)


async def build_tree(
    client: GitHubClient,
    owner: str,
    repo: str,
    path: str = "",
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ignore_patterns: Iterable[str] = IGNORE_DIRS,
) -> List[TreeNode]:
    """
    Expand the listing at ``path`` into TreeNodes, recursing into directories
    until ``max_depth`` levels have been fetched.

    A directory reached at the depth boundary is emitted without children and
    its contents are never requested. Ignored names contribute no node.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be a positive integer, got {max_depth}")

    if depth >= max_depth:
        return []

    ignore_patterns = tuple(ignore_patterns)
    entries = await client.list_directory(owner, repo, path)
    tree: List[TreeNode] = []

    for entry in entries:
        if should_ignore_name(entry.name, ignore_patterns):
            logging.debug(f"Ignored entry: {entry.path}")
            continue

        if entry.is_dir:
            children = await build_tree(
                client,
                owner,
                repo,
                entry.path,
                depth + 1,
                max_depth,
                ignore_patterns,
            )
            tree.append(
                TreeNode(entry.name, EntryKind.DIRECTORY, children or None)
            )
        else:
            tree.append(TreeNode(entry.name, EntryKind.FILE))

    return sort_nodes(tree)


def render_tree(nodes: List[TreeNode], prefix: str = "") -> str:
    """Render nodes as an indented box-drawing diagram (no trailing newline)."""
    lines: List[str] = []
    _render_lines(nodes, prefix, lines)
    return "\n".join(lines)


def _render_lines(nodes: List[TreeNode], prefix: str, lines: List[str]) -> None:
    for index, node in enumerate(nodes):
        is_last = index == len(nodes) - 1
        connector = LAST_CONNECTOR if is_last else MID_CONNECTOR
        glyph = DIR_GLYPH if node.is_dir else FILE_GLYPH
        lines.append(f"{prefix}{connector}{glyph}{node.name}")

        if node.children:
            extension = BLANK_PAD if is_last else VERTICAL_PAD
            _render_lines(node.children, prefix + extension, lines)


async def collect_files(
    client: GitHubClient,
    owner: str,
    repo: str,
    path: str = "",
    ignore_patterns: Iterable[str] = IGNORE_DIRS,
    files: Optional[List[DirectoryEntry]] = None,
) -> List[DirectoryEntry]:
    """
    Gather every file entry below ``path`` depth-first, in API order.

    There is no depth bound. Ignored directories are never visited, and a
    failed listing simply contributes no files.
    """
    if files is None:
        files = []
    ignore_patterns = tuple(ignore_patterns)

    for entry in await client.list_directory(owner, repo, path):
        if entry.api_type == "file":
            files.append(entry)
        elif entry.is_dir and not should_ignore_name(entry.name, ignore_patterns):
            await collect_files(client, owner, repo, entry.path, ignore_patterns, files)

    return files
