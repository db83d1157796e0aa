# FILE PATH: readme_generator.py
# LOCATION: Root directory of your project
# DESCRIPTION: Main script for turning a GitHub repository into a README.md

"""
README generator for public GitHub repositories.

Pipeline for one run:
1. Repository metadata, root listing and language statistics
2. Optional folder tree (bounded-depth traversal, rendered as ASCII)
3. Optional heuristic project analysis (offline)
4. Optional code replication prompt answered by a chat-completion model
5. Markdown assembly, written to README.md / clipboard / stdout

Listing failures during traversal degrade to empty subtrees and are
reported at the end of the run. A failing replication prompt is replaced
by a placeholder note; it never aborts the document.
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import httpx
import pyperclip

from generator_config import Config
from github_client import (
    GitHubClient,
    RepositoryNotFoundError,
    RepositoryUrlError,
    parse_repo_url,
)
from project_analysis import render_analysis
from readme_template import assemble_readme
from replication_prompt import (
    REPLICATION_FAILED_NOTE,
    LLMError,
    OpenAIClient,
    count_tokens,
    generate_replication_section,
)
from repo_tree import (
    DEFAULT_MAX_DEPTH,
    IGNORE_DIRS,
    build_tree,
    collect_files,
    render_tree,
)

DEFAULT_OUTPUT_FILE = "README.md"
README_MIME_TYPE = "text/markdown"


@dataclass
class GenerationOptions:
    include_tree: bool = True
    include_analysis: bool = True
    include_replication: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    exclude: List[str] = field(default_factory=list)

    @property
    def ignore_patterns(self) -> List[str]:
        return list(IGNORE_DIRS) + list(self.exclude)


@dataclass
class GenerationResult:
    markdown: str
    repo_name: str
    failed_paths: List[str] = field(default_factory=list)
    replication_failed: bool = False
    request_count: int = 0

    @property
    def token_count(self) -> int:
        return count_tokens(self.markdown)


def setup_logging(log_file: str, enable_logging: bool = True):
    """Configure logging with specified settings."""
    if enable_logging:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            filemode="w",
        )
    else:
        logging.basicConfig(level=logging.ERROR, handlers=[logging.NullHandler()])


def parse_patterns(pattern_list: List[str]) -> List[str]:
    """
    Parse pattern list handling both space-separated and comma-separated values.
    Returns a cleaned list of patterns with whitespace stripped.
    """
    processed = []
    for item in pattern_list:
        processed.extend(item.split(","))
    return [p.strip() for p in processed if p.strip()]


async def generate_documentation(
    repo_url: str,
    options: Optional[GenerationOptions] = None,
    config: Optional[Config] = None,
    github_transport: Optional[httpx.AsyncBaseTransport] = None,
    llm_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GenerationResult:
    """
    Run one generation for ``repo_url``.

    Raises RepositoryUrlError for malformed input and RepositoryNotFoundError
    when the metadata lookup fails. Everything after that degrades instead
    of raising.
    """
    options = options or GenerationOptions()
    config = config or Config()

    owner, repo = parse_repo_url(repo_url)
    logging.info(f"Generating documentation for {owner}/{repo}")

    async with GitHubClient(
        token=config.github_token,
        base_url=config.github_api_url,
        timeout=config.request_timeout,
        transport=github_transport,
    ) as client:
        repo_info = await client.get_repository(owner, repo)
        root_entries = await client.list_directory(owner, repo)
        languages = await client.get_languages(owner, repo)

        folder_tree = ""
        if options.include_tree:
            logging.info(f"Building folder tree (max depth {options.max_depth})")
            tree = await build_tree(
                client,
                owner,
                repo,
                max_depth=options.max_depth,
                ignore_patterns=options.ignore_patterns,
            )
            folder_tree = render_tree(tree)

        analysis = ""
        if options.include_analysis:
            logging.info("Generating project analysis")
            analysis = render_analysis(repo_info, root_entries, languages)

        replication = ""
        replication_failed = False
        if options.include_replication:
            logging.info("Generating code replication prompt")
            llm = OpenAIClient(
                api_key=config.openai_api_key,
                model=config.openai_model,
                base_url=config.openai_base_url,
                transport=llm_transport,
            )
            try:
                files = await collect_files(
                    client, owner, repo, ignore_patterns=options.ignore_patterns
                )
                replication = await generate_replication_section(
                    client,
                    llm,
                    owner,
                    repo,
                    repo_info,
                    languages,
                    files,
                    max_files=config.max_prompt_files,
                    token_limit=config.prompt_token_limit,
                    show_progress=config.show_progress,
                )
            except (LLMError, httpx.HTTPError) as e:
                logging.error(f"Failed to generate code replication prompt: {str(e)}")
                replication = REPLICATION_FAILED_NOTE
                replication_failed = True

        markdown = assemble_readme(
            repo_info, root_entries, languages, folder_tree, analysis, replication
        )

        if client.failed_paths:
            logging.warning(
                f"{len(client.failed_paths)} listings failed: {client.failed_paths}"
            )

        return GenerationResult(
            markdown=markdown,
            repo_name=repo_info.name,
            failed_paths=list(client.failed_paths),
            replication_failed=replication_failed,
            request_count=client.request_count,
        )


def write_readme(markdown: str, output_path: str) -> Path:
    path = Path(output_path)
    if path.parent and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(markdown, encoding="utf-8")
    logging.info(f"README written to {path}")
    return path


def copy_to_clipboard(markdown: str) -> bool:
    try:
        pyperclip.copy(markdown)
    except pyperclip.PyperclipException as e:
        logging.error(f"Error copying to clipboard: {str(e)}")
        print(f"Error: Failed to copy content to clipboard: {e}", file=sys.stderr)
        return False
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a README.md for a public GitHub repository"
    )

    parser.add_argument(
        "repo_url", help="Repository URL, e.g. https://github.com/owner/repo"
    )

    # Output configuration
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output file path, written as UTF-8 {README_MIME_TYPE} "
        f"(default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the document to stdout instead of writing a file",
    )
    parser.add_argument(
        "--copy", action="store_true", help="Also copy the document to the clipboard"
    )

    # Sections
    parser.add_argument(
        "--no-tree", action="store_true", help="Leave out the folder structure"
    )
    parser.add_argument(
        "--no-analysis",
        action="store_true",
        help="Leave out the heuristic project analysis",
    )
    parser.add_argument(
        "--replication-prompt",
        action="store_true",
        help="Add a code replication prompt answered by the OpenAI API",
    )

    # Traversal
    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Folder tree depth in directory levels (default: {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument(
        "--exclude",
        nargs="+",
        default=[],
        help="Additional directory names or wildcards to skip, beyond the defaults. "
        "Accepts space-separated or comma-separated values.",
    )

    # Credentials and limits
    parser.add_argument(
        "--github-token", help="GitHub token (default: $GITHUB_TOKEN)"
    )
    parser.add_argument(
        "--openai-api-key", help="OpenAI API key (default: $OPENAI_API_KEY)"
    )
    parser.add_argument("--model", help="Chat-completion model name")
    parser.add_argument(
        "--max-prompt-files",
        type=int,
        help="Files included in the replication prompt (default: 10)",
    )
    parser.add_argument(
        "--timeout", type=float, help="HTTP timeout in seconds (default: 30)"
    )
    parser.add_argument(
        "--no-progress", action="store_true", help="Disable progress bars"
    )

    # Logging configuration
    parser.add_argument(
        "--enable-logging",
        action="store_true",
        default=False,
        help="Enable detailed logging to file",
    )
    parser.add_argument(
        "--log-file",
        default="readme_generation.log",
        help="Log file path (default: readme_generation.log)",
    )
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.enable_logging)

    if args.max_depth < 1:
        print(f"Error: --max-depth must be at least 1 (got {args.max_depth})")
        sys.exit(1)

    user_exclude_patterns = parse_patterns(args.exclude)
    if user_exclude_patterns:
        logging.info(f"Additional exclude patterns: {user_exclude_patterns}")

    options = GenerationOptions(
        include_tree=not args.no_tree,
        include_analysis=not args.no_analysis,
        include_replication=args.replication_prompt,
        max_depth=args.max_depth,
        exclude=user_exclude_patterns,
    )
    config = Config.from_env(
        github_token=args.github_token,
        openai_api_key=args.openai_api_key,
        openai_model=args.model,
        max_prompt_files=args.max_prompt_files,
        request_timeout=args.timeout,
        show_progress=False if args.no_progress else None,
    )

    try:
        result = asyncio.run(generate_documentation(args.repo_url, options, config))
    except (RepositoryUrlError, RepositoryNotFoundError) as e:
        logging.error(str(e))
        print(f"Error: {e}")
        sys.exit(1)

    if args.stdout:
        print(result.markdown)
    else:
        path = write_readme(result.markdown, args.output)
        print(f"\nDocumentation generated successfully!")
        print(f"Total tokens: {result.token_count:,}")
        print(f"API requests: {result.request_count}")
        print(f"Output written to: {path}")

    if args.copy and copy_to_clipboard(result.markdown):
        print("Copied to clipboard!", file=sys.stderr)

    if result.replication_failed:
        print(
            "\nWarning: code replication prompt failed, a placeholder was used.",
            file=sys.stderr,
        )

    if result.failed_paths:
        print(f"\nCould not list {len(result.failed_paths)} paths", file=sys.stderr)
        for failed in result.failed_paths[:5]:
            print(f"  - {failed}", file=sys.stderr)
        if len(result.failed_paths) > 5:
            print(f"  ... and {len(result.failed_paths) - 5} more", file=sys.stderr)


if __name__ == "__main__":
    main()
