# FILE PATH: replication_prompt.py
# LOCATION: Root directory of your project
# DESCRIPTION: Code replication prompt and the chat-completion call behind it

"""
Builds a "recreate this repository" prompt from the first few files of a
repository and sends it to an OpenAI-compatible chat-completion endpoint.

Rate limiting (HTTP 429) is not an error: a fixed explanatory response is
returned instead so the README can still be produced.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import httpx
import tiktoken
from tqdm import tqdm

from github_client import DirectoryEntry, GitHubClient, RepositoryInfo
from project_analysis import primary_language

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_OPENAI_URL = "https://api.openai.com/v1"
DEFAULT_MAX_FILES = 10
DEFAULT_TOKEN_LIMIT = 2_000

RATE_LIMIT_FALLBACK = """## Mock AI Response (Rate Limited)

Since the OpenAI API is rate limited, here's a sample code replication prompt structure:

**Project Analysis:**
- This appears to be a software project
- Main technologies: Check repository languages in the GitHub API response
- Key files to recreate: package.json, main source files, configuration files

**To recreate this project:**

1. Initialize project: `npm init -y` or equivalent for your package manager
2. Install dependencies: Copy package.json dependencies and devDependencies
3. Create file structure: Mirror the repository folder structure shown above
4. Implement code: Use the file contents provided in the prompt above
5. Configure build tools: Copy configuration files (webpack, babel, etc.)
6. Set up environment: Copy .env.example files and configure environment variables
7. Test the application: Run build and test commands as specified in package.json

**Note:** This is a mock response due to API rate limiting. Get a valid OpenAI API key with credits for real AI-powered code replication that analyzes your specific repository files."""

REPLICATION_FAILED_NOTE = (
    "## Code Replication Prompt\n\n"
    "*Failed to generate AI prompt. Please check your OpenAI API key and try again.*"
)

NO_RESPONSE = "No response generated"


class LLMError(RuntimeError):
    """Base class for chat-completion failures."""


class LLMConfigurationError(LLMError):
    """Raised when the completion client is missing credentials."""


class LLMRequestError(LLMError):
    """Raised when the completion endpoint answers with an error status."""


def count_tokens(text: str) -> int:
    """Count tokens in text using tiktoken."""
    encoding = tiktoken.get_encoding("cl100k_base")
    return len(encoding.encode(text))


def truncate_to_tokens(text: str, token_limit: int) -> str:
    """Cut ``text`` down to at most ``token_limit`` tokens."""
    encoding = tiktoken.get_encoding("cl100k_base")
    tokens = encoding.encode(text)
    if len(tokens) <= token_limit:
        return text
    return encoding.decode(tokens[:token_limit]) + "\n... (truncated)"


class OpenAIClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_OPENAI_URL,
        max_tokens: int = 2000,
        temperature: float = 0.7,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.transport = transport

    async def complete(self, prompt: str) -> str:
        if not self.api_key:
            raise LLMConfigurationError("OpenAI API key not configured")

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        logging.info(
            f"Sending completion request. Model: {self.model}, "
            f"prompt tokens: ~{count_tokens(prompt)}"
        )
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.transport
        ) as client:
            response = await client.post(
                f"{self.base_url}/chat/completions", json=payload, headers=headers
            )

        if response.status_code == 429:
            logging.warning("Completion endpoint rate limited, using fallback text")
            return RATE_LIMIT_FALLBACK

        if not response.is_success:
            raise LLMRequestError(
                f"Failed to call OpenAI API: {response.status_code} {response.reason_phrase}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise LLMRequestError(
                f"OpenAI API returned an invalid response: {str(e)}"
            ) from e
        if not isinstance(data, dict):
            raise LLMRequestError("OpenAI API returned an unexpected payload")

        choices = data.get("choices") or []
        if not choices:
            return NO_RESPONSE
        content = (choices[0].get("message") or {}).get("content")
        return content or NO_RESPONSE


async def fetch_file_contents(
    client: GitHubClient,
    owner: str,
    repo: str,
    files: Sequence[DirectoryEntry],
    max_files: int = DEFAULT_MAX_FILES,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
    show_progress: bool = False,
) -> List[Tuple[str, str]]:
    """Fetch up to ``max_files`` file bodies in order, skipping unreadable ones."""
    selected = list(files[:max_files])
    contents: List[Tuple[str, str]] = []

    for entry in tqdm(
        selected, desc="Fetching file contents", unit="file", disable=not show_progress
    ):
        content = await client.get_file_content(owner, repo, entry.path)
        if content is None:
            continue
        contents.append((entry.path, truncate_to_tokens(content, token_limit)))

    logging.info(f"Fetched {len(contents)} of {len(selected)} selected files")
    return contents


def build_replication_prompt(
    repo_info: RepositoryInfo,
    languages: Dict[str, int],
    file_contents: Sequence[Tuple[str, str]],
) -> str:
    file_blocks = "\n\n".join(
        f"### {path}\n```\n{content}\n```" for path, content in file_contents
    )
    return f"""You are an expert software engineer. I want you to recreate this exact GitHub repository: {repo_info.html_url}

Repository details:
- Name: {repo_info.name}
- Description: {repo_info.description}
- Language: {primary_language(languages)}

Here are the files from the repository:

{file_blocks}

Please provide:
1. Complete code for each file to recreate this project exactly
2. A step-by-step guide to set up and run the project
3. All necessary dependencies and configurations

Make sure the code is 100% identical and functional."""


def format_replication_section(prompt: str, ai_response: str) -> str:
    return (
        "## 🤖 AI-Generated Code Replication Prompt\n\n"
        "**Use this prompt with an AI agent to recreate the exact same project:**\n\n"
        f"```\n{prompt}\n```\n\n"
        f"**AI Response:**\n\n{ai_response}"
    )


async def generate_replication_section(
    client: GitHubClient,
    llm: OpenAIClient,
    owner: str,
    repo: str,
    repo_info: RepositoryInfo,
    languages: Dict[str, int],
    files: Sequence[DirectoryEntry],
    max_files: int = DEFAULT_MAX_FILES,
    token_limit: int = DEFAULT_TOKEN_LIMIT,
    show_progress: bool = False,
) -> str:
    """Fetch file bodies, ask the model, and format the README section."""
    file_contents = await fetch_file_contents(
        client,
        owner,
        repo,
        files,
        max_files=max_files,
        token_limit=token_limit,
        show_progress=show_progress,
    )
    prompt = build_replication_prompt(repo_info, languages, file_contents)
    ai_response = await llm.complete(prompt)
    return format_replication_section(prompt, ai_response)
