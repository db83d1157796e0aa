# FILE PATH: project_analysis.py
# LOCATION: Root directory of your project
# DESCRIPTION: Heuristic project classification from the root listing

"""
Offline project analysis for the README.

Everything here is a pure function over the root directory listing, the
language byte-count map and the repository counters. No network access.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from github_client import DirectoryEntry, RepositoryInfo

# Checked in order; the first marker present wins
PROJECT_MARKERS = [
    (("requirements.txt", "setup.py"), "Python application"),
    (("pom.xml",), "Java Maven project"),
    (("build.gradle",), "Java Gradle project"),
    (("Cargo.toml",), "Rust project"),
    (("go.mod",), "Go application"),
]

NODE_VARIANTS = [
    (("next.config.js", "next.config.ts"), "Next.js web application"),
    (("vite.config.js", "vite.config.ts"), "Vite-powered web application"),
    (("tsconfig.json",), "TypeScript/JavaScript application"),
]

DEFAULT_PROJECT_TYPE = "software project"

CI_MARKERS = {".github", ".gitlab-ci.yml", ".circleci"}
DOCKER_MARKERS = {"Dockerfile", "docker-compose.yml"}
DOCS_MARKERS = {"docs", "documentation"}
TEST_MARKERS = {"tests", "__tests__"}

STAR_THRESHOLDS = [(100, "strong"), (10, "moderate")]
FORK_THRESHOLDS = [(50, "active"), (10, "growing")]
ISSUE_THRESHOLDS = [(50, "(actively maintained)"), (0, "(under development)")]


def _names(entries: Iterable[DirectoryEntry]) -> set:
    return {entry.name for entry in entries}


def detect_project_type(entries: Sequence[DirectoryEntry]) -> str:
    names = _names(entries)

    if "package.json" in names:
        for markers, label in NODE_VARIANTS:
            if names.intersection(markers):
                return label
        return "Node.js application"

    for markers, label in PROJECT_MARKERS:
        if names.intersection(markers):
            return label

    return DEFAULT_PROJECT_TYPE


def detect_quality_signals(entries: Sequence[DirectoryEntry]) -> Dict[str, bool]:
    names = _names(entries)
    return {
        "tests": any("test" in name.lower() for name in names)
        or bool(names & TEST_MARKERS),
        "ci": bool(names & CI_MARKERS),
        "docker": bool(names & DOCKER_MARKERS),
        "docs": bool(names & DOCS_MARKERS),
    }


def _label(value: int, thresholds, default: str) -> str:
    for limit, label in thresholds:
        if value > limit:
            return label
    return default


def classify_maturity(stars: int, forks: int, open_issues: int) -> Dict[str, str]:
    return {
        "stars": _label(stars, STAR_THRESHOLDS, "emerging"),
        "forks": _label(forks, FORK_THRESHOLDS, "initial"),
        "issues": _label(open_issues, ISSUE_THRESHOLDS, "(stable)"),
    }


def primary_language(languages: Dict[str, int]) -> str:
    """GitHub returns languages largest first, so the first key wins."""
    return next(iter(languages), "Unknown")


def quality_indicators(
    signals: Dict[str, bool], license_name: Optional[str]
) -> List[str]:
    indicators = []
    if signals["tests"]:
        indicators.append("✅ Includes test suite")
    if signals["ci"]:
        indicators.append("✅ CI/CD pipeline configured")
    if signals["docker"]:
        indicators.append("✅ Docker support")
    if signals["docs"]:
        indicators.append("✅ Documentation available")
    if license_name:
        indicators.append(f"✅ Licensed under {license_name}")
    return indicators


def recommended_use_cases(
    project_type: str, language: str, signals: Dict[str, bool]
) -> List[str]:
    cases = []
    if "web application" in project_type:
        cases.append(f"Building modern web applications with {language}")
        cases.append("Learning web development best practices")
    elif "Python" in project_type:
        cases.append("Data processing and analysis")
        cases.append("Backend API development")
    elif "Java" in project_type:
        cases.append("Enterprise application development")
        cases.append("Building scalable backend services")

    if signals["docker"]:
        cases.append("Containerized deployment scenarios")
    if signals["tests"]:
        cases.append("Learning testing methodologies")
    return cases


def render_analysis(
    repo_info: RepositoryInfo,
    entries: Sequence[DirectoryEntry],
    languages: Dict[str, int],
) -> str:
    """Render the project analysis section as Markdown."""
    project_type = detect_project_type(entries)
    signals = detect_quality_signals(entries)
    language = primary_language(languages)
    language_count = len(languages)
    maturity = classify_maturity(
        repo_info.stargazers_count,
        repo_info.forks_count,
        repo_info.open_issues_count,
    )

    other_languages = ""
    if language_count > 1:
        plural = "s" if language_count > 2 else ""
        other_languages = f" (+ {language_count - 1} other{plural})"

    parts = [
        "### 🤖 AI-Generated Project Analysis\n",
        f"**Project Type:** {project_type}\n",
        f"**Primary Language:** {language}{other_languages}\n",
    ]

    if repo_info.topics:
        topics = ", ".join(f"`{topic}`" for topic in repo_info.topics)
        parts.append(f"**Topics:** {topics}\n")

    parts.append(
        "**Project Maturity:**\n"
        f"- {repo_info.stargazers_count} stars indicate {maturity['stars']} community interest\n"
        f"- {repo_info.forks_count} forks suggest {maturity['forks']} community contributions\n"
        f"- {repo_info.open_issues_count} open issues {maturity['issues']}\n"
    )

    indicators = quality_indicators(signals, repo_info.license_name)
    if indicators:
        parts.append("**Quality Indicators:**\n" + "\n".join(indicators) + "\n")

    use_cases = recommended_use_cases(project_type, language, signals)
    recommended = "**Recommended Use Cases:**\n"
    if use_cases:
        recommended += "\n".join(f"- {case}" for case in use_cases) + "\n"
    parts.append(recommended)

    return "\n".join(parts)
