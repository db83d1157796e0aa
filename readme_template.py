# FILE PATH: readme_template.py
# LOCATION: Root directory of your project
# DESCRIPTION: Fixed README.md layout filled from repository data

from typing import Dict, Sequence

from github_client import DirectoryEntry, RepositoryInfo

INSTALL_COMMANDS = [
    ("package.json", "# Install dependencies\nnpm install\n# or\nyarn install\n# or\npnpm install"),
    ("requirements.txt", "# Install dependencies\npip install -r requirements.txt"),
    ("pom.xml", "# Build the project\nmvn clean install"),
]

FOOTER = "*Generated with ❤️ by repo-readme-generator*"


def build_install_section(repo_info: RepositoryInfo, entries: Sequence[DirectoryEntry]) -> str:
    names = {entry.name for entry in entries}
    commands = [
        "# Clone the repository",
        f"git clone {repo_info.clone_url}",
        "",
        "# Navigate to project directory",
        f"cd {repo_info.name}",
    ]
    for marker, install in INSTALL_COMMANDS:
        if marker in names:
            commands.extend(["", install])
            break

    body = "\n".join(commands)
    return f"## Installation\n\n```bash\n{body}\n```"


def build_table_of_contents(analysis: str, replication: str, folder_tree: str) -> str:
    items = ["- [About](#about)"]
    if analysis:
        items.append("- [AI-Generated Project Analysis](#ai-generated-project-analysis)")
    if replication:
        items.append("- [Code Replication Prompt](#code-replication-prompt)")
    items.append("- [Technologies](#technologies)")
    if folder_tree:
        items.append("- [Project Structure](#project-structure)")
    items.extend(
        [
            "- [Installation](#installation)",
            "- [Usage](#usage)",
            "- [Features](#features)",
            "- [Contributing](#contributing)",
            "- [License](#license)",
            "- [Contact](#contact)",
        ]
    )
    return "\n".join(items)


def build_technologies_section(languages: Dict[str, int]) -> str:
    if languages:
        listing = "\n".join(f"- {language}" for language in languages)
    else:
        listing = "- Check repository for details"
    return f"## 🛠️ Technologies\n\nThis project is built with:\n\n{listing}"


def build_structure_section(repo_name: str, folder_tree: str) -> str:
    return f"## 📁 Project Structure\n\n```\n{repo_name}/\n{folder_tree}\n```"


def build_license_section(repo_info: RepositoryInfo) -> str:
    if repo_info.license_name:
        text = (
            f"This project is licensed under the {repo_info.license_name} "
            "- see the [LICENSE](LICENSE) file for details."
        )
    else:
        text = (
            "License information not available. "
            "Please check the repository for license details."
        )
    return f"## 📄 License\n\n{text}"


def assemble_readme(
    repo_info: RepositoryInfo,
    entries: Sequence[DirectoryEntry],
    languages: Dict[str, int],
    folder_tree: str = "",
    analysis: str = "",
    replication: str = "",
) -> str:
    """
    Combine repository data and the optional generated sections into one
    Markdown document. Empty optional sections are left out together with
    their table-of-contents entries.
    """
    description = repo_info.description or "A GitHub repository"
    about = repo_info.description or "This project provides various functionalities and features."

    sections = [
        f"# {repo_info.name}\n\n{description}",
        "## 📋 Table of Contents\n\n"
        + build_table_of_contents(analysis, replication, folder_tree),
        f"## 🎯 About\n\n{about}\n\n"
        "**Repository Stats:**\n"
        f"- ⭐ Stars: {repo_info.stargazers_count}\n"
        f"- 🍴 Forks: {repo_info.forks_count}\n"
        f"- 👁️ Watchers: {repo_info.watchers_count}\n"
        f"- 🐛 Open Issues: {repo_info.open_issues_count}",
    ]

    if analysis:
        sections.append(analysis.strip())
    if replication:
        sections.append(replication.strip())

    sections.append(build_technologies_section(languages))

    if folder_tree:
        sections.append(build_structure_section(repo_info.name, folder_tree))

    sections.extend(
        [
            build_install_section(repo_info, entries),
            "## 🚀 Usage\n\n"
            "```bash\n"
            "# Add specific usage instructions here\n"
            "# Example: npm start, python main.py, etc.\n"
            "```\n\n"
            "For detailed usage instructions, please refer to the project "
            "documentation or source code.",
            "## ✨ Features\n\n"
            "- Feature 1: [Describe key feature]\n"
            "- Feature 2: [Describe key feature]\n"
            "- Feature 3: [Describe key feature]\n\n"
            "*Note: Review the codebase to identify and list specific features*",
            "## 🤝 Contributing\n\n"
            "Contributions are welcome! Please follow these steps:\n\n"
            "1. Fork the repository\n"
            "2. Create a new branch (`git checkout -b feature/amazing-feature`)\n"
            "3. Commit your changes (`git commit -m 'Add some amazing feature'`)\n"
            "4. Push to the branch (`git push origin feature/amazing-feature`)\n"
            "5. Open a Pull Request",
            build_license_section(repo_info),
            "## 📧 Contact\n\n"
            f"**Project Link:** [{repo_info.html_url}]({repo_info.html_url})\n\n"
            f"**Author:** [{repo_info.owner_login}]({repo_info.owner_html_url})",
            f"---\n\n{FOOTER}",
        ]
    )

    return "\n\n".join(sections) + "\n"
