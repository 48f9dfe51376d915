"""
Project information for the non-AI tags.

Reads the package name and author from ``package.json`` or ``pyproject.toml``.
"""

import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from seoai.config import (
    DEFAULT_APPLICATION_NAME,
    DEFAULT_AUTHOR_NAME,
    DEFAULT_AUTHOR_URL,
    DEFAULT_SITE_URL,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProjectInfo:
    name: str = DEFAULT_APPLICATION_NAME
    author_name: str = DEFAULT_AUTHOR_NAME
    author_url: str = DEFAULT_AUTHOR_URL


@dataclass(frozen=True)
class TagContext:
    """Everything the catalog functions may read."""

    project: ProjectInfo = ProjectInfo()
    site_url: str = DEFAULT_SITE_URL


def _from_package_json(path: Path) -> Optional[ProjectInfo]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: expected a JSON object")
        return None

    name = data.get("name") or DEFAULT_APPLICATION_NAME
    author = data.get("author")
    if isinstance(author, str) and author:
        # "Name <email> (url)" is allowed by npm; keep the name part only.
        author_name = author.split("<")[0].split("(")[0].strip() or author
        return ProjectInfo(name, author_name, f"https://github.com/{author_name}")
    if isinstance(author, dict):
        return ProjectInfo(
            name,
            author.get("name") or DEFAULT_AUTHOR_NAME,
            author.get("url") or DEFAULT_AUTHOR_URL,
        )
    return ProjectInfo(name=name)


def _from_pyproject(path: Path) -> Optional[ProjectInfo]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None

    project = data.get("project", {})
    name = project.get("name") or DEFAULT_APPLICATION_NAME
    authors = project.get("authors") or []
    if authors and authors[0].get("name"):
        author_name = authors[0]["name"]
        urls = project.get("urls", {})
        author_url = urls.get("Homepage") or f"https://github.com/{author_name}"
        return ProjectInfo(name, author_name, author_url)
    return ProjectInfo(name=name)


def load_project_info(root: Path) -> ProjectInfo:
    """
    Load project information from the manifests found in ``root``.

    Args:
        root (Path): Project root directory.

    Returns:
        ProjectInfo: Information from the first readable manifest, or the defaults.
    """
    package_json = root / "package.json"
    if package_json.is_file():
        info = _from_package_json(package_json)
        if info:
            return info

    pyproject = root / "pyproject.toml"
    if pyproject.is_file():
        info = _from_pyproject(pyproject)
        if info:
            return info

    logger.debug(f"No project manifest found in {root}, using defaults")
    return ProjectInfo()
