"""
Project Overview Builder for seo-ai.

This module lists the git-tracked files of a project, picks the ones worth
reading, and turns them into the overview text handed to the generators.
"""

import fnmatch
import logging
import os
from pathlib import Path, PurePosixPath
from typing import List, Optional, Tuple

import git
from git import Repo

from seoai.config import (
    DEFAULT_EXCLUSIONS,
    DIRECTORIES_TO_IGNORE,
    FILES_TO_IGNORE,
    KEY_FILES_THRESHOLD,
    MAX_FILE_SIZE_KB,
    MAX_KEY_FILES,
    MAX_OVERVIEW_CHARS,
)
from seoai.generators import SeoGenerator


def is_ignored(file_path: str) -> bool:
    """
    Check a tracked path against the static ignore lists.

    Args:
        file_path (str): Repository-relative path using forward slashes.

    Returns:
        bool: True if the file should not be read.
    """
    path = PurePosixPath(file_path)
    if any(part in DIRECTORIES_TO_IGNORE for part in path.parts[:-1]):
        return True
    if path.name in FILES_TO_IGNORE:
        return True
    return any(fnmatch.fnmatch(path.name, pattern) for pattern in DEFAULT_EXCLUSIONS)


def filter_files(files: List[str]) -> List[str]:
    return [f for f in files if f and not is_ignored(f)]


class ProjectOverviewBuilder:
    """
    Builds the project overview from a git working tree.
    """

    def __init__(
        self,
        generator: SeoGenerator,
        repo_path: str = ".",
        summarize: bool = False,
        key_files_threshold: int = KEY_FILES_THRESHOLD,
        max_key_files: int = MAX_KEY_FILES,
        max_file_size_kb: int = MAX_FILE_SIZE_KB,
        max_chars: int = MAX_OVERVIEW_CHARS,
    ):
        """
        Initialize the overview builder.

        Args:
            generator (SeoGenerator): Generator used for key-file selection and summaries.
            repo_path (str): Directory to scan.
            summarize (bool): Summarize each file with the LLM instead of sending raw contents.
            key_files_threshold (int): File count above which the LLM selects the key files.
            max_key_files (int): Maximum number of files the LLM may select.
            max_file_size_kb (int): Files larger than this are skipped. 0 for no limit.
            max_chars (int): Maximum length of a raw overview.
        """
        self.generator = generator
        self.repo_path = Path(repo_path)
        self.summarize = summarize
        self.key_files_threshold = key_files_threshold
        self.max_key_files = max_key_files
        self.max_file_size_kb = max_file_size_kb
        self.max_chars = max_chars
        self.logger = logging.getLogger(__name__)
        self._repo: Optional[Repo] = None

    def open_repository(self) -> Optional[Repo]:
        """
        Open the git repository containing ``repo_path``.

        Returns:
            Optional[Repo]: The repository, or None if the path is not inside a work tree.
        """
        if self._repo is not None:
            return self._repo
        try:
            repo = Repo(self.repo_path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError):
            self.logger.info(f"{self.repo_path} is not a git repository")
            return None
        if repo.bare:
            self.logger.info(f"{self.repo_path} is a bare repository")
            return None
        self._repo = repo
        return repo

    def is_git_repository(self) -> bool:
        return self.open_repository() is not None

    @property
    def root(self) -> Path:
        return self.repo_path

    def subdirectory_prefix(self) -> str:
        """
        Path of ``repo_path`` inside the work tree, as a ``/``-terminated prefix.

        Returns:
            str: Empty when ``repo_path`` is the work tree root.
        """
        repo = self.open_repository()
        if repo is None:
            return ""
        relative = self.repo_path.resolve().relative_to(Path(repo.working_tree_dir).resolve())
        prefix = relative.as_posix()
        return "" if prefix == "." else f"{prefix}/"

    def list_tracked_files(self) -> List[str]:
        """
        List the files tracked at HEAD under ``repo_path``.

        Returns:
            List[str]: Paths relative to ``repo_path``. Empty if there is no commit yet.
        """
        repo = self.open_repository()
        if repo is None:
            return []
        try:
            output = repo.git.ls_tree("-r", "HEAD", "--name-only")
        except git.exc.GitCommandError as e:
            self.logger.warning(f"Could not list tracked files: {e}")
            return []
        prefix = self.subdirectory_prefix()
        return [
            line[len(prefix) :]
            for line in output.splitlines()
            if line.strip() and line.startswith(prefix)
        ]

    def select_files(self, files: List[str]) -> List[str]:
        """Return ``files`` as is, or the LLM's pick when there are too many."""
        if len(files) > self.key_files_threshold:
            return self.generator.select_key_files(files, self.max_key_files)
        return files

    def read_files(self, paths: List[str]) -> List[Tuple[str, str]]:
        """
        Read the selected files as UTF-8 text.

        Files that are missing, unreadable, too large or empty are dropped.

        Returns:
            List[Tuple[str, str]]: (path, content) pairs in input order.
        """
        contents: List[Tuple[str, str]] = []
        for rel_path in paths:
            file_path = self.root / rel_path
            try:
                file_size_kb = os.path.getsize(file_path) / 1024
                if self.max_file_size_kb > 0 and file_size_kb > self.max_file_size_kb:
                    self.logger.warning(
                        f"Skipping file due to size limit ({file_size_kb:.2f}KB): {rel_path}"
                    )
                    continue
                with open(file_path, "r", encoding="utf-8") as f:
                    content = f.read()
            except (OSError, UnicodeDecodeError) as e:
                self.logger.warning(f"Error reading file {rel_path}: {str(e)}")
                continue

            if not content.strip():
                self.logger.warning(f"Skipping empty file: {rel_path}")
                continue
            contents.append((rel_path, content))

        self.logger.info(f"Read {len(contents)} of {len(paths)} files")
        return contents

    def raw_overview(self, contents: List[Tuple[str, str]]) -> str:
        overview = "".join(f"Path: {path}\nContent:\n{content}\n\n" for path, content in contents)
        if len(overview) > self.max_chars:
            self.logger.info(f"Truncating overview from {len(overview)} to {self.max_chars} characters")
            overview = overview[: self.max_chars]
        return overview

    def summarized_overview(self, contents: List[Tuple[str, str]]) -> str:
        code_summary = ""
        for path, content in contents:
            try:
                summary = self.generator.summarize_file(path, content)
            except Exception as e:
                self.logger.error(f"Error summarizing file {path}: {str(e)}")
                continue
            code_summary += f"Path: {path}\nSummary: {summary}\n\n"

        if not code_summary:
            return ""
        return self.generator.generate_project_overview(code_summary)

    def build(self) -> str:
        """
        Build the project overview.

        Returns:
            str: Overview text. Empty when no tracked file could be read.
        """
        files = filter_files(self.list_tracked_files())
        self.logger.info(f"Found {len(files)} candidate files")
        if not files:
            return ""

        selected = self.select_files(files)
        contents = self.read_files(selected)
        if not contents:
            return ""

        if self.summarize:
            return self.summarized_overview(contents)
        return self.raw_overview(contents)
