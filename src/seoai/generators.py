"""
LLM-backed generators for seo-ai.

This module turns a project overview into core SEO tags, icon definitions and
project summaries by calling the configured LLM.
"""

import logging
import re
from typing import Dict, List

from seoai.config import DEFAULT_SITE_URL, MAX_KEY_FILES
from seoai.llm_service import LLMService
from seoai.prompts import (
    CORE_HTML_PROMPT,
    CORE_SEO_PROMPT,
    FILE_SUMMARY_PROMPT,
    ICON_DEFINITION_PROMPT,
    KEY_FILES_PROMPT,
    PROJECT_OVERVIEW_PROMPT,
)
from seoai.schemas import CoreSeoTags, KeyProjectFiles

CORE_HTML_FIELDS = ["title", "description", "keywords", "openGraph", "twitter", "robots", "category"]

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\n?|\n?```$")


class SeoGenerator:
    """
    Generates the AI-backed parts of the SEO output.
    """

    def __init__(self, llm_service: LLMService, site_url: str = DEFAULT_SITE_URL):
        """
        Initialize the generator.

        Args:
            llm_service (LLMService): The LLM service instance.
            site_url (str): Site URL the model should use in URLs it writes.
        """
        self.llm_service = llm_service
        self.site_url = site_url
        self.logger = logging.getLogger(__name__)

    def generate_core_metadata(self, description: str) -> Dict:
        """
        Generate the core tags as a metadata object in one structured call.

        Args:
            description (str): Project overview.

        Returns:
            Dict: title, description, keywords, openGraph, twitter, robots and category.
        """
        self.logger.info("Generating core SEO metadata...")
        result = self.llm_service.structured_predict(
            CoreSeoTags,
            CORE_SEO_PROMPT,
            description=description,
            site_url=self.site_url,
        )
        return result.to_metadata()

    def generate_core_html(self, description: str) -> str:
        """
        Generate the core tags as HTML markup.

        Args:
            description (str): Project overview.

        Returns:
            str: Meta tags, newline terminated.
        """
        self.logger.info("Generating core SEO HTML tags...")
        text = self.llm_service.predict(
            CORE_HTML_PROMPT,
            description=description,
            fields=", ".join(CORE_HTML_FIELDS),
            site_url=self.site_url,
        )
        # Models sometimes ignore the instruction and fence the markup anyway
        text = _CODE_FENCE.sub("", text.strip()).strip()
        return f"{text}\n" if text else ""

    def generate_icon_definition(self, description: str) -> str:
        self.logger.info("Generating icon definition...")
        definition = self.llm_service.predict(ICON_DEFINITION_PROMPT, description=description)
        return definition.strip().strip('."')

    def select_key_files(self, files: List[str], max_files: int = MAX_KEY_FILES) -> List[str]:
        """
        Ask the LLM which files best describe the project.

        Only paths that were offered are kept, and never more than ``max_files``.

        Args:
            files (List[str]): Candidate file paths.
            max_files (int): Maximum number of paths to return.

        Returns:
            List[str]: Selected paths, in the order the LLM ranked them.
        """
        self.logger.info(f"Selecting up to {max_files} key files out of {len(files)}...")
        result = self.llm_service.structured_predict(
            KeyProjectFiles,
            KEY_FILES_PROMPT,
            files="\n".join(files),
            max_files=max_files,
        )
        offered = set(files)
        selected: List[str] = []
        for path in result.files:
            path = path.strip().removeprefix("./")
            if path in offered and path not in selected:
                selected.append(path)
            if len(selected) >= max_files:
                break

        if not selected:
            self.logger.warning("The LLM selected no known files, using the first files instead")
            selected = files[:max_files]
        return selected

    def summarize_file(self, file_path: str, content: str) -> str:
        self.logger.info(f"Summarizing file: {file_path}")
        return self.llm_service.predict(FILE_SUMMARY_PROMPT, file_path=file_path, content=content)

    def generate_project_overview(self, code_summary: str) -> str:
        self.logger.info("Generating project overview...")
        return self.llm_service.predict(PROJECT_OVERVIEW_PROMPT, summaries=code_summary)
