"""
Mock LLM module for seo-ai.

This module provides an offline stand-in for the provider LLMs so the whole
generate flow can run without an API key or network access.
"""

import logging
from typing import Type

from pydantic import BaseModel

from seoai.prompts import (
    CORE_HTML_PROMPT,
    FILE_SUMMARY_PROMPT,
    ICON_DEFINITION_PROMPT,
    PROJECT_OVERVIEW_PROMPT,
)
from seoai.schemas import CoreSeoTags, KeyProjectFiles, OpenGraph, Twitter


class MockLLM:
    """
    Mock LLM class exposing the subset of the llama-index LLM interface seo-ai uses.
    """

    def __init__(self, model="mock"):
        """
        Initialize the mock LLM.

        Args:
            model (str): Model name (not used in mock)
        """
        self.model = model
        self.logger = logging.getLogger(__name__)

    def predict(self, prompt, **prompt_args):
        """
        Mock text prediction.

        Args:
            prompt (PromptTemplate): Prompt template
            **prompt_args: Template variables

        Returns:
            str: Mock response
        """
        text = prompt.format(**prompt_args)
        self.logger.info(f"Mock LLM received prompt: {text[:50]}...")

        # Pick the mock response by template
        if prompt is ICON_DEFINITION_PROMPT:
            return "modern web app"
        elif prompt is CORE_HTML_PROMPT:
            return (
                "<title>Mock Project</title>\n"
                '<meta name="description" content="This is a mock description." />\n'
                '<meta property="og:title" content="Mock Project" />\n'
                '<meta name="twitter:card" content="summary_large_image" />\n'
            )
        elif prompt is FILE_SUMMARY_PROMPT:
            return "This is a mock summary of the file."
        elif prompt is PROJECT_OVERVIEW_PROMPT:
            return "This is a mock overview of the project."
        else:
            return "This is a generic mock response for testing purposes."

    def structured_predict(self, output_cls: Type[BaseModel], prompt, **prompt_args):
        """
        Mock structured prediction.

        Args:
            output_cls (Type[BaseModel]): Model to return an instance of
            prompt (PromptTemplate): Prompt template
            **prompt_args: Template variables

        Returns:
            BaseModel: Instance of ``output_cls`` filled with mock data
        """
        self.logger.info(f"Mock LLM structured call for {output_cls.__name__}")

        if output_cls is CoreSeoTags:
            site_url = prompt_args.get("site_url", "https://example.com")
            return CoreSeoTags(
                title="Mock Project",
                description="This is a mock description of the project.",
                keywords=["mock", "project", "seo"],
                open_graph=OpenGraph(
                    type="website",
                    url=site_url,
                    title="Mock Project",
                    description="This is a mock description of the project.",
                    locale="en_US",
                    site_name="Mock Project",
                ),
                twitter=Twitter(
                    card="summary_large_image",
                    site="@mockproject",
                    title="Mock Project",
                    description="This is a mock description of the project.",
                ),
                robots="index, follow",
                category="technology",
            )
        if output_cls is KeyProjectFiles:
            files = [line for line in prompt_args.get("files", "").splitlines() if line]
            max_files = int(prompt_args.get("max_files", len(files)))
            return KeyProjectFiles(files=files[:max_files])

        raise ValueError(f"MockLLM has no mock data for {output_cls.__name__}")
