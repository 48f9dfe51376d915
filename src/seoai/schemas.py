"""
Structured output models for seo-ai.

These models double as the schemas handed to the LLM for structured generation,
so field descriptions are written for the model as much as for the reader.
Field names are snake_case in Python and camelCase on the wire.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_metadata(self) -> dict:
        """Dump the model with camelCase keys, as expected by framework metadata."""
        return self.model_dump(by_alias=True)


class OpenGraph(_CamelModel):
    type: str = Field(description="Open Graph type, usually 'website'")
    url: str = Field(description="Canonical URL of the site")
    title: str
    description: str
    locale: str = Field(description="Locale such as 'en_US'")
    site_name: str


class Twitter(_CamelModel):
    card: str = Field(description="Twitter card type, e.g. 'summary_large_image'")
    site: str = Field(description="Twitter handle of the site, e.g. '@project'")
    title: str
    description: str


class CoreSeoTags(_CamelModel):
    """Core SEO tags generated in a single structured call."""

    title: str = Field(description="SEO title, at most 60 characters")
    description: str = Field(description="Meta description, at most 160 characters")
    keywords: List[str] = Field(description="Relevant search keywords")
    open_graph: OpenGraph
    twitter: Twitter
    robots: str = Field(description="Robots directive, e.g. 'index, follow'")
    category: str = Field(description="Category of the site")


class KeyProjectFiles(BaseModel):
    """Paths the LLM considers essential to understand a project."""

    files: List[str] = Field(description="Relative file paths, most relevant first")


class IconPaths(BaseModel):
    """Public URL paths of the generated icons."""

    icon: str
    apple: str
