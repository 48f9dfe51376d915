"""
Prompt templates for seo-ai.

This module contains the prompt templates used for LLM interactions.
"""

from llama_index.core.prompts import PromptTemplate


# Prompt for the structured core tags (title, description, keywords, openGraph, ...)
CORE_SEO_PROMPT = PromptTemplate(
    """You are a SEO expert. Analyze the project information below and generate comprehensive, SEO-friendly metadata.
Use {site_url} as the site URL.

Project information:
{description}"""
)

# Prompt for the core tags rendered directly as HTML
CORE_HTML_PROMPT = PromptTemplate(
    """You are a SEO expert. Given the project description below, generate HTML meta tags for the following fields:

{fields}

Include title, description, type, url, site_name and locale for openGraph, and card, site, title and description for twitter.
For openGraph and twitter also include the image, width, height and alt meta tags. Use {site_url} as the site URL.

Return the meta tags directly without adding any extra characters like backticks, explanations, or formatting.

Project description:
{description}"""
)

# Prompt for the short icon definition used as the image prompt
ICON_DEFINITION_PROMPT = PromptTemplate(
    """Given the following app description, return a definition of the app using only three words.

App description:
{description}

Definition:"""
)

# Prompt for choosing the files worth reading in a large repository
KEY_FILES_PROMPT = PromptTemplate(
    """You are given the list of files tracked in a software project, one path per line.
Select at most {max_files} files that best explain what the project does, who it is for and its main features.
Prefer README files, package manifests, entry points, pages and routes. Only return paths from the list.

Files:
{files}"""
)

# Prompt for summarizing a single file
FILE_SUMMARY_PROMPT = PromptTemplate(
    """Summarize this file in a few sentences, focusing on what it tells about the project's purpose,
audience and features.

File path: {file_path}

File content:
{content}

Summary:"""
)

# Prompt for combining the file summaries into one project overview
PROJECT_OVERVIEW_PROMPT = PromptTemplate(
    """Create a concise, high-level overview of this project based on the provided file summaries.
Your overview should include:
1. The project's main purpose and functionality
2. Its intended audience
3. Notable features or capabilities

File summaries:
{summaries}

Project Overview:"""
)
