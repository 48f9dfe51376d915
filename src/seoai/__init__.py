"""
seo-ai: AI-Powered SEO Metadata Generator

A command-line tool that reads a project's description or its git-tracked source files,
asks an LLM provider for SEO metadata, and emits it either as HTML meta tags or as a
framework metadata object.
"""

__version__ = "0.1.0"
