# src/seoai/config.py
"""Configuration settings for the seo-ai application."""

from pathlib import Path

APP_NAME = "seo-ai"

# Config store
CONFIG_DIR_ENV = "SEO_AI_CONFIG_DIR"
DEFAULT_CONFIG_DIR = Path.home() / ".config" / APP_NAME
CONFIG_FILE_NAME = "config.json"

# Providers. Keys are the names accepted by `config set KEY=VALUE`.
PROVIDER_KEY_NAMES = {
    "OPENAI_API_KEY": "openai",
    "MISTRAL_API_KEY": "mistral",
    "GROQ_API_KEY": "groq",
    "REPLICATE_API_TOKEN": "replicate",
}
LLM_PROVIDERS = ("openai", "mistral", "groq")
IMAGE_PROVIDERS = ("replicate",)

# LLM Configuration
PROVIDER_MODELS = {
    "openai": "gpt-4o-mini",
    "mistral": "mistral-large-latest",
    "groq": "llama-3.3-70b-versatile",
}
MOCK_ENV = "SEO_AI_MOCK"

# Image Configuration
OPENAI_IMAGES_URL = "https://api.openai.com/v1/images/generations"
OPENAI_IMAGE_MODEL = "dall-e-2"
OPENAI_IMAGE_SIZE = "256x256"
REPLICATE_API_URL = "https://api.replicate.com/v1/predictions"
REPLICATE_ICON_MODEL_VERSION = "5839ce85291601c6af252443a642a1cbd12eea8c83e41f27946b9212ff845dbf"
REPLICATE_REMBG_MODEL_VERSION = "fb8af171cfa1616ddcf1242c093f9c46bcada5ad4cf6f2fbe8b81b330ec5c003"
REPLICATE_POLL_INTERVAL = 1.0  # seconds between prediction status checks
REPLICATE_MAX_WAIT = 300  # seconds before a prediction is given up
HTTP_TIMEOUT = 60  # seconds

FAVICON_SIZE = 32
APPLE_ICON_SIZE = 180
PUBLIC_ICONS_DIR = Path("public") / "seo" / "icons"
PUBLIC_ICONS_URL = "/seo/icons"
APP_DIR_CANDIDATES = ("app", "src/app")
NEXT_CONFIG_FILES = ("next.config.js", "next.config.mjs", "next.config.ts")

# Site defaults used by the non-AI tags
SITE_URL_ENV = "SEO_AI_SITE_URL"
DEFAULT_SITE_URL = "https://example.com"
DEFAULT_APPLICATION_NAME = "wonderful-app"
DEFAULT_AUTHOR_NAME = "@seodev"
DEFAULT_AUTHOR_URL = "https://github.com/seodev"

# Project overview
MIN_DESCRIPTION_LENGTH = 10
KEY_FILES_THRESHOLD = 15  # Above this many tracked files the LLM picks the key ones.
MAX_KEY_FILES = 20
MAX_FILE_SIZE_KB = 256  # Maximum file size in KB to read. 0 for no limit.
MAX_OVERVIEW_CHARS = 60000  # Max characters of raw source sent as the overview.

# Exclusions applied to the tracked file list
DIRECTORIES_TO_IGNORE = {
    "node_modules",
    ".next",
    ".git",
    ".github",
    ".vscode",
    ".idea",
    "dist",
    "build",
    "out",
    "coverage",
    "public",
    "venv",
    ".venv",
    "__pycache__",
    "target",
    "vendor",
}
FILES_TO_IGNORE = {
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "poetry.lock",
    "uv.lock",
    "Cargo.lock",
    ".gitignore",
    ".gitattributes",
    ".npmrc",
    ".env",
    ".env.example",
    ".prettierrc",
    ".eslintrc",
    ".eslintrc.json",
    ".editorconfig",
    "LICENSE",
    "LICENSE.md",
}
DEFAULT_EXCLUSIONS = [
    "*.lock",
    "*.log",
    "*.min.js",
    "*.map",
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.webp",
    "*.ico",
    "*.svg",
    "*.woff",
    "*.woff2",
    "*.ttf",
    "*.eot",
    "*.mp4",
    "*.pdf",
    "*.zip",
]
