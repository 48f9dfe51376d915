"""
Icon pipeline for seo-ai.

Generates an icon from the project overview and writes a favicon and an
apple-touch icon, either into a detected Next.js app directory or under
``public/seo/icons``.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from PIL import Image

from seoai.config import (
    APP_DIR_CANDIDATES,
    APPLE_ICON_SIZE,
    FAVICON_SIZE,
    PUBLIC_ICONS_DIR,
    PUBLIC_ICONS_URL,
)
from seoai.generators import SeoGenerator
from seoai.schemas import IconPaths

FAVICON_NAME = "favicon.ico"
APPLE_ICON_NAME = "apple-icon.png"
LAYOUT_FILES = ("layout.tsx", "layout.jsx", "layout.ts", "layout.js")


@dataclass(frozen=True)
class IconDestination:
    directory: Path
    url_prefix: str


def find_app_directory(root: Path) -> Optional[Path]:
    """Return the Next.js app router directory under ``root``, if there is one."""
    for candidate in APP_DIR_CANDIDATES:
        app_dir = root / candidate
        if any((app_dir / layout).is_file() for layout in LAYOUT_FILES):
            return app_dir
    return None


def resolve_destination(root: Path) -> IconDestination:
    app_dir = find_app_directory(root)
    if app_dir is not None:
        # Next.js serves favicon.ico and apple-icon.png from the app directory root.
        return IconDestination(app_dir, "")
    return IconDestination(root / PUBLIC_ICONS_DIR, PUBLIC_ICONS_URL)


def write_icons(image_bytes: bytes, destination: IconDestination) -> IconPaths:
    """
    Convert ``image_bytes`` into a favicon and an apple icon on disk.

    Args:
        image_bytes (bytes): Source image in any format Pillow can read.
        destination (IconDestination): Where to write and how the files are served.

    Returns:
        IconPaths: URL paths of the written icons.
    """
    destination.directory.mkdir(parents=True, exist_ok=True)

    with Image.open(io.BytesIO(image_bytes)) as source:
        image = source.convert("RGBA")

    favicon = image.resize((FAVICON_SIZE, FAVICON_SIZE), Image.LANCZOS)
    favicon.save(destination.directory / FAVICON_NAME, format="ICO", sizes=[(FAVICON_SIZE, FAVICON_SIZE)])

    apple = image.resize((APPLE_ICON_SIZE, APPLE_ICON_SIZE), Image.LANCZOS)
    apple.save(destination.directory / APPLE_ICON_NAME, format="PNG")

    return IconPaths(
        icon=f"{destination.url_prefix}/{FAVICON_NAME}",
        apple=f"{destination.url_prefix}/{APPLE_ICON_NAME}",
    )


def icon_links_html(paths: IconPaths) -> str:
    return (
        f'<link rel="icon" href="{paths.icon}" />\n'
        f'<link rel="apple-touch-icon" href="{paths.apple}" />\n'
    )


class IconPipeline:
    """
    Runs definition, image generation and file writing for the ``icons`` tag.
    """

    def __init__(self, generator: SeoGenerator, image_client, project_root: Path):
        """
        Initialize the icon pipeline.

        Args:
            generator (SeoGenerator): Generator used for the icon definition.
            image_client: Object with ``generate(icon_definition) -> bytes``.
            project_root (Path): Root of the project the icons are written into.
        """
        self.generator = generator
        self.image_client = image_client
        self.project_root = Path(project_root)
        self.logger = logging.getLogger(__name__)

    def create_icons(self, description: str) -> IconPaths:
        definition = self.generator.generate_icon_definition(description)
        self.logger.info(f"Icon definition: {definition}")
        image_bytes = self.image_client.generate(definition)
        destination = resolve_destination(self.project_root)
        paths = write_icons(image_bytes, destination)
        self.logger.info(f"Icons written to {destination.directory}")
        return paths

    def generate_metadata(self, description: str) -> Dict[str, str]:
        """Create the icons and return ``{"icon": ..., "apple": ...}``."""
        return self.create_icons(description).model_dump()

    def generate_html(self, description: str) -> str:
        """Create the icons and return their ``<link>`` tags."""
        return icon_links_html(self.create_icons(description))
