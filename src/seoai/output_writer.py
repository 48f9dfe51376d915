"""
Output Writer for seo-ai.

This module formats the assembled SEO output and either prints it or appends
it to a target source file.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console

TYPESCRIPT_EXTENSIONS = {".ts", ".tsx", ".mts"}
JAVASCRIPT_EXTENSIONS = {".js", ".jsx", ".mjs"}


def _dump(value) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def render_metadata_module(metadata: Dict, typed: bool) -> str:
    """
    Render ``metadata`` as Next.js ``metadata`` / ``viewport`` exports.

    The ``viewport`` key is exported separately, as Next.js requires.

    Args:
        metadata (Dict): Assembled metadata.
        typed (bool): Emit TypeScript type annotations.

    Returns:
        str: Module source.
    """
    metadata = dict(metadata)
    viewport = metadata.pop("viewport", None)

    lines = []
    if typed:
        types = "Metadata, Viewport" if viewport is not None else "Metadata"
        lines.append(f"import type {{ {types} }} from 'next'\n")

    annotation = ": Metadata" if typed else ""
    lines.append(f"export const metadata{annotation} = {_dump(metadata)}\n")
    if viewport is not None:
        annotation = ": Viewport" if typed else ""
        lines.append(f"export const viewport{annotation} = {_dump(viewport)}\n")
    return "\n".join(lines)


class OutputWriter:
    """
    Prints or writes the assembled SEO output.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.logger = logging.getLogger(__name__)

    def render(self, result, target: Optional[Path] = None) -> str:
        """
        Format ``result`` for ``target``.

        Args:
            result: Metadata dict (metadata mode) or HTML string (HTML mode).
            target (Optional[Path]): File the output is meant for. Its extension picks the format.

        Returns:
            str: Text to print or append.
        """
        if isinstance(result, str):
            return result

        suffix = target.suffix.lower() if target else ""
        if suffix in TYPESCRIPT_EXTENSIONS:
            return render_metadata_module(result, typed=True)
        if suffix in JAVASCRIPT_EXTENSIONS:
            return render_metadata_module(result, typed=False)
        return _dump(result) + "\n"

    def print_result(self, result) -> None:
        if isinstance(result, str):
            self.console.print(result, markup=False, highlight=False, emoji=False, soft_wrap=True)
        else:
            self.console.print_json(_dump(result))

    def write_snippet(self, result, target: Path) -> Path:
        """
        Append the rendered output to ``target``, creating parent directories.

        Args:
            result: Metadata dict or HTML string.
            target (Path): File to append to.

        Returns:
            Path: The file written.
        """
        target = Path(target)
        snippet = self.render(result, target)
        target.parent.mkdir(parents=True, exist_ok=True)

        existing = target.read_text(encoding="utf-8") if target.exists() else ""
        separator = ""
        if existing and not existing.endswith("\n"):
            separator = "\n\n"
        elif existing:
            separator = "\n"

        try:
            with open(target, "a", encoding="utf-8") as f:
                f.write(separator + snippet)
            self.logger.info(f"Wrote SEO output to {target}")
        except Exception as e:
            self.logger.error(f"Error writing {target}: {str(e)}")
            raise

        return target
