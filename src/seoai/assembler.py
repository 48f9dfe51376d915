"""
Metadata assembler for seo-ai.

Walks the selected tags in order and builds either a metadata dict or an HTML
string, routing ``core`` and ``icons`` to the AI generators and everything else
to the tag catalog.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from seoai.exceptions import UnknownTagError
from seoai.project_info import TagContext
from seoai.tags import SHARED_IMAGES, SeoTag, lookup, resolve_tag


@dataclass(frozen=True)
class SharedDefaultRule:
    """
    Merge ``values`` into every key in ``keys`` once all of them are present.

    Existing values inside the target objects win over the defaults.
    """

    keys: Tuple[str, ...]
    values: Dict = field(default_factory=dict)

    def applies_to(self, metadata: Dict) -> bool:
        return all(isinstance(metadata.get(key), dict) for key in self.keys)

    def apply(self, metadata: Dict) -> Dict:
        if not self.applies_to(metadata):
            return metadata
        result = dict(metadata)
        for key in self.keys:
            result[key] = {**copy.deepcopy(self.values), **metadata[key]}
        return result


SHARED_DEFAULT_RULES: List[SharedDefaultRule] = [
    SharedDefaultRule(keys=("openGraph", "twitter"), values={"images": SHARED_IMAGES}),
]


class MetadataAssembler:
    """
    Builds the SEO output for an ordered tag selection.
    """

    def __init__(
        self,
        context: TagContext,
        generator=None,
        icon_pipeline=None,
        rules: Optional[List[SharedDefaultRule]] = None,
    ):
        """
        Initialize the assembler.

        Args:
            context (TagContext): Context passed to the catalog functions.
            generator: ``SeoGenerator`` used for the ``core`` tag.
            icon_pipeline: ``IconPipeline`` used for the ``icons`` tag.
            rules (Optional[List[SharedDefaultRule]]): Post-assembly rules, metadata mode only.
        """
        self.context = context
        self.generator = generator
        self.icon_pipeline = icon_pipeline
        self.rules = SHARED_DEFAULT_RULES if rules is None else rules
        self.logger = logging.getLogger(__name__)

    def _resolve(self, tag) -> Optional[SeoTag]:
        try:
            return resolve_tag(tag)
        except UnknownTagError as e:
            self.logger.warning(f"{e}, skipping")
            return None

    def assemble_metadata(self, tags: Iterable, description: str = "") -> Dict:
        """
        Build the metadata object for ``tags``.

        Args:
            tags (Iterable): Tag names or ``SeoTag`` values, in selection order.
            description (str): Project overview for the AI-backed tags.

        Returns:
            Dict: Merged metadata. Later tags overwrite earlier keys.
        """
        metadata: Dict = {}
        for name in tags:
            tag = self._resolve(name)
            if tag is None:
                continue

            if tag is SeoTag.CORE:
                metadata.update(self.generator.generate_core_metadata(description))
            elif tag is SeoTag.ICONS:
                metadata["icons"] = self.icon_pipeline.generate_metadata(description)
            else:
                metadata.update(lookup(tag).metadata(self.context))

        for rule in self.rules:
            metadata = rule.apply(metadata)
        return metadata

    def assemble_html(self, tags: Iterable, description: str = "") -> str:
        """
        Build the HTML meta tags for ``tags``.

        Args:
            tags (Iterable): Tag names or ``SeoTag`` values, in selection order.
            description (str): Project overview for the AI-backed tags.

        Returns:
            str: Concatenated markup.
        """
        parts: List[str] = []
        for name in tags:
            tag = self._resolve(name)
            if tag is None:
                continue

            if tag is SeoTag.CORE:
                parts.append(self.generator.generate_core_html(description))
            elif tag is SeoTag.ICONS:
                parts.append(self.icon_pipeline.generate_html(description))
            else:
                entry = lookup(tag)
                if not entry.supports_html:
                    self.logger.warning(f"Tag '{tag.value}' has no HTML form, skipping")
                    continue
                parts.append(entry.html(self.context))
        return "".join(parts)
