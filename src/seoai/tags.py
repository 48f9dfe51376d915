"""
Tag catalog for seo-ai.

Every non-AI tag maps to a pair of producers: one returning a single-key
metadata dict and one returning literal HTML markup. ``core`` and ``icons`` are
valid tags but are produced by the LLM-backed generators, not by the catalog.
"""

from dataclasses import dataclass
from enum import Enum
from html import escape
from typing import Callable, Dict, Iterable, List, Optional

from seoai.exceptions import UnknownTagError
from seoai.project_info import TagContext


class SeoTag(str, Enum):
    CORE = "core"
    ICONS = "icons"
    APPLICATION_NAME = "applicationName"
    METADATA_BASE = "metadataBase"
    AUTHORS = "authors"
    CREATOR = "creator"
    PUBLISHER = "publisher"
    CLASSIFICATION = "classification"
    BOOKMARKS = "bookmarks"
    ASSETS = "assets"
    ARCHIVES = "archives"
    REFERRER = "referrer"
    ALTERNATES = "alternates"
    FORMAT_DETECTION = "formatDetection"
    MANIFEST = "manifest"
    VERIFICATION = "verification"
    VIEWPORT = "viewport"
    GENERATOR = "generator"


AI_TAGS = (SeoTag.CORE, SeoTag.ICONS)

# Labels shown by the interactive tag selection, in display order.
TAG_LABELS = {
    SeoTag.CORE: "Core SEO tags (recommended)",
    SeoTag.ICONS: "Icons (recommended)",
    SeoTag.APPLICATION_NAME: "Application Name",
    SeoTag.METADATA_BASE: "URL prefix for metadata fields",
    SeoTag.AUTHORS: "Authors",
    SeoTag.CREATOR: "Creator",
    SeoTag.PUBLISHER: "Publisher",
    SeoTag.CLASSIFICATION: "Classification",
    SeoTag.BOOKMARKS: "Bookmarks",
    SeoTag.ASSETS: "Assets",
    SeoTag.ARCHIVES: "Archives",
    SeoTag.REFERRER: "Referrer",
    SeoTag.ALTERNATES: "Canonical URL",
    SeoTag.FORMAT_DETECTION: "Format Detection",
    SeoTag.MANIFEST: "Manifest",
    SeoTag.VERIFICATION: "Verification",
    SeoTag.VIEWPORT: "Colors",
    SeoTag.GENERATOR: "Generator used",
}

MetadataProducer = Callable[[TagContext], Dict]
HtmlProducer = Callable[[TagContext], str]


@dataclass(frozen=True)
class CatalogEntry:
    metadata: MetadataProducer
    html: Optional[HtmlProducer] = None

    @property
    def supports_html(self) -> bool:
        return self.html is not None


def _meta(name: str, content: str) -> str:
    return f'<meta name="{escape(name)}" content="{escape(content)}" />\n'


def _link(rel: str, href: str) -> str:
    return f'<link rel="{escape(rel)}" href="{escape(href)}" />\n'


def _site(ctx: TagContext, path: str = "") -> str:
    return ctx.site_url.rstrip("/") + path


VERIFICATION_CODE = "1234567890"
THEME_COLORS = [
    {"media": "(prefers-color-scheme: dark)", "color": "#000000"},
    {"media": "(prefers-color-scheme: light)", "color": "#ffffff"},
]
COLOR_SCHEME = "dark"

# Shared image defaults injected into openGraph and twitter after assembly.
SHARED_IMAGES = [
    {
        "url": "/seo/banner/og.png",
        "width": 1200,
        "height": 675,
        "alt": "Banner AI",
    }
]


def _authors_html(ctx: TagContext) -> str:
    return _meta("author", ctx.project.author_name) + _link("author", ctx.project.author_url)


def _verification_html(ctx: TagContext) -> str:
    return (
        _meta("google-site-verification", VERIFICATION_CODE)
        + _meta("yandex-verification", VERIFICATION_CODE)
        + _meta("me", VERIFICATION_CODE)
    )


def _viewport_html(ctx: TagContext) -> str:
    tags = "".join(
        f'<meta name="theme-color" media="{escape(c["media"])}" content="{c["color"]}" />\n'
        for c in THEME_COLORS
    )
    return tags + _meta("color-scheme", COLOR_SCHEME)


TAG_CATALOG: Dict[SeoTag, CatalogEntry] = {
    SeoTag.APPLICATION_NAME: CatalogEntry(
        lambda ctx: {"applicationName": ctx.project.name},
        lambda ctx: _meta("application-name", ctx.project.name),
    ),
    # Next.js only; plain HTML has no equivalent of a metadata URL prefix.
    SeoTag.METADATA_BASE: CatalogEntry(lambda ctx: {"metadataBase": _site(ctx)}),
    SeoTag.AUTHORS: CatalogEntry(
        lambda ctx: {"authors": {"name": ctx.project.author_name, "url": ctx.project.author_url}},
        _authors_html,
    ),
    SeoTag.CREATOR: CatalogEntry(
        lambda ctx: {"creator": ctx.project.author_name},
        lambda ctx: _meta("creator", ctx.project.author_name),
    ),
    SeoTag.PUBLISHER: CatalogEntry(
        lambda ctx: {"publisher": "seo-AI"},
        lambda ctx: _meta("publisher", "seo AI"),
    ),
    SeoTag.CLASSIFICATION: CatalogEntry(
        lambda ctx: {"classification": "My Classification"},
        lambda ctx: _meta("classification", "My Classification"),
    ),
    SeoTag.BOOKMARKS: CatalogEntry(
        lambda ctx: {"bookmarks": _site(ctx, "/bookmarks")},
        lambda ctx: _link("bookmarks", _site(ctx, "/bookmarks")),
    ),
    SeoTag.ASSETS: CatalogEntry(
        lambda ctx: {"assets": _site(ctx, "/assets")},
        lambda ctx: _link("assets", _site(ctx, "/assets")),
    ),
    SeoTag.ARCHIVES: CatalogEntry(
        lambda ctx: {"archives": _site(ctx, "/archives")},
        lambda ctx: _link("archives", _site(ctx, "/archives")),
    ),
    SeoTag.REFERRER: CatalogEntry(
        lambda ctx: {"referrer": "origin"},
        lambda ctx: _meta("referrer", "origin"),
    ),
    SeoTag.ALTERNATES: CatalogEntry(
        lambda ctx: {"alternates": {"canonical": _site(ctx)}},
        lambda ctx: _link("canonical", _site(ctx)),
    ),
    SeoTag.FORMAT_DETECTION: CatalogEntry(
        lambda ctx: {"formatDetection": {"telephone": False}},
        lambda ctx: _meta("format-detection", "telephone=no"),
    ),
    SeoTag.MANIFEST: CatalogEntry(
        lambda ctx: {"manifest": _site(ctx, "/manifest.json")},
        lambda ctx: _link("manifest", _site(ctx, "/manifest.json")),
    ),
    SeoTag.VERIFICATION: CatalogEntry(
        lambda ctx: {
            "verification": {
                "google": VERIFICATION_CODE,
                "yandex": VERIFICATION_CODE,
                "me": VERIFICATION_CODE,
            }
        },
        _verification_html,
    ),
    SeoTag.VIEWPORT: CatalogEntry(
        lambda ctx: {
            "viewport": {
                "themeColor": [dict(c) for c in THEME_COLORS],
                "colorScheme": COLOR_SCHEME,
            }
        },
        _viewport_html,
    ),
    SeoTag.GENERATOR: CatalogEntry(
        lambda ctx: {"generator": "AI"},
        lambda ctx: _meta("generator", "AI"),
    ),
}


def resolve_tag(name) -> SeoTag:
    """
    Convert a tag name to its ``SeoTag``.

    Raises:
        UnknownTagError: If the name is not a known tag.
    """
    if isinstance(name, SeoTag):
        return name
    try:
        return SeoTag(str(name).strip())
    except ValueError:
        raise UnknownTagError(name) from None


def lookup(tag) -> CatalogEntry:
    """
    Return the catalog entry for ``tag``.

    Raises:
        UnknownTagError: If the tag is unknown or is one of the AI-backed tags.
    """
    resolved = resolve_tag(tag)
    entry = TAG_CATALOG.get(resolved)
    if entry is None:
        raise UnknownTagError(tag)
    return entry


def split_known_tags(names: Iterable[str]):
    """
    Split ``names`` into known tags (order and duplicates kept) and unknown names.

    Returns:
        Tuple[List[SeoTag], List[str]]: Known tags and rejected names.
    """
    known: List[SeoTag] = []
    unknown: List[str] = []
    for name in names:
        try:
            known.append(resolve_tag(name))
        except UnknownTagError:
            unknown.append(name)
    return known, unknown
