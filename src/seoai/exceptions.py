"""Exception types raised by seo-ai."""


class SeoAIError(Exception):
    """Base class for seo-ai errors."""


class UnknownTagError(SeoAIError):
    """Raised when a tag name has no entry in the tag catalog."""

    def __init__(self, tag):
        self.tag = tag
        super().__init__(f"Unknown SEO tag: {tag}")


class ProviderConfigError(SeoAIError):
    """Raised when a provider name or API key cannot be used."""


class ImageGenerationError(SeoAIError):
    """Raised when the image service does not return a usable image."""
