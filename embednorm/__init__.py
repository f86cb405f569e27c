"""Top-level package for embednorm.

This package rewrites wiki-style embed tokens (`![[target#section|alias]]`)
into standard Markdown links and images. The pure entry point is
`normalize_embeds`; `EmbedNormalizerPlugin` hosts it behind editor commands.
"""

from .host import EmbedNormalizerPlugin
from .text.embeds import normalize_embeds

__all__ = ["EmbedNormalizerPlugin", "normalize_embeds", "__version__"]

__version__ = "0.1.0"
