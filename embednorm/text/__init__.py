"""Text normalization components.

This package provides the pure embed-token rewriting used by every host
command.
"""

from .embeds import (
    IMAGE_EXTENSIONS,
    EmbedNormalizer,
    EmbedToken,
    find_embed_tokens,
    is_image_target,
    normalize_embeds,
)

__all__ = [
    "IMAGE_EXTENSIONS",
    "EmbedNormalizer",
    "EmbedToken",
    "find_embed_tokens",
    "is_image_target",
    "normalize_embeds",
]
