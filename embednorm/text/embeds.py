"""Embed token normalization.

Responsibilities:
- Find wiki-style embed tokens (`![[note#target|alias]]`) in arbitrary text.
- Classify each token target as an image or a plain link by its suffix.
- Rewrite image tokens first, then link tokens in the text between them.

Key public functions:
- `find_embed_tokens`: list matched tokens with offsets and targets.
- `normalize_embeds`: return text with every token rewritten.
"""

from __future__ import annotations

from dataclasses import dataclass
import re


IMAGE_EXTENSIONS = ("gif", "jpg", "jpeg", "tif", "tiff", "png", "webp", "bmp")

_IMAGE_SUFFIX = "|".join(f"(?<={extension})" for extension in IMAGE_EXTENSIONS)
_NOT_IMAGE_SUFFIX = "".join(f"(?<!{extension})" for extension in IMAGE_EXTENSIONS)

# Optional `note#` prefix and `|alias` suffix are matched but not captured.
_EMBED_TEMPLATE = r"!\[\[(?:[^#\n\]]+#)?(?P<target>[^\]\n|]+){suffix}(?:\|[^\]\n]+)?\]\]"

_IMAGE_EMBED_PATTERN = re.compile(
    _EMBED_TEMPLATE.format(suffix=f"(?:{_IMAGE_SUFFIX})"), re.IGNORECASE
)
_LINK_EMBED_PATTERN = re.compile(
    _EMBED_TEMPLATE.format(suffix=_NOT_IMAGE_SUFFIX), re.IGNORECASE
)


def is_image_target(target: str) -> bool:
    """Return whether `target` ends with a known image extension.

    This is a bare suffix test: no dot is required before the extension, so
    `longif` classifies as an image just like `Design.gif`.
    """

    return target.lower().endswith(IMAGE_EXTENSIONS)


@dataclass(frozen=True, slots=True)
class EmbedToken:
    """One embed token matched in source text.

    Attributes:
        start: Offset of the leading `!` in the source text.
        end: Offset just past the closing `]]`.
        raw: The matched token text.
        target: Link target with section prefix and alias suffix removed.
        is_image: Whether the token renders as a Markdown image.
    """

    start: int
    end: int
    raw: str
    target: str
    is_image: bool

    def render(self) -> str:
        """Render the Markdown replacement for this token."""

        marker = "!" if self.is_image else ""
        return f"\n\t{marker}[{self.target}]({self.target})"


def _token_from_match(match: re.Match[str], is_image: bool) -> EmbedToken:
    return EmbedToken(
        start=match.start(),
        end=match.end(),
        raw=match.group(0),
        target=match.group("target"),
        is_image=is_image,
    )


def _find_link_tokens(text: str, start: int, end: int) -> list[EmbedToken]:
    """Match non-image tokens inside `text[start:end]` only."""

    return [
        _token_from_match(match, False)
        for match in _LINK_EMBED_PATTERN.finditer(text, start, end)
    ]


def find_embed_tokens(text: str) -> list[EmbedToken]:
    """Return non-overlapping embed tokens ordered by offset.

    Image tokens take precedence: they are matched over the whole text first,
    and link tokens are then matched only in the gaps between image tokens.
    """

    image_tokens = [
        _token_from_match(match, True) for match in _IMAGE_EMBED_PATTERN.finditer(text)
    ]

    tokens = list(image_tokens)
    gap_start = 0
    for image_token in image_tokens:
        tokens.extend(_find_link_tokens(text, gap_start, image_token.start))
        gap_start = image_token.end
    tokens.extend(_find_link_tokens(text, gap_start, len(text)))
    return sorted(tokens, key=lambda token: token.start)


def normalize_embeds(text: str) -> str:
    """Rewrite every embed token in `text` into Markdown link or image syntax.

    Text outside tokens is passed through unchanged. Replacement text is never
    rescanned, so each token is rewritten exactly once.
    """

    if not text:
        return text

    parts: list[str] = []
    cursor = 0
    for token in find_embed_tokens(text):
        parts.append(text[cursor : token.start])
        parts.append(token.render())
        cursor = token.end
    parts.append(text[cursor:])
    return "".join(parts)


class EmbedNormalizer:
    """Normalize embed tokens in editor text."""

    def normalize(self, text: str) -> str:
        """Return `text` with every embed token rewritten."""

        return normalize_embeds(text)

    def count(self, text: str) -> int:
        """Return how many embed tokens `text` contains."""

        return len(find_embed_tokens(text))
