"""Unit tests for embed token discovery and normalization."""

from __future__ import annotations

import pytest

from embednorm.text.embeds import (
    EmbedNormalizer,
    find_embed_tokens,
    is_image_target,
    normalize_embeds,
)


def test_normalize_embeds_returns_empty_text_unchanged() -> None:
    """Empty input should produce empty output."""

    assert normalize_embeds("") == ""


@pytest.mark.parametrize(
    "text",
    [
        "Plain paragraph with no embeds.",
        "A [[wiki link]] and ![alt](img.png) stay as they are.",
        "Broken ![[ token without close",
        "![[]] and ![[|alias]] have no target",
        "![[split\nacross.png]]",
    ],
)
def test_normalize_embeds_is_identity_without_tokens(text: str) -> None:
    """Text with no matching embed token should pass through verbatim."""

    assert normalize_embeds(text) == text


def test_normalize_embeds_strips_alias_and_keeps_path() -> None:
    """Alias suffix is dropped; a leading path segment stays in the target."""

    assert (
        normalize_embeds("![[notes/Diagram.png|My Diagram]]")
        == "\n\t![notes/Diagram.png](notes/Diagram.png)"
    )


def test_normalize_embeds_strips_section_prefix() -> None:
    """A `note#` prefix is dropped and the heading becomes the target."""

    assert normalize_embeds("![[MyNote#Heading]]") == "\n\t[Heading](Heading)"


def test_normalize_embeds_keeps_hash_when_prefix_would_leave_empty_target() -> None:
    """Without text after `#`, the whole path is the target."""

    assert normalize_embeds("![[a#]]") == "\n\t[a#](a#)"


def test_normalize_embeds_only_strips_up_to_first_hash() -> None:
    """Only the first `#`-terminated segment is treated as the section prefix."""

    assert normalize_embeds("![[a#b#c.png]]") == "\n\t![b#c.png](b#c.png)"


@pytest.mark.parametrize(
    "target",
    ["a.gif", "a.jpg", "a.jpeg", "a.tif", "a.tiff", "a.png", "a.webp", "a.bmp", "PHOTO.JPG"],
)
def test_normalize_embeds_renders_image_form_for_image_targets(target: str) -> None:
    """Known image suffixes, in any case, render as Markdown images."""

    assert normalize_embeds(f"![[{target}]]") == f"\n\t![{target}]({target})"


@pytest.mark.parametrize("target", ["Meeting notes", "doc.pdf", "image.png.md", "archive.svg"])
def test_normalize_embeds_renders_link_form_for_other_targets(target: str) -> None:
    """Targets without an image suffix render as plain Markdown links."""

    assert normalize_embeds(f"![[{target}]]") == f"\n\t[{target}]({target})"


def test_normalize_embeds_classifies_bare_suffix_without_dot_as_image() -> None:
    """Suffix test needs no dot: `longif` counts as an image target.

    Kept literal on purpose; a dot-aware check would change this output.
    """

    assert is_image_target("longif") is True
    assert normalize_embeds("![[longif]]") == "\n\t![longif](longif)"


def test_normalize_embeds_rewrites_mixed_tokens_in_order() -> None:
    """Every token is rewritten by its own class and surrounding text is kept."""

    text = "Intro ![[one.gif]] middle ![[Two#Part|shown]] end ![[three.webp|x|y]]."

    assert normalize_embeds(text) == (
        "Intro \n\t![one.gif](one.gif) middle \n\t[Part](Part) end "
        "\n\t![three.webp](three.webp)."
    )


def test_normalize_embeds_does_not_rescan_replacement_text() -> None:
    """Replacement output that resembles a token must not be rewritten again."""

    assert normalize_embeds("![[a![[b.png]]c]]") == "\n\t![a![[b.png](a![[b.png)c]]"


def test_find_embed_tokens_reports_offsets_and_targets() -> None:
    """Token discovery should expose offsets, raw text, and classification."""

    text = "x ![[a.png]] y ![[Note#Sec|alias]]"
    tokens = find_embed_tokens(text)

    assert [(token.start, token.end) for token in tokens] == [(2, 12), (15, 34)]
    assert [token.raw for token in tokens] == ["![[a.png]]", "![[Note#Sec|alias]]"]
    assert [token.target for token in tokens] == ["a.png", "Sec"]
    assert [token.is_image for token in tokens] == [True, False]


def test_embed_normalizer_counts_and_normalizes() -> None:
    """The class wrapper should delegate to the pure functions."""

    normalizer = EmbedNormalizer()
    text = "![[a.bmp]] ![[b]]"

    assert normalizer.count(text) == 2
    assert normalizer.normalize(text) == "\n\t![a.bmp](a.bmp) \n\t[b](b)"


def test_normalize_embeds_gives_image_tokens_precedence_over_link_tokens() -> None:
    """An image token inside an unterminated link alias wins over the link."""

    assert normalize_embeds("![[x|![[b.png]]") == "![[x|\n\t![b.png](b.png)"


def test_normalize_embeds_matches_links_only_between_image_tokens() -> None:
    """Link tokens are found in the text before, between, and after images."""

    text = "![[doc]] ![[x|![[b.png]] ![[c]]"

    assert normalize_embeds(text) == (
        "\n\t[doc](doc) ![[x|\n\t![b.png](b.png) \n\t[c](c)"
    )
    assert [token.is_image for token in find_embed_tokens(text)] == [False, True, False]
