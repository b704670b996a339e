from __future__ import annotations

"""
Unit tests for the Front Matter Parser.

Verifies block detection, the flat 'key: value' grammar and the
pass-through behavior for documents without front matter.
"""

from docnav.core.parsing.front_matter import parse_front_matter
from docnav.domain.nav_models import ParsedDocument


def test_parse_splits_metadata_and_content() -> None:
    raw = "---\ntitle: Hello\ndescription:  A page  \n---\n# Body\n\ntext\n"
    parsed = parse_front_matter(raw)

    assert parsed.metadata == {"title": "Hello", "description": "A page"}
    assert parsed.content == "# Body\n\ntext\n"


def test_parse_without_front_matter_returns_input() -> None:
    raw = "# Just a heading\n\nand text"
    parsed = parse_front_matter(raw)

    assert parsed == ParsedDocument(metadata={}, content=raw)


def test_parse_skips_unrecognized_lines() -> None:
    """Nested values, list items and keys without values are ignored."""
    raw = (
        "---\n"
        "title: Ok\n"
        "tags:\n"
        "  - one\n"
        "bad-key: nope\n"
        "# comment\n"
        "  modtime: 2024-05-01 10:00:00  \n"
        "---\n"
        "body"
    )
    parsed = parse_front_matter(raw)

    assert parsed.metadata == {"title": "Ok", "modtime": "2024-05-01 10:00:00"}
    assert parsed.content == "body"


def test_parse_value_keeps_inner_colons() -> None:
    parsed = parse_front_matter("---\ntitle: Time: 10:30\n---\nx")
    assert parsed.metadata["title"] == "Time: 10:30"


def test_parse_front_matter_only_document_has_empty_content() -> None:
    parsed = parse_front_matter("---\ntitle: Stub\n---\n")

    assert parsed.metadata == {"title": "Stub"}
    assert parsed.content == ""


def test_parse_requires_leading_delimiter() -> None:
    """A block that does not start the document is body text."""
    raw = "intro\n---\ntitle: x\n---\nrest"
    parsed = parse_front_matter(raw)

    assert parsed.metadata == {}
    assert parsed.content == raw


def test_parse_stops_at_first_closing_delimiter() -> None:
    raw = "---\ntitle: A\n---\nbody\n---\nmore: b\n---\ntail"
    parsed = parse_front_matter(raw)

    assert parsed.metadata == {"title": "A"}
    assert parsed.content == "body\n---\nmore: b\n---\ntail"


def test_parse_tolerates_trailing_whitespace_on_delimiters() -> None:
    parsed = parse_front_matter("---  \ntitle: A\n---   \nbody")

    assert parsed.metadata == {"title": "A"}
    assert parsed.content == "body"
