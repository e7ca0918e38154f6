"""Unit tests for linkmirror.api.markdown.MarkdownDocument."""

import pytest

from linkmirror.api.markdown.MarkdownDocument import MarkdownDocument
from linkmirror.api.markdown.NodeKind import NodeKind

CONTENT = """---
title: Návod
tags: [docs, guide]
weight: 2
---
# Heading
"""


def test_splits_front_matter_and_body():
    document = MarkdownDocument(CONTENT)
    assert document.body == "# Heading\n"
    assert document.front_matter_text.startswith("---\ntitle: Návod")
    assert document.serialize_front_matter() + document.body == CONTENT


def test_properties_are_lists_of_strings():
    document = MarkdownDocument(CONTENT)
    assert document.properties == {"title": ["Návod"], "tags": ["docs", "guide"], "weight": ["2"]}
    assert document.get_property("tags") == "docs"
    assert document.get_property("missing") is None
    assert document.raw_value("weight") == 2


def test_set_property_reserializes():
    document = MarkdownDocument(CONTENT)
    document.set_property("title", "Průvodce")
    serialized = document.serialize_front_matter()
    assert serialized.startswith("---\ntitle: Průvodce\n")
    assert serialized.endswith("---\n")
    assert MarkdownDocument(serialized + document.body).raw_value("weight") == 2


def test_no_front_matter():
    document = MarkdownDocument("# Just a heading\n")
    assert document.body == "# Just a heading\n"
    assert document.properties == {}
    assert document.serialize_front_matter() == ""


def test_non_mapping_front_matter_stays_in_body():
    content = "---\n- a\n- b\n---\ntext\n"
    document = MarkdownDocument(content)
    assert document.body == content
    assert document.properties == {}


def test_invalid_yaml_stays_in_body():
    content = "---\ntitle: [unclosed\n---\ntext\n"
    assert MarkdownDocument(content).body == content


def test_thematic_break_is_not_front_matter():
    content = "# Title\n\n---\n\ntext\n"
    assert MarkdownDocument(content).body == content


def test_tree_parses_body_only():
    document = MarkdownDocument(CONTENT)
    headings = [node for node in document.tree.walk() if node.kind is NodeKind.HEADING]
    assert len(headings) == 1
    assert headings[0].line_range == (0, 1)


def test_none_rejected():
    with pytest.raises(TypeError):
        MarkdownDocument(None)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        MarkdownDocument(CONTENT).set_property("title", None)
