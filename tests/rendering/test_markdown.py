"""Tests for doc-comment rendering."""

from __future__ import annotations

from docsite.rendering import DocRenderer, render_doc


def test_missing_doc_renders_empty() -> None:
    assert render_doc(None) == ""


def test_empty_doc_renders_empty() -> None:
    assert render_doc("") == ""


def test_markdown_is_converted() -> None:
    assert render_doc("Hello *world*") == "<p>Hello <em>world</em></p>\n"


def test_list_directly_after_paragraph() -> None:
    assert render_doc("Returns one of:\n- ok\n- error") == (
        "<p>Returns one of:</p>\n<ul>\n<li>ok</li>\n<li>error</li>\n</ul>\n"
    )


def test_two_space_nested_list() -> None:
    assert render_doc("- a\n  - b\n  - c") == (
        "<ul>\n<li>a\n<ul>\n<li>b</li>\n<li>c</li>\n</ul>\n</li>\n</ul>\n"
    )


def test_parenthesis_ordered_list() -> None:
    assert render_doc("1) first\n2) second") == (
        "<ol>\n<li>first</li>\n<li>second</li>\n</ol>\n"
    )


def test_fenced_code_blocks_are_supported() -> None:
    html = render_doc("Example:\n\n```\nlet x = 1\n```")
    assert "<pre><code>let x = 1\n</code></pre>" in html


def test_raw_html_passes_through_by_default() -> None:
    html = DocRenderer().render("<div class=\"note\">hi</div>")
    assert "<div class=\"note\">hi</div>" in html


def test_sanitize_escapes_raw_html() -> None:
    html = DocRenderer(sanitize=True).render("<script>alert(1)</script>")
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_sanitize_keeps_markdown_formatting() -> None:
    assert DocRenderer(sanitize=True).render("**bold**") == "<p><strong>bold</strong></p>\n"


def test_renderer_is_reusable() -> None:
    renderer = DocRenderer()
    first = renderer.render("# Title\n\nBody")
    second = renderer.render("# Title\n\nBody")
    assert first == second
    assert "<h1>Title</h1>" in first
