"""Doc-comment rendering with a CommonMark parser."""

from __future__ import annotations

from typing import Optional

from markdown_it import MarkdownIt


class DocRenderer:
    """Converts optional doc-comments into HTML fragments.

    Raw HTML inside doc-comments is passed through untouched unless
    ``sanitize`` is set, in which case it is rendered as escaped text.
    """

    def __init__(self, *, sanitize: bool = False) -> None:
        self.sanitize = sanitize
        self._md = MarkdownIt("commonmark", {"html": not sanitize})

    def render(self, doc: Optional[str]) -> str:
        if doc is None:
            return ""
        return self._md.render(doc)


def render_doc(doc: Optional[str]) -> str:
    """Render a doc-comment with the default, non-sanitizing renderer."""
    return DocRenderer().render(doc)


__all__ = ["DocRenderer", "render_doc"]
