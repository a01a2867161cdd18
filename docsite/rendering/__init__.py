"""Doc-comment and page rendering."""

from .markdown import DocRenderer, render_doc
from .templates import PageRenderer, TemplateRenderError

__all__ = ["DocRenderer", "PageRenderer", "TemplateRenderError", "render_doc"]
