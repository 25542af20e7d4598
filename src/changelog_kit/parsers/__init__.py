from .base import DocumentParser
from .markdown_parser import MarkdownParser
from .models import Block
from .render import render_html, render_inline_text, render_text

__all__ = [
    "Block",
    "DocumentParser",
    "MarkdownParser",
    "render_html",
    "render_inline_text",
    "render_text",
]
