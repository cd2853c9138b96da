"""
Markdown to HTML fragment rendering.

Each MarkdownRenderer owns a private markdown-it parser configured at
construction time, so renderers with different settings never share state.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import re
from typing import Optional

import emoji
from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.tasklists import tasklists_plugin
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

SHORTCODE_RE = re.compile(r":[a-zA-Z0-9_+\-]+:")
# Clock times and similar sequences ("00:00:00", "12:30") are never shortcodes
NUMERIC_COLON_RE = re.compile(r"\d+(?::\d+)+")
_SLUG_STRIP_RE = re.compile(r"[^\w\- ]")


def github_slug(title: str) -> str:
    """Heading id the way GitHub builds it: lowercase, no punctuation, hyphens."""
    slug = _SLUG_STRIP_RE.sub("", title.strip().lower())
    return slug.replace(" ", "-")


def emojize_text(text: str) -> str:
    """Replace :shortcode: tokens with emoji glyphs, leaving numeric-colon runs alone."""
    parts = []
    last = 0
    for match in NUMERIC_COLON_RE.finditer(text):
        parts.append(_emojize_segment(text[last:match.start()]))
        parts.append(match.group(0))
        last = match.end()
    parts.append(_emojize_segment(text[last:]))
    return "".join(parts)


def _emojize_segment(segment: str) -> str:
    if ":" not in segment:
        return segment
    return SHORTCODE_RE.sub(lambda m: emoji.emojize(m.group(0), language="alias"), segment)


def _emoji_rule(state: StateCore) -> None:
    for token in state.tokens:
        if token.type != "inline" or not token.children:
            continue
        for child in token.children:
            if child.type == "text":
                child.content = emojize_text(child.content)


class MarkdownRenderer:
    """GitHub-flavoured Markdown renderer with optional emoji and highlighting."""

    def __init__(self, emoji: bool = True, highlight: bool = True, simple_line_breaks: bool = False):
        self.emoji = emoji
        self.highlight = highlight
        self.simple_line_breaks = simple_line_breaks
        self._formatter = HtmlFormatter(nowrap=True)
        self._md = self._build_parser()

    def _build_parser(self) -> MarkdownIt:
        md = MarkdownIt(
            "gfm-like",
            {
                "breaks": self.simple_line_breaks,
                "highlight": self._highlight_code if self.highlight else None,
            },
        )
        md.use(anchors_plugin, min_level=1, max_level=6, slug_func=github_slug, permalink=False)
        md.use(tasklists_plugin)
        if self.emoji:
            # Runs after the anchor rule so heading ids come from the shortcode text
            md.core.ruler.push("emoji", _emoji_rule)
        return md

    def _highlight_code(self, code: str, lang: str, attrs: str) -> str:
        # An empty result makes markdown-it fall back to plain escaped code
        if not lang:
            return ""
        try:
            lexer = get_lexer_by_name(lang, stripall=False)
        except ClassNotFound:
            return ""
        return pygments_highlight(code, lexer, self._formatter)

    def render(self, markdown: str) -> str:
        return self._md.render(markdown)


def render_markdown(
    markdown: str,
    convert_emojis: bool = True,
    enable_highlight: bool = True,
    simple_line_breaks: bool = False,
    renderer: Optional[MarkdownRenderer] = None,
) -> str:
    renderer = renderer or MarkdownRenderer(convert_emojis, enable_highlight, simple_line_breaks)
    return renderer.render(markdown)
