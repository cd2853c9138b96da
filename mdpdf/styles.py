"""
Stylesheet assembly.

The order of the sources is the cascade order: built-in defaults first,
then GitHub styles, then the highlight theme, then user stylesheets, so
that the user's rules win.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union

from pygments.formatters import HtmlFormatter

from .templates import DEFAULT_CSS, GITHUB_MARKDOWN_CSS
from .utils import read_text

HIGHLIGHT_STYLE = "default"
HIGHLIGHT_SELECTOR = "pre code"

StyleSource = Union[str, Path]


def get_styles(stylesheets: Sequence[str]) -> str:
    """Concatenate stylesheets in order, without any wrapping."""
    return "".join(stylesheets)


def get_style_block(stylesheets: Sequence[str]) -> str:
    """Wrap each stylesheet in its own <style> element, in order."""
    return "".join(f"<style>{style}</style>" for style in stylesheets)


def highlight_css(style: str = HIGHLIGHT_STYLE) -> str:
    return HtmlFormatter(style=style).get_style_defs(HIGHLIGHT_SELECTOR)


@dataclass(frozen=True)
class AssembledStyles:
    styles: str = ""
    style_block: str = ""

    @classmethod
    def from_sheets(cls, stylesheets: Sequence[str]) -> "AssembledStyles":
        return cls(styles=get_styles(stylesheets), style_block=get_style_block(stylesheets))

    def for_band(self) -> str:
        # Header/footer templates end up inside an attribute value of the
        # print engine's own template, where only single quotes are safe.
        return self.styles.replace('"', "'")


def build_style_sources(request) -> List[StyleSource]:
    """Ordered style sources for a request: CSS text or stylesheet paths."""
    sources: List[StyleSource] = []
    if request.default_style:
        sources.append(DEFAULT_CSS)
    if request.github_style:
        sources.append(GITHUB_MARKDOWN_CSS)
    if request.highlight:
        sources.append(highlight_css())
    sources.extend(request.styles)
    return sources


async def _load_source(source: StyleSource) -> str:
    if isinstance(source, Path):
        return await read_text(source)
    return source


async def load_styles(request) -> AssembledStyles:
    """Load every style source of the request and assemble both CSS forms."""
    sheets = await asyncio.gather(*(_load_source(source) for source in build_style_sources(request)))
    return AssembledStyles.from_sheets(list(sheets))
