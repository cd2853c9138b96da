"""
Final document assembly: body template plus header/footer bands.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment
from markupsafe import Markup

from .assets import qualify_img_sources
from .styles import AssembledStyles
from .templates import DOC_BODY_TEMPLATE, FOOTER_TEMPLATE, HEADER_TEMPLATE
from .utils import read_text


class TrustedHtml(Markup):
    """Already-rendered HTML that templates insert verbatim, without escaping.

    Plain strings passed to a template are always escaped; wrapping a value
    in TrustedHtml is the single, explicit way to opt out.
    """

    __slots__ = ()


_environment = Environment(autoescape=True, keep_trailing_newline=True)


class DocumentAssembler:
    """Builds the document HTML and the header/footer band markup."""

    def __init__(self, styles: AssembledStyles, asset_dir: Union[str, Path]):
        self.styles = styles
        self.asset_dir = Path(asset_dir)
        self._body_template = _environment.from_string(DOC_BODY_TEMPLATE)
        self._header_template = _environment.from_string(HEADER_TEMPLATE)
        self._footer_template = _environment.from_string(FOOTER_TEMPLATE)

    def render_document(self, body: str) -> str:
        """Wrap a rendered (and qualified) HTML fragment into the full document."""
        return self._body_template.render(
            css=TrustedHtml(self.styles.style_block),
            body=TrustedHtml(body),
        )

    async def _prepare_band(self, template, path: Optional[Path], height: Optional[str]) -> str:
        if not path:
            # Empty markup means "no band" to the render driver
            return ""
        content = await read_text(path)
        prepared = qualify_img_sources(content, self.asset_dir)
        return template.render(
            content=TrustedHtml(prepared),
            css=TrustedHtml(self.styles.for_band()),
            height=height,
        )

    async def prepare_header(self, path: Optional[Path], height: Optional[str] = None) -> str:
        return await self._prepare_band(self._header_template, path, height)

    async def prepare_footer(self, path: Optional[Path], height: Optional[str] = None) -> str:
        return await self._prepare_band(self._footer_template, path, height)
