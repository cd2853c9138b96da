#!/usr/bin/env python3
"""
Markdown to PDF converter using Playwright (Puppeteer approach).

Pipeline for one document: load styles, read the source and the optional
header/footer concurrently, render Markdown, qualify image paths, assemble
the document and print it with headless Chromium.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import asyncio
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .assets import qualify_img_sources
from .document import DocumentAssembler
from .log import ConsoleLog
from .models import ConversionRequest
from .pdf import render_pdf
from .renderer import MarkdownRenderer
from .styles import load_styles
from .utils import read_text


class MarkdownToPDFConverter:
    """Converts the single Markdown document described by a request."""

    def __init__(self, request: ConversionRequest, log: Optional[ConsoleLog] = None, progress: bool = False):
        self.request = request
        self.log = log or ConsoleLog()
        self.progress = progress
        self.renderer = MarkdownRenderer(
            emoji=request.emoji,
            highlight=request.highlight,
            simple_line_breaks=request.simple_line_breaks,
        )

    async def convert(self) -> Path:
        """Run the whole pipeline and return the absolute destination path."""
        request = self.request
        filename = request.source.name
        self.log.info(f"Converting {filename} -> {request.destination}")

        with tqdm(total=5, desc=f"  {filename}", unit="step", leave=False, disable=not self.progress) as pbar:
            # Step 1: Styles
            pbar.set_description(f"  {filename} - Styles")
            styles = await load_styles(request)
            assembler = DocumentAssembler(styles, request.asset_dir)
            self.log.debug(f"Assembled {styles.style_block.count('<style>')} stylesheet(s)")
            pbar.update(1)

            # Step 2: Read source, header and footer
            pbar.set_description(f"  {filename} - Reading")
            markdown, header_html, footer_html = await asyncio.gather(
                read_text(request.source),
                assembler.prepare_header(request.header, request.page.header_height),
                assembler.prepare_footer(request.footer, request.page.footer_height),
            )
            pbar.update(1)

            # Step 3: Markdown to HTML
            pbar.set_description(f"  {filename} - HTML")
            body = self.renderer.render(markdown)
            self.log.debug(f"Rendered {len(markdown)} characters of Markdown")
            pbar.update(1)

            # Step 4: Images and layout
            pbar.set_description(f"  {filename} - Assembling")
            body = qualify_img_sources(body, request.asset_dir)
            html = assembler.render_document(body)
            self.log.debug(f"Document assembled ({len(html)} characters of HTML)")
            pbar.update(1)

            # Step 5: PDF
            pbar.set_description(f"  {filename} - PDF")
            destination = await render_pdf(html, request, header_html, footer_html, log=self.log)
            pbar.update(1)

        self.log.success(f"Converted {filename} to {destination}")
        return destination


async def convert_request(request: ConversionRequest, log: Optional[ConsoleLog] = None, progress: bool = False) -> Path:
    return await MarkdownToPDFConverter(request, log=log, progress=progress).convert()


async def convert(source=None, destination=None, *, log: Optional[ConsoleLog] = None, progress: bool = False, **options) -> Path:
    """Convert ``source`` Markdown to a PDF at ``destination``.

    ``options`` are the keyword arguments of :meth:`ConversionRequest.create`.
    Returns the absolute destination path.
    """
    request = ConversionRequest.create(source, destination, **options)
    return await convert_request(request, log=log, progress=progress)


def convert_sync(source=None, destination=None, **options) -> Path:
    """Blocking wrapper around :func:`convert`."""
    return asyncio.run(convert(source, destination, **options))
