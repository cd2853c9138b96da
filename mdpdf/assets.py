"""
Image source qualification.

Chromium loads the document from a temporary file, so relative image
paths must be turned into absolute ``file://`` URLs rooted at the asset
directory before rendering. Remote http(s) images are left alone.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

from pathlib import Path
from typing import Union
from urllib.parse import unquote, urlparse

from bs4 import BeautifulSoup

ACCEPTABLE_PROTOCOLS = ("http", "https")
# Already self-contained or already local; rewriting them would break them
PASSTHROUGH_PROTOCOLS = ("data", "file")


def has_acceptable_protocol(src: str) -> bool:
    """True for http(s) URLs only; paths and other schemes are not acceptable."""
    return urlparse(src.strip()).scheme.lower() in ACCEPTABLE_PROTOCOLS


def process_src(src: str, asset_dir: Union[str, Path]) -> str:
    if has_acceptable_protocol(src):
        return src
    if urlparse(src.strip()).scheme.lower() in PASSTHROUGH_PROTOCOLS:
        return src

    resolved = (Path(asset_dir) / unquote(src.strip())).resolve()
    return resolved.as_uri()


def qualify_img_sources(html: str, asset_dir: Union[str, Path]) -> str:
    """Rewrite the ``src`` of every <img> in an HTML fragment."""
    soup = BeautifulSoup(html, "html.parser")

    for img in soup.find_all("img"):
        src = img.get("src")
        if src:
            img["src"] = process_src(src, asset_dir)

    return str(soup)
