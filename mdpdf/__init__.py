"""
mdpdf - Markdown to PDF conversion with headless Chromium.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

__version__ = "1.0.0"

from .config import BrowserSettings, Config
from .converter import MarkdownToPDFConverter, convert, convert_request, convert_sync
from .errors import (
    BrowserProcessError,
    ConversionError,
    FileAccessError,
    RenderTimeout,
    ValidationError,
)
from .models import ConversionRequest, Orientation, PageFormat, PageSpec, WaitUntil

__all__ = [
    "__version__",
    "convert",
    "convert_sync",
    "convert_request",
    "MarkdownToPDFConverter",
    "Config",
    "BrowserSettings",
    "ConversionRequest",
    "PageSpec",
    "PageFormat",
    "Orientation",
    "WaitUntil",
    "ConversionError",
    "ValidationError",
    "FileAccessError",
    "RenderTimeout",
    "BrowserProcessError",
]
