"""
File reading helpers shared by the pipeline stages.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import asyncio
from pathlib import Path
from typing import Union

from .errors import FileAccessError


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read()
    except OSError as exc:
        raise FileAccessError.from_os_error(exc, path) from exc


async def read_text(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a text file without blocking the event loop."""
    return await asyncio.to_thread(read_text_file, path, encoding)
