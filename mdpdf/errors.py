"""
Error types raised by the Markdown to PDF pipeline.

Every error carries a short ``code`` so callers (and the CLI) can tell
failure kinds apart without parsing messages.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import errno as _errno
from pathlib import Path
from typing import Optional, Union


class ConversionError(RuntimeError):
    """Base class for every failure surfaced by a conversion."""

    code = "CONVERSION_FAILED"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class ValidationError(ConversionError):
    """The request is incomplete or malformed. Raised before any I/O."""

    code = "INVALID_REQUEST"


class FileAccessError(ConversionError):
    """A file the conversion depends on could not be read or written.

    The underlying OS error number is kept so callers can distinguish
    not-found from permission-denied.
    """

    def __init__(self, message: str, errno: Optional[int] = None, filename: Optional[str] = None) -> None:
        code = _errno.errorcode.get(errno, "EIO") if errno is not None else "EIO"
        super().__init__(message, code=code)
        self.errno = errno
        self.filename = filename

    @classmethod
    def from_os_error(cls, exc: OSError, path: Union[str, Path]) -> "FileAccessError":
        reason = exc.strerror or str(exc)
        code = _errno.errorcode.get(exc.errno, "EIO") if exc.errno is not None else "EIO"
        return cls(f"{code}: {reason}: '{path}'", errno=exc.errno, filename=str(path))


class RenderTimeout(ConversionError):
    """Navigation or printing exceeded its configured timeout."""

    code = "TIMEOUT"


class BrowserProcessError(ConversionError):
    """The headless browser failed to launch, crashed or disconnected."""

    code = "BROWSER"


__all__ = [
    "ConversionError",
    "ValidationError",
    "FileAccessError",
    "RenderTimeout",
    "BrowserProcessError",
]
