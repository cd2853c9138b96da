"""
Coloured console diagnostics for the converter.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import sys
import threading
from typing import Optional, TextIO

from colorama import init, Fore, Style

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class ConsoleLog:
    """Prefix-tagged log lines on stderr; stdout is reserved for the PDF path."""

    def __init__(self, verbose: bool = False, stream: Optional[TextIO] = None):
        self.verbose = verbose
        self._stream = stream
        self._lock = threading.Lock()

    def _write(self, prefix: str, message: str) -> None:
        stream = self._stream or sys.stderr
        with self._lock:
            print(f"{prefix}{Style.RESET_ALL} {message}", file=stream)

    def debug(self, message: str) -> None:
        """Log debug message (only if verbose mode is enabled)."""
        if self.verbose:
            self._write(f"{Fore.CYAN}[DEBUG]", message)

    def info(self, message: str) -> None:
        self._write(f"{Fore.GREEN}[INFO]", message)

    def warning(self, message: str) -> None:
        self._write(f"{Fore.YELLOW}[WARNING]", message)

    def error(self, message: str) -> None:
        self._write(f"{Fore.RED}[ERROR]", message)

    def success(self, message: str) -> None:
        self._write(f"{Fore.GREEN}[OK]", message)
