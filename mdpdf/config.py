"""
Configuration layering for the converter: CLI values over environment
variables over built-in defaults.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .errors import ValidationError

ENV_PREFIX = "MDPDF_"
ENV_STYLES = f"{ENV_PREFIX}STYLES"
ENV_BROWSER_PATH = f"{ENV_PREFIX}BROWSER_PATH"
ENV_NO_SANDBOX = f"{ENV_PREFIX}NO_SANDBOX"

DEFAULT_MARGIN = "20mm"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_NAVIGATION_TIMEOUT_MS = 30_000

LENGTH_UNITS = ("mm", "cm", "in", "px")
_LENGTH_RE = re.compile(r'^(\d+(?:\.\d+)?)\s*(mm|cm|in|px)$')

# Marker files left by container runtimes (docker, podman)
_CONTAINER_MARKERS = (Path("/.dockerenv"), Path("/run/.containerenv"))


def parse_length(value: str, name: str = "length") -> str:
    """Validate and normalize a CSS length such as '20mm' or '0.5in'.

    A unit is mandatory; a bare number is rejected rather than guessed.
    """
    match = _LENGTH_RE.match(str(value).strip())
    if not match:
        units = ", ".join(LENGTH_UNITS)
        raise ValidationError(f"Invalid {name}: '{value}'. Use a number with a unit ({units}), e.g. '20mm'.")
    number, unit = match.groups()
    return f"{number}{unit}"


def parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return None


def is_constrained_environment() -> bool:
    """True when Chromium's sandbox usually cannot start (root user or container)."""
    geteuid = getattr(os, "geteuid", None)
    if geteuid is not None and geteuid() == 0:
        return True
    return any(marker.exists() for marker in _CONTAINER_MARKERS)


@dataclass(frozen=True)
class BrowserSettings:
    """How the headless browser process is started.

    ``no_sandbox`` disables Chromium's process sandbox. That is often the
    only way to run inside containers or as root, but it removes a layer of
    isolation between the rendered document and the host.
    """

    executable_path: Optional[str] = None
    no_sandbox: bool = False
    headless: bool = True


def browser_settings(
    no_sandbox: Optional[bool] = None,
    executable_path: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> BrowserSettings:
    """Resolve browser settings from explicit values, then the environment."""
    env = os.environ if environ is None else environ

    if executable_path is None:
        candidate = env.get(ENV_BROWSER_PATH)
        if candidate and Path(candidate).is_file():
            executable_path = str(Path(candidate).resolve())

    if no_sandbox is None:
        no_sandbox = parse_bool(env.get(ENV_NO_SANDBOX))
    if no_sandbox is None:
        no_sandbox = is_constrained_environment()

    return BrowserSettings(executable_path=executable_path, no_sandbox=no_sandbox)


class Config:
    """Conversion settings assembled from CLI arguments and the environment."""

    def __init__(self, cli_config: Optional[Dict[str, Any]] = None, environ: Optional[Mapping[str, str]] = None):
        self._cli = {key: value for key, value in (cli_config or {}).items() if value is not None}
        self._env = os.environ if environ is None else environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._cli.get(key, default)

    def get_styles(self) -> List[str]:
        """User stylesheets; ``MDPDF_STYLES`` applies only when none were given."""
        styles = list(self._cli.get("styles") or [])
        if styles:
            return styles
        env_style = self._env.get(ENV_STYLES)
        if env_style and Path(env_style).is_file():
            return [str(Path(env_style).resolve())]
        return []

    def get_browser_settings(self) -> BrowserSettings:
        return browser_settings(
            no_sandbox=self._cli.get("no_sandbox"),
            executable_path=self._cli.get("executable_path"),
            environ=self._env,
        )

    def build_request(self):
        """Build the immutable request for one conversion."""
        from .models import ConversionRequest

        options = dict(self._cli)
        options.pop("no_sandbox", None)
        options.pop("executable_path", None)
        options["styles"] = self.get_styles()
        options["browser"] = self.get_browser_settings()
        return ConversionRequest.create(**options)
