"""
Request model for a single Markdown to PDF conversion.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from .config import (
    DEFAULT_MARGIN,
    DEFAULT_NAVIGATION_TIMEOUT_MS,
    DEFAULT_TIMEOUT_MS,
    BrowserSettings,
    browser_settings,
    parse_length,
)
from .errors import ValidationError

PathLike = Union[str, Path]


class _ChoiceEnum(str, Enum):
    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        wanted = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValidationError(f"Invalid {cls.__name__} '{value}'. Choose one of: {choices}")


class PageFormat(_ChoiceEnum):
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LEGAL = "Legal"
    LETTER = "Letter"
    TABLOID = "Tabloid"


class Orientation(_ChoiceEnum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class WaitUntil(_ChoiceEnum):
    """Page-load completion policy used before printing."""

    LOAD = "load"
    DOMCONTENTLOADED = "domcontentloaded"
    NETWORKIDLE = "networkidle"
    COMMIT = "commit"

    @classmethod
    def parse(cls, value):
        # Puppeteer spellings are accepted for compatibility with existing scripts
        if isinstance(value, str) and value.strip().lower() in {"networkidle0", "networkidle2"}:
            return cls.NETWORKIDLE
        return super().parse(value)


def _is_blank_path(value) -> bool:
    """True for None, empty strings and values naming no file (".", "dir/")."""
    if value is None:
        return True
    text = os.fspath(value).strip()
    if not text or text.endswith(("/", os.sep)):
        return True
    return Path(text).name in ("", ".", "..")


def _positive_ms(value, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {name}: '{value}'. Expected milliseconds as an integer.") from None
    if number <= 0:
        raise ValidationError(f"Invalid {name}: '{value}'. Must be greater than zero.")
    return number


@dataclass(frozen=True)
class PageSpec:
    """Page geometry and print settings."""

    format: PageFormat = PageFormat.A4
    orientation: Orientation = Orientation.PORTRAIT
    margin_top: str = DEFAULT_MARGIN
    margin_left: str = DEFAULT_MARGIN
    margin_bottom: str = DEFAULT_MARGIN
    margin_right: str = DEFAULT_MARGIN
    header_height: Optional[str] = None
    footer_height: Optional[str] = None
    title: Optional[str] = None
    timeout: int = DEFAULT_TIMEOUT_MS

    @property
    def landscape(self) -> bool:
        return self.orientation is Orientation.LANDSCAPE

    @property
    def margins(self) -> dict:
        return {
            "top": self.margin_top,
            "right": self.margin_right,
            "bottom": self.margin_bottom,
            "left": self.margin_left,
        }


@dataclass(frozen=True)
class ConversionRequest:
    """Complete, resolved configuration for one conversion.

    Build instances with :meth:`create`, which validates the input and
    resolves every path to an absolute one.
    """

    source: Path
    destination: Path
    asset_dir: Path
    header: Optional[Path] = None
    footer: Optional[Path] = None
    default_style: bool = True
    github_style: bool = True
    styles: Tuple[Path, ...] = ()
    emoji: bool = True
    highlight: bool = True
    simple_line_breaks: bool = False
    debug_path: Optional[Path] = None
    wait_until: WaitUntil = WaitUntil.NETWORKIDLE
    navigation_timeout: int = DEFAULT_NAVIGATION_TIMEOUT_MS
    page: PageSpec = field(default_factory=PageSpec)
    browser: BrowserSettings = field(default_factory=BrowserSettings)

    @property
    def title(self) -> str:
        """Document title forced onto the page before printing."""
        return self.page.title or self.source.stem

    @classmethod
    def create(
        cls,
        source: Optional[PathLike] = None,
        destination: Optional[PathLike] = None,
        *,
        asset_dir: Optional[PathLike] = None,
        header: Optional[PathLike] = None,
        footer: Optional[PathLike] = None,
        styles: Optional[Iterable[PathLike]] = None,
        github_style: Optional[bool] = None,
        default_style: bool = True,
        emoji: bool = True,
        highlight: bool = True,
        simple_line_breaks: bool = False,
        debug: Union[bool, PathLike, None] = None,
        format: Union[str, PageFormat] = PageFormat.A4,
        orientation: Union[str, Orientation] = Orientation.PORTRAIT,
        margin: Optional[str] = None,
        margin_top: Optional[str] = None,
        margin_left: Optional[str] = None,
        margin_bottom: Optional[str] = None,
        margin_right: Optional[str] = None,
        header_height: Optional[str] = None,
        footer_height: Optional[str] = None,
        title: Optional[str] = None,
        timeout: int = DEFAULT_TIMEOUT_MS,
        wait_until: Union[str, WaitUntil] = WaitUntil.NETWORKIDLE,
        navigation_timeout: int = DEFAULT_NAVIGATION_TIMEOUT_MS,
        browser: Optional[BrowserSettings] = None,
        no_sandbox: Optional[bool] = None,
        executable_path: Optional[str] = None,
    ) -> "ConversionRequest":
        if _is_blank_path(source):
            raise ValidationError("Source path must be provided")
        if _is_blank_path(destination):
            raise ValidationError("Destination path must be provided")

        source_path = Path(source).expanduser().resolve()
        destination_path = Path(destination).expanduser().resolve()

        style_paths = tuple(Path(style).expanduser().resolve() for style in (styles or ()))
        if github_style is None:
            # GitHub styling is the default look unless the user brings their own CSS
            github_style = not style_paths

        if debug is True:
            debug_path = source_path.with_suffix(".html")
        elif debug:
            debug_path = Path(debug).expanduser().resolve()
        else:
            debug_path = None

        base_margin = parse_length(margin, "margin") if margin else DEFAULT_MARGIN
        page = PageSpec(
            format=PageFormat.parse(format),
            orientation=Orientation.parse(orientation),
            margin_top=parse_length(margin_top, "top margin") if margin_top else base_margin,
            margin_left=parse_length(margin_left, "left margin") if margin_left else base_margin,
            margin_bottom=parse_length(margin_bottom, "bottom margin") if margin_bottom else base_margin,
            margin_right=parse_length(margin_right, "right margin") if margin_right else base_margin,
            header_height=parse_length(header_height, "header height") if header_height else None,
            footer_height=parse_length(footer_height, "footer height") if footer_height else None,
            title=title or None,
            timeout=_positive_ms(timeout, "timeout"),
        )

        if browser is None:
            browser = browser_settings(no_sandbox=no_sandbox, executable_path=executable_path)

        return cls(
            source=source_path,
            destination=destination_path,
            asset_dir=Path(asset_dir).expanduser().resolve() if asset_dir else source_path.parent,
            header=Path(header).expanduser().resolve() if header else None,
            footer=Path(footer).expanduser().resolve() if footer else None,
            default_style=bool(default_style),
            github_style=bool(github_style),
            styles=style_paths,
            emoji=bool(emoji),
            highlight=bool(highlight),
            simple_line_breaks=bool(simple_line_breaks),
            debug_path=debug_path,
            wait_until=WaitUntil.parse(wait_until),
            navigation_timeout=_positive_ms(navigation_timeout, "navigation timeout"),
            page=page,
            browser=browser,
        )


__all__ = [
    "ConversionRequest",
    "PageSpec",
    "PageFormat",
    "Orientation",
    "WaitUntil",
]
