"""
Command line entry point: ``mdpdf <source.md> [<destination.pdf>] [options]``.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from colorama import Fore, Style

from . import __version__
from .config import DEFAULT_MARGIN, DEFAULT_TIMEOUT_MS, ENV_STYLES, Config
from .converter import convert_request
from .errors import ConversionError
from .log import ConsoleLog
from .models import Orientation, PageFormat, WaitUntil

MARKDOWN_EXTENSIONS = (".md", ".markdown")

EPILOG = f"""
Length parameters (--h-height, --f-height, --border*) require a unit: mm, cm, in or px.

Global settings:
  Set {ENV_STYLES} to the path of a CSS file to use it as the default
  stylesheet. The --style flag overrides it.
"""


def _split_styles(values: Optional[List[str]]) -> List[str]:
    styles: List[str] = []
    for value in values or []:
        styles.extend(part.strip() for part in value.split(",") if part.strip())
    return styles


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdpdf",
        description="Convert a Markdown file to a styled PDF with headless Chromium",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        # -h is taken by --header
        add_help=False,
    )
    parser.add_argument("source", help="Markdown file to convert (.md or .markdown)")
    parser.add_argument("destination", nargs="?", default=None, help="PDF file to write (default: source name with .pdf)")
    parser.add_argument("-s", "--style", action="append", default=None, help="CSS stylesheet(s) to apply, comma-separated or repeated; the last one wins")
    parser.add_argument("-h", "--header", default=None, help="HTML file to inject into the header of every page")
    parser.add_argument("--h-height", dest="header_height", default=None, help="Height of the header section")
    parser.add_argument("-f", "--footer", default=None, help="HTML file to inject into the footer of every page")
    parser.add_argument("--f-height", dest="footer_height", default=None, help="Height of the footer section")
    parser.add_argument("--border", default=DEFAULT_MARGIN, help=f"Page margin on every side (default: {DEFAULT_MARGIN})")
    parser.add_argument("--border-top", default=None, help="Top margin (default: --border)")
    parser.add_argument("--border-left", default=None, help="Left margin (default: --border)")
    parser.add_argument("--border-bottom", default=None, help="Bottom margin (default: --border)")
    parser.add_argument("--border-right", default=None, help="Right margin (default: --border)")
    parser.add_argument("--gh-style", action="store_true", help="Keep the GitHub stylesheet when --style is used")
    parser.add_argument("--no-default-style", action="store_true", help="Do not apply the built-in base stylesheet")
    parser.add_argument("--no-emoji", action="store_true", help="Disable :shortcode: emoji conversion")
    parser.add_argument("--no-highlight", action="store_true", help="Disable syntax highlighting of fenced code")
    parser.add_argument("--simple-line-breaks", action="store_true", help="Treat single newlines as line breaks")
    parser.add_argument("--debug", action="store_true", help="Also save the generated HTML next to the source")
    parser.add_argument("-r", "--format", default=PageFormat.A4.value, choices=[f.value for f in PageFormat], help="PDF page format (default: A4)")
    parser.add_argument("-o", "--orientation", default=Orientation.PORTRAIT.value, choices=[o.value for o in Orientation], help="PDF orientation (default: portrait)")
    parser.add_argument("-t", "--title", default=None, help="PDF title shown by some viewers (default: source file name without extension)")
    parser.add_argument("--timeout", type=int, default=DEFAULT_TIMEOUT_MS, help=f"Maximum rendering time in milliseconds (default: {DEFAULT_TIMEOUT_MS})")
    parser.add_argument("--wait-until", default=WaitUntil.NETWORKIDLE.value, choices=[w.value for w in WaitUntil], help="Page-load event to wait for before printing (default: networkidle)")
    sandbox = parser.add_mutually_exclusive_group()
    sandbox.add_argument("--no-sandbox", dest="no_sandbox", action="store_const", const=True, default=None, help="Disable the Chromium sandbox (needed in many containers; weakens isolation)")
    sandbox.add_argument("--sandbox", dest="no_sandbox", action="store_const", const=False, help="Force the Chromium sandbox on")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging for detailed output")
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _default_destination(source: str) -> str:
    return str(Path(source).with_suffix(".pdf"))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.source.lower().endswith(MARKDOWN_EXTENSIONS):
        parser.error("Source was not provided, or was not a markdown file")

    log = ConsoleLog(verbose=args.verbose)

    # Build config from CLI args
    cli_config = {
        "source": args.source,
        "destination": args.destination or _default_destination(args.source),
        "styles": _split_styles(args.style),
        "header": args.header,
        "footer": args.footer,
        "header_height": args.header_height,
        "footer_height": args.footer_height,
        "margin": args.border,
        "margin_top": args.border_top,
        "margin_left": args.border_left,
        "margin_bottom": args.border_bottom,
        "margin_right": args.border_right,
        "github_style": True if args.gh_style else None,
        "default_style": not args.no_default_style,
        "emoji": not args.no_emoji,
        "highlight": not args.no_highlight,
        "simple_line_breaks": args.simple_line_breaks,
        "debug": args.debug,
        "format": args.format,
        "orientation": args.orientation,
        "title": args.title,
        "timeout": args.timeout,
        "wait_until": args.wait_until,
        "no_sandbox": args.no_sandbox,
    }

    try:
        request = Config(cli_config).build_request()
        pdf_path = asyncio.run(convert_request(request, log=log, progress=sys.stderr.isatty()))
    except ConversionError as e:
        message = str(e)
        log.error(message if message.startswith(e.code) else f"{e.code}: {message}")
        return 1

    if sys.stdout.isatty():
        print(f"{Fore.GREEN}✨ PDF created successfully at:{Style.RESET_ALL} {pdf_path}")
    else:
        print(pdf_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
