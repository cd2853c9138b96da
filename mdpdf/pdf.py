"""
HTML to PDF printing with headless Chromium (Playwright).

The assembled HTML is written to a temporary file next to the destination
so that relative resources resolve, loaded in a fresh browser, titled and
printed. The temporary file and the browser are released on every exit
path; failures while releasing them are logged and never replace the
outcome of the conversion.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import asyncio
import os
import shutil
import tempfile
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from .config import BrowserSettings
from .errors import BrowserProcessError, FileAccessError, RenderTimeout
from .log import ConsoleLog

TEMP_PREFIX = "_temp-"
TEMP_SUFFIX = ".html"
# Chromium falls back to its own date/title band when a template is empty
EMPTY_BAND = "<div></div>"

SET_TITLE_SCRIPT = "title => { document.title = title; }"


def build_pdf_options(request, header_html: str = "", footer_html: str = "") -> Dict[str, Any]:
    """Translate the request's PageSpec into Playwright ``page.pdf`` options."""
    display_header_footer = bool(header_html or footer_html)
    page = request.page

    return {
        "path": str(request.destination),
        "print_background": True,
        "format": page.format.value,
        "landscape": page.landscape,
        "margin": page.margins,
        "display_header_footer": display_header_footer,
        "header_template": header_html or (EMPTY_BAND if display_header_footer else ""),
        "footer_template": footer_html or (EMPTY_BAND if display_header_footer else ""),
    }


def launch_options(settings: BrowserSettings) -> Dict[str, Any]:
    args = [
        '--disable-dev-shm-usage',  # Use /tmp instead of /dev/shm (prevents OOM crashes)
        '--disable-gpu',             # No GPU in headless mode
    ]
    if settings.no_sandbox:
        args.append('--disable-setuid-sandbox')

    options: Dict[str, Any] = {
        "headless": settings.headless,
        "args": args,
        # Playwright adds --no-sandbox itself unless the sandbox is requested
        "chromium_sandbox": not settings.no_sandbox,
    }
    if settings.executable_path:
        options["executable_path"] = settings.executable_path
    return options


@contextmanager
def temporary_html(html: str, directory: Union[str, Path], log: ConsoleLog) -> Iterator[Path]:
    """Write ``html`` to a uniquely named temp file; always delete it afterwards."""
    directory = Path(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=TEMP_SUFFIX, dir=directory)
    except OSError as exc:
        raise FileAccessError.from_os_error(exc, directory) from exc

    path = Path(name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(html)
        except OSError as exc:
            raise FileAccessError.from_os_error(exc, path) from exc
        log.debug(f"Wrote temporary HTML: {path}")
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
            log.debug(f"Removed temporary HTML: {path}")
        except OSError as exc:
            log.warning(f"Could not remove temporary HTML {path}: {exc}")


async def _close_browser(browser, log: ConsoleLog) -> None:
    try:
        if browser.is_connected():
            await browser.close()
        log.debug("Browser instance closed")
    except Exception as e:
        log.warning(f"Failed to close browser: {e}")


async def _stop_playwright(playwright, log: ConsoleLog) -> None:
    try:
        await playwright.stop()
    except Exception as e:
        log.warning(f"Failed to stop Playwright: {e}")


@asynccontextmanager
async def launched_browser(settings: BrowserSettings, log: ConsoleLog):
    """Launch headless Chromium and guarantee it is closed on exit."""
    try:
        playwright = await async_playwright().start()
    except (PlaywrightError, OSError) as exc:
        raise BrowserProcessError(f"Failed to start Playwright: {exc}") from exc

    try:
        try:
            browser = await playwright.chromium.launch(**launch_options(settings))
        except PlaywrightError as exc:
            raise BrowserProcessError(f"Failed to launch Chromium: {exc}") from exc

        log.debug(f"Launched Chromium (sandbox {'disabled' if settings.no_sandbox else 'enabled'})")
        try:
            yield browser
        finally:
            await _close_browser(browser, log)
    finally:
        await _stop_playwright(playwright, log)


async def _navigate(page, temp_html: Path, request) -> None:
    try:
        await page.goto(
            temp_html.as_uri(),
            wait_until=request.wait_until.value,
            timeout=request.navigation_timeout,
        )
    except PlaywrightTimeoutError as exc:
        raise RenderTimeout(
            f"Page load did not settle ({request.wait_until.value}) within {request.navigation_timeout}ms"
        ) from exc


async def _print(page, pdf_options: Dict[str, Any], timeout_ms: int) -> None:
    try:
        await asyncio.wait_for(page.pdf(**pdf_options), timeout=timeout_ms / 1000)
    except (asyncio.TimeoutError, PlaywrightTimeoutError) as exc:
        raise RenderTimeout(f"PDF rendering exceeded {timeout_ms}ms") from exc
    except OSError as exc:
        raise FileAccessError.from_os_error(exc, pdf_options["path"]) from exc


def _copy_debug_html(temp_html: Path, debug_path: Path, log: ConsoleLog) -> None:
    try:
        debug_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(temp_html, debug_path)
        log.info(f"Saved debug HTML to {debug_path}")
    except OSError as exc:
        log.warning(f"Could not save debug HTML to {debug_path}: {exc}")


async def render_pdf(
    html: str,
    request,
    header_html: str = "",
    footer_html: str = "",
    log: Optional[ConsoleLog] = None,
) -> Path:
    """Print ``html`` to ``request.destination`` and return that path."""
    log = log or ConsoleLog()
    pdf_options = build_pdf_options(request, header_html, footer_html)

    with temporary_html(html, request.destination.parent, log) as temp_html:
        try:
            async with launched_browser(request.browser, log) as browser:
                page = await browser.new_page()
                await _navigate(page, temp_html, request)

                # Viewers often show the document title instead of the file name
                await page.evaluate(SET_TITLE_SCRIPT, request.title)

                log.debug(f"Printing {request.page.format.value} {request.page.orientation.value} with margins {request.page.margins}")
                await _print(page, pdf_options, request.page.timeout)
        except PlaywrightTimeoutError as exc:
            raise RenderTimeout(str(exc)) from exc
        except PlaywrightError as exc:
            raise BrowserProcessError(f"Browser failure while rendering: {exc}") from exc

        if request.debug_path:
            _copy_debug_html(temp_html, request.debug_path, log)

    return request.destination
