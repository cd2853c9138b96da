import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse
from urllib.request import url2pathname

import pytest

import mdpdf.pdf
from mdpdf.log import ConsoleLog

FAKE_PDF = b"%PDF-1.4\n%fake\n"


class FakePage:
    def __init__(self, playwright: "FakePlaywright") -> None:
        self.playwright = playwright
        self.goto_calls: List[Dict[str, Any]] = []
        self.html: Optional[str] = None
        self.title: Optional[str] = None
        self.pdf_options: Optional[Dict[str, Any]] = None

    async def goto(self, url: str, wait_until: str = "load", timeout: int = 0) -> None:
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.playwright.goto_error:
            raise self.playwright.goto_error
        self.html = Path(url2pathname(urlparse(url).path)).read_text(encoding="utf-8")

    async def evaluate(self, script: str, arg: Any = None) -> None:
        self.title = arg

    async def pdf(self, **options: Any) -> bytes:
        self.pdf_options = options
        if self.playwright.pdf_delay:
            await asyncio.sleep(self.playwright.pdf_delay)
        if self.playwright.pdf_error:
            raise self.playwright.pdf_error
        Path(options["path"]).write_bytes(FAKE_PDF)
        return FAKE_PDF


class FakeBrowser:
    def __init__(self, playwright: "FakePlaywright") -> None:
        self.playwright = playwright
        self.connected = True
        self.pages: List[FakePage] = []

    async def new_page(self) -> FakePage:
        page = FakePage(self.playwright)
        self.pages.append(page)
        return page

    def is_connected(self) -> bool:
        return self.connected

    async def close(self) -> None:
        if self.playwright.close_error:
            raise self.playwright.close_error
        self.connected = False


class FakeChromium:
    def __init__(self, playwright: "FakePlaywright") -> None:
        self.playwright = playwright

    async def launch(self, **options: Any) -> FakeBrowser:
        self.playwright.launch_options = options
        if self.playwright.launch_error:
            raise self.playwright.launch_error
        self.playwright.browser = FakeBrowser(self.playwright)
        return self.playwright.browser


class FakePlaywright:
    """Stands in for the object returned by ``async_playwright().start()``."""

    def __init__(self) -> None:
        self.chromium = FakeChromium(self)
        self.browser: Optional[FakeBrowser] = None
        self.launch_options: Optional[Dict[str, Any]] = None
        self.stopped = False
        self.launch_error: Optional[BaseException] = None
        self.goto_error: Optional[BaseException] = None
        self.pdf_error: Optional[BaseException] = None
        self.pdf_delay: float = 0
        self.close_error: Optional[BaseException] = None

    @property
    def page(self) -> FakePage:
        return self.browser.pages[-1]

    async def stop(self) -> None:
        self.stopped = True


class _Starter:
    def __init__(self, playwright: FakePlaywright) -> None:
        self.playwright = playwright

    async def start(self) -> FakePlaywright:
        return self.playwright


@pytest.fixture
def fake_playwright(monkeypatch: pytest.MonkeyPatch) -> FakePlaywright:
    playwright = FakePlaywright()
    monkeypatch.setattr(mdpdf.pdf, "async_playwright", lambda: _Starter(playwright))
    return playwright


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MDPDF_STYLES", "MDPDF_BROWSER_PATH", "MDPDF_NO_SANDBOX"):
        monkeypatch.delenv(name, raising=False)


class RecordingLog(ConsoleLog):
    def __init__(self) -> None:
        super().__init__(verbose=True)
        self.records: List[tuple] = []

    def _write(self, prefix: str, message: str) -> None:
        self.records.append((prefix, message))

    def messages(self, level: str) -> List[str]:
        return [message for prefix, message in self.records if f"[{level}]" in prefix]


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def markdown_file(tmp_path: Path) -> Path:
    source = tmp_path / "notes.md"
    source.write_text("# Notes\n\nSome **bold** text.\n", encoding="utf-8")
    return source
