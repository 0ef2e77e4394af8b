"""
Fake Playwright objects so the extraction flow runs without Chromium
"""
import pytest

from src.scraper import COLLECT_IMAGES_SCRIPT, SCROLL_TO_SCRIPT, VIEWPORT_HEIGHT_SCRIPT


class FakePage:
    def __init__(self, raw=None, goto_error=None, viewport_height=800):
        self.raw = raw if raw is not None else {}
        self.goto_error = goto_error
        self.viewport_height = viewport_height
        self.goto_calls = []
        self.waits = []
        self.scroll_positions = []
        self.collect_calls = 0
        self.closed = False

    async def goto(self, url, **kwargs):
        self.goto_calls.append((url, kwargs))
        if self.goto_error:
            raise self.goto_error

    async def wait_for_timeout(self, timeout):
        self.waits.append(timeout)

    async def evaluate(self, script, arg=None):
        if script == VIEWPORT_HEIGHT_SCRIPT:
            return self.viewport_height
        if script == SCROLL_TO_SCRIPT:
            self.scroll_positions.append(arg)
            return None
        if script == COLLECT_IMAGES_SCRIPT:
            self.collect_calls += 1
            return self.raw
        raise AssertionError(f"unexpected script: {script[:40]}")

    async def close(self):
        self.closed = True


class FakeBrowser:
    def __init__(self, page):
        self.page = page
        self.page_options = None
        self.closed = False

    async def new_page(self, **kwargs):
        self.page_options = kwargs
        return self.page

    async def close(self):
        self.closed = True


class FakeBrowserManager:
    def __init__(self, browser):
        self.browser = browser
        self.launches = 0
        self.closed = False
        self._running = False

    @property
    def is_running(self):
        return self._running

    async def get_browser(self):
        if not self._running:
            self.launches += 1
            self._running = True
        return self.browser

    async def close(self):
        self._running = False
        self.closed = True


@pytest.fixture
def make_manager():
    def _make(raw=None, goto_error=None):
        page = FakePage(raw=raw, goto_error=goto_error)
        return FakeBrowserManager(FakeBrowser(page))
    return _make


@pytest.fixture
def gallery_scan():
    """A page where the same photo shows up through several detection methods."""
    return {
        "tags": [
            {"index": 0, "src": "https://cdn.example.com/photo.jpg", "alt": "Harbour at dusk", "width": 1200, "height": 800},
            {"index": 1, "src": "https://cdn.example.com/pixel.gif", "alt": "", "width": 1, "height": 1},
            {"index": 2, "src": "data:image/png;base64,AAAA", "alt": "inline", "width": 300, "height": 300},
            {"index": 3, "src": "https://cdn.example.com/logo.png", "alt": "", "width": 0, "height": 0},
        ],
        "backgrounds": [
            {"index": 14, "value": 'url("https://cdn.example.com/hero.jpg")', "element": "SECTION"},
            {"index": 20, "value": "linear-gradient(red, blue)", "element": "DIV"},
        ],
        "pictures": [
            {"index": 0, "srcset": "https://cdn.example.com/photo-small.jpg 480w, https://cdn.example.com/photo.jpg 1200w"},
            {"index": 1, "srcset": "/relative/only.jpg 1x"},
        ],
        "lazy": [
            {"index": 0, "src": "https://cdn.example.com/hero.jpg"},
            {"index": 1, "src": "https://cdn.example.com/below-fold.jpg"},
        ],
    }
