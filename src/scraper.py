"""
Image extraction from rendered pages using Playwright
"""
import logging
from typing import List

from src import config
from src.browser import BrowserManager
from src.detection import build_candidates, filter_candidates
from src.models import ImageCandidate

logger = logging.getLogger(__name__)

VIEWPORT_HEIGHT_SCRIPT = "() => window.innerHeight"
SCROLL_TO_SCRIPT = "(y) => window.scrollTo(0, y)"

# Gathers raw values for each detection method; parsing happens in detection.py
COLLECT_IMAGES_SCRIPT = """
() => {
    const raw = {tags: [], backgrounds: [], pictures: [], lazy: []};

    document.querySelectorAll('img').forEach((img, index) => {
        raw.tags.push({
            index: index,
            src: img.src || '',
            alt: img.alt || '',
            width: img.naturalWidth || img.width || 0,
            height: img.naturalHeight || img.height || 0
        });
    });

    document.querySelectorAll('*').forEach((element, index) => {
        const bgImage = window.getComputedStyle(element).backgroundImage;
        if (bgImage && bgImage !== 'none') {
            raw.backgrounds.push({index: index, value: bgImage, element: element.tagName});
        }
    });

    document.querySelectorAll('picture source, picture img, [srcset]').forEach((element, index) => {
        raw.pictures.push({index: index, srcset: element.srcset || element.src || ''});
    });

    const lazySelectors = '[data-src], [data-lazy-src], [data-original], [data-image], [data-bg]';
    document.querySelectorAll(lazySelectors).forEach((element, index) => {
        const data = element.dataset;
        raw.lazy.push({
            index: index,
            src: data.src || data.lazySrc || data.original || data.image || data.bg || ''
        });
    });

    return raw;
}
"""


class ExtractionError(Exception):
    """Navigation or in-page extraction failed."""


class ImageExtractor:
    """Loads a page in the shared browser and collects its images."""

    def __init__(self, browser_manager: BrowserManager, min_size: int = config.MIN_IMAGE_SIZE):
        self.browser_manager = browser_manager
        self.min_size = min_size

    async def extract(self, url: str) -> List[ImageCandidate]:
        """
        Extract unique images from a page.

        Raises:
            ExtractionError: carrying the underlying browser error message
        """
        logger.info("Extracting images from: %s", url)
        try:
            browser = await self.browser_manager.get_browser()
            page = await browser.new_page(
                user_agent=config.USER_AGENT,
                viewport=config.VIEWPORT,
            )
        except Exception as e:
            raise ExtractionError(str(e)) from e

        try:
            await page.goto(url, wait_until="networkidle", timeout=config.NAVIGATION_TIMEOUT_MS)

            # Wait for dynamic content
            await page.wait_for_timeout(config.SETTLE_DELAY_MS)

            await self.scroll_page(page)

            raw = await page.evaluate(COLLECT_IMAGES_SCRIPT)
            images = filter_candidates(build_candidates(raw or {}), self.min_size)
        except Exception as e:
            raise ExtractionError(str(e)) from e
        finally:
            await page.close()

        logger.info("Found %d unique images on %s", len(images), url)
        return images

    async def scroll_page(self, page):
        """Step through the page one viewport at a time so lazy loaders fire."""
        viewport_height = await page.evaluate(VIEWPORT_HEIGHT_SCRIPT)

        for step in range(config.SCROLL_STEPS):
            await page.evaluate(SCROLL_TO_SCRIPT, step * viewport_height)
            await page.wait_for_timeout(config.SCROLL_PAUSE_MS)

        await page.evaluate(SCROLL_TO_SCRIPT, 0)
        await page.wait_for_timeout(config.SCROLL_PAUSE_MS)
