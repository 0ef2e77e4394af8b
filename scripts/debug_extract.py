"""
Debug script to run a single extraction and print what was found
"""
import asyncio
import sys
sys.path.insert(0, '.')
from src.browser import BrowserManager
from src.scraper import ImageExtractor

TEST_URL = "https://example.com"


async def debug_extract(url: str):
    manager = BrowserManager()
    extractor = ImageExtractor(manager)
    try:
        images = await extractor.extract(url)
    finally:
        await manager.close()

    print(f"=== {len(images)} IMAGES ===")
    for i, image in enumerate(images):
        size = f"{image.width}x{image.height}" if image.width and image.height else "?"
        print(f"{i}: [{image.type}] {size} {image.alt[:40]} -> {image.src[:100]}")


if __name__ == "__main__":
    asyncio.run(debug_extract(sys.argv[1] if len(sys.argv) > 1 else TEST_URL))
