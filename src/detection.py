"""
Image detection heuristics.

The in-page scan (see scraper.COLLECT_IMAGES_SCRIPT) only gathers raw
attribute and style values. Everything here runs in Python so the
parsing and filtering rules can be checked without a browser.
"""
import re
from typing import Iterable, List, Optional

from src.models import (
    BACKGROUND_IMAGE,
    IMG_TAG,
    LAZY_LOADING,
    PICTURE_ELEMENT,
    ImageCandidate,
)

CSS_URL_PATTERN = re.compile(r'url\(["\']?(.*?)["\']?\)')


def is_absolute_http(url: Optional[str]) -> bool:
    return bool(url) and url.startswith(("http://", "https://"))


def parse_background_url(value: Optional[str]) -> Optional[str]:
    """Return the first url(...) argument of a CSS background-image value."""
    if not value or value == "none" or "url(" not in value:
        return None
    match = CSS_URL_PATTERN.search(value)
    if match and match.group(1):
        return match.group(1)
    return None


def pick_srcset_url(srcset: Optional[str]) -> Optional[str]:
    """
    Pick the last absolute URL from a srcset string.

    Entries are listed smallest to largest by convention, so the last one
    is usually the highest quality.
    """
    if not srcset or "http" not in srcset:
        return None
    urls = [part.strip().split(" ")[0] for part in srcset.split(",")]
    http_urls = [u for u in urls if is_absolute_http(u)]
    return http_urls[-1] if http_urls else None


def _from_tags(tags: Iterable[dict]) -> List[ImageCandidate]:
    found = []
    for tag in tags:
        src = tag.get("src")
        if not is_absolute_http(src):
            continue
        found.append(ImageCandidate(
            src=src,
            alt=tag.get("alt") or f"image-{tag['index']}",
            type=IMG_TAG,
            width=int(tag.get("width") or 0),
            height=int(tag.get("height") or 0),
        ))
    return found


def _from_backgrounds(backgrounds: Iterable[dict]) -> List[ImageCandidate]:
    found = []
    for bg in backgrounds:
        src = parse_background_url(bg.get("value"))
        if not is_absolute_http(src):
            continue
        found.append(ImageCandidate(
            src=src,
            alt=f"background-{bg['index']}",
            type=BACKGROUND_IMAGE,
            element=bg.get("element"),
        ))
    return found


def _from_pictures(pictures: Iterable[dict]) -> List[ImageCandidate]:
    found = []
    for pic in pictures:
        src = pick_srcset_url(pic.get("srcset"))
        if not src:
            continue
        found.append(ImageCandidate(
            src=src,
            alt=f"picture-{pic['index']}",
            type=PICTURE_ELEMENT,
        ))
    return found


def _from_lazy(lazy: Iterable[dict]) -> List[ImageCandidate]:
    found = []
    for item in lazy:
        src = item.get("src")
        if not is_absolute_http(src):
            continue
        found.append(ImageCandidate(
            src=src,
            alt=f"lazy-{item['index']}",
            type=LAZY_LOADING,
        ))
    return found


def build_candidates(raw: dict) -> List[ImageCandidate]:
    """Turn a raw DOM scan into candidates, one detection method after another."""
    candidates = []
    candidates.extend(_from_tags(raw.get("tags", [])))
    candidates.extend(_from_backgrounds(raw.get("backgrounds", [])))
    candidates.extend(_from_pictures(raw.get("pictures", [])))
    candidates.extend(_from_lazy(raw.get("lazy", [])))
    return candidates


def is_too_small(candidate: ImageCandidate, min_size: int) -> bool:
    if candidate.width <= 0 or candidate.height <= 0:
        return False
    return candidate.width < min_size or candidate.height < min_size


def filter_candidates(candidates: List[ImageCandidate], min_size: int) -> List[ImageCandidate]:
    """
    Keep the first occurrence of each source URL, minus undersized images.

    Only the first occurrence is ever considered, so an undersized first
    hit also hides later duplicates with unknown size.
    """
    seen = set()
    kept = []
    for candidate in candidates:
        if candidate.src in seen:
            continue
        seen.add(candidate.src)
        if is_too_small(candidate, min_size):
            continue
        kept.append(candidate)
    return kept
