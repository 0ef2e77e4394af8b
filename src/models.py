"""
Request and response models for the extraction API
"""
from typing import List, Optional
from pydantic import BaseModel

# Detection method tags
IMG_TAG = "img-tag"
BACKGROUND_IMAGE = "background-image"
PICTURE_ELEMENT = "picture-element"
LAZY_LOADING = "lazy-loading"


class ImageCandidate(BaseModel):
    src: str
    alt: str
    type: str
    width: int = 0
    height: int = 0
    element: Optional[str] = None  # tag name, background images only


class ExtractRequest(BaseModel):
    url: Optional[str] = None


class ExtractResponse(BaseModel):
    success: bool = True
    images: List[ImageCandidate]
    count: int
    url: str


class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    browser: bool
