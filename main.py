"""
ImageHarvest API - extract image URLs from rendered web pages
Drives a shared headless Chromium and scans the DOM for images
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from src import config
from src.browser import BrowserManager
from src.models import ErrorResponse, ExtractRequest, ExtractResponse, HealthResponse
from src.scraper import ExtractionError, ImageExtractor

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent

browser_manager = BrowserManager()
extractor = ImageExtractor(browser_manager)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Shutting down gracefully...")
    await browser_manager.close()


app = FastAPI(
    title="ImageHarvest",
    description="Extract image URLs from rendered web pages",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

# Templates
templates = Jinja2Templates(directory=BASE_DIR / "templates")


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Serve the main page."""
    return templates.TemplateResponse(request, "index.html")


@app.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="OK", browser=browser_manager.is_running)


@app.post(
    "/extract-images",
    response_model=ExtractResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def extract_images(request: Optional[ExtractRequest] = None):
    """Load the page at `url` and return every unique image found on it."""
    submitted = request.url if request else None
    url = (submitted or "").strip()
    if not url:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="URL is required").model_dump(exclude_none=True),
        )

    try:
        images = await extractor.extract(url)
    except ExtractionError as e:
        logger.error("Extraction failed for %s: %s", url, e)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error="Failed to extract images", message=str(e)).model_dump(),
        )

    return ExtractResponse(images=images, count=len(images), url=submitted)


if __name__ == "__main__":
    import uvicorn
    logger.info("Server running at http://localhost:%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)
