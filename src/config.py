"""
Runtime settings for the image extraction service
"""
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Browser
HEADLESS = os.getenv("HEADLESS", "true").lower() not in ("0", "false", "no")
BROWSER_ARGS = [
    '--no-sandbox',
    '--disable-setuid-sandbox',
    '--disable-dev-shm-usage',
    '--disable-web-security',
]
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
VIEWPORT = {'width': 1920, 'height': 1080}

# Page timing (milliseconds)
NAVIGATION_TIMEOUT_MS = int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000"))
SETTLE_DELAY_MS = int(os.getenv("SETTLE_DELAY_MS", "3000"))
SCROLL_STEPS = int(os.getenv("SCROLL_STEPS", "5"))
SCROLL_PAUSE_MS = int(os.getenv("SCROLL_PAUSE_MS", "1000"))

# Images with both dimensions known and either one below this are dropped
MIN_IMAGE_SIZE = int(os.getenv("MIN_IMAGE_SIZE", "50"))
