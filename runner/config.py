import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

AGENT_KEY = os.getenv("AGENT_KEY", "2644")
OWNER_RT = os.getenv("OWNER_RT", "AGENT")
PAGE_SIZE = int(os.getenv("PAGE_SIZE", "500"))
BASE_URL = os.getenv(
    "BASE_URL", "https://www.theagencyre.com/services/agoraGetFeaturedProperties.ashx")
AGENT_REFERER = os.getenv(
    "AGENT_REFERER", "https://www.theagencyre.com/agent/joshua-kashani")
SITE_ORIGIN = os.getenv("SITE_ORIGIN", "https://www.theagencyre.com")

OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "public/listings.json"))
TIMESTAMP_LOG = Path(os.getenv("TIMESTAMP_LOG", "scripts/fetchTimestamps.log"))

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "60"))
FETCH_WORKERS = int(os.getenv("FETCH_WORKERS", "6"))
