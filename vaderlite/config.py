import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env files in priority order: project root first, then the CWD
_PACKAGE_DIR = Path(__file__).parent
_PROJECT_ROOT = _PACKAGE_DIR.parent

load_dotenv(_PROJECT_ROOT / ".env")
load_dotenv()  # ./.env of the working directory; never overrides real env vars

# --- Lexicon data (empty = data bundled with vaderSentiment) ---
LEXICON_PATH = os.getenv("VADERLITE_LEXICON_PATH", "") or None
EMOJI_LEXICON_PATH = os.getenv("VADERLITE_EMOJI_LEXICON_PATH", "") or None

# --- Logging ---
LOG_LEVEL = os.getenv("VADERLITE_LOG_LEVEL", "WARNING").upper()

# --- HTTP service ---
API_HOST = os.getenv("VADERLITE_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("VADERLITE_API_PORT", "8000"))
MAX_TEXT_LENGTH = int(os.getenv("VADERLITE_MAX_TEXT_LENGTH", "10000"))
MAX_BATCH_SIZE = int(os.getenv("VADERLITE_MAX_BATCH_SIZE", "256"))
