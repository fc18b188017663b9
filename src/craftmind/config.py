import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "").upper()

# Credentials: keys.json first, then the environment
KEYS_FILE = os.getenv("CRAFTMIND_KEYS_FILE", "keys.json")

# --- CONFIG --- chat / embeddings
DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
DEFAULT_STOP_SEQUENCE = "***"
REASONING_MODEL_MARKER = "o1"  # these models reject a `stop` parameter
FALLBACK_MESSAGE = "My brain disconnected, try again."

# === CONFIGURATION === screenshots
BOTS_DIR = os.getenv("CRAFTMIND_BOTS_DIR", "bots")
SCREENSHOTS_DIR_NAME = "screenshots"
CAMERA_VIEW_DISTANCE = 4
CAMERA_WIDTH = 800
CAMERA_HEIGHT = 512
CAMERA_EYE_OFFSET = 2
CAMERA_SETTLE_SECONDS = float(os.getenv("CRAFTMIND_CAMERA_SETTLE_SECONDS", "5"))
