import os
import logging
from pathlib import Path
from dotenv import load_dotenv

dotenv_path = Path(__file__).resolve().parent / ".env"
load_dotenv(dotenv_path)

# Logging
logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.INFO
)
logger = logging.getLogger(__name__)


def _as_bool(value) -> bool:
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


# Telegram
TOKEN = os.getenv("BOT_TOKEN") or os.getenv("TELEGRAM_TOKEN")
TELEGRAM_API_URL = os.getenv("TELEGRAM_API_URL") or "https://api.telegram.org"
VERBOSE_OUTPUT = _as_bool(os.getenv("VERBOSE_OUTPUT", "false"))

# Delivery mode: "webhook" or long polling
POLLER_MODE = os.getenv("POLLER_MODE", "polling").strip().lower()
PORT = int(os.getenv("PORT") or "8443")
ROUTE = os.getenv("ROUTE", "")
WEBHOOK_URL = os.getenv("WEBHOOK_URL", "")
POLL_TIMEOUT = 10

# Scryfall
SCRYFALL_API_URL = os.getenv("SCRYFALL_API_URL", "https://api.scryfall.com")
SCRYFALL_UA = os.getenv("SCRYFALL_UA", "ScryfallInlineBot/1.0")
SEARCH_TIMEOUT = 10

# Telegram accepts at most 50 results per inline answer
MAX_RESULTS = 50
CACHE_TIME = 60

if VERBOSE_OUTPUT:
    logging.getLogger().setLevel(logging.DEBUG)

# Messages
START_MESSAGE = (
    "Hi! I'm your Magic: the Gathering bot, I work in inline mode to search for "
    "Magic: The Gathering cards in scryfall.com\n"
    "I support advanced syntax to filter results like color, type, artist, mana value, etc\n\n"
    "tap the button below to start using me\n\n"
    "Type /help to learn more about inline bots and the advanced syntax you can use "
    "to filter your searches"
)
HELP_MESSAGE = "Helpful links:"
DEFAULT_MESSAGE = 'I only work in inline mode, tap the button below to search "{}"'

START_INLINE_QUERY = "liliana"
SYNTAX_GUIDE_URL = "https://scryfall.com/docs/syntax"
INLINE_BOTS_URL = "https://telegram.org/blog/inline-bots"
