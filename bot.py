import logging
from telegram.constants import ParseMode
from telegram.ext import (
    Application,
    CommandHandler,
    Defaults,
    InlineQueryHandler,
    MessageHandler,
    filters,
)
from config import (
    TOKEN,
    TELEGRAM_API_URL,
    POLLER_MODE,
    PORT,
    ROUTE,
    WEBHOOK_URL,
    POLL_TIMEOUT,
)
from handlers.inline import inline_query_handler
from handlers.commands import start_command, help_command
from handlers.messages import text_message_handler
from handlers.errors import error_handler
from utils.scryfall import ScryfallClient

logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def build_application(token: str, searcher, api_url: str = TELEGRAM_API_URL) -> Application:
    app = (
        Application.builder()
        .token(token)
        .base_url(f"{api_url.rstrip('/')}/bot")
        .defaults(Defaults(parse_mode=ParseMode.HTML))
        .build()
    )
    app.bot_data["card_searcher"] = searcher

    app.add_handler(InlineQueryHandler(inline_query_handler))
    app.add_handler(CommandHandler("start", start_command))
    app.add_handler(CommandHandler("help", help_command))
    # after the commands: unknown /commands in private chats get the inline hint too
    app.add_handler(
        MessageHandler(
            filters.ChatType.PRIVATE & filters.TEXT,
            text_message_handler,
        )
    )
    app.add_error_handler(error_handler)
    return app


def main():
    if not TOKEN:
        logger.error("BOT_TOKEN is not set.")
        exit(1)

    app = build_application(TOKEN, ScryfallClient())

    if POLLER_MODE == "webhook":
        webhook_url = WEBHOOK_URL + ROUTE
        logger.info(f"Starting webhook on port {PORT}, public url {webhook_url}")
        app.run_webhook(
            listen="0.0.0.0",
            port=PORT,
            url_path=ROUTE,
            webhook_url=webhook_url,
        )
    else:
        logger.info("Starting long polling")
        app.run_polling(timeout=POLL_TIMEOUT)


if __name__ == "__main__":
    main()
