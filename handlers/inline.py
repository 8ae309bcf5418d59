import asyncio
import logging
from telegram import (
    Update,
    InlineQueryResultArticle,
    InputTextMessageContent,
)
from telegram.error import TelegramError
from telegram.ext import ContextTypes
from config import MAX_RESULTS, CACHE_TIME
from utils.cards import render_card
from utils.scryfall import SearchError

logger = logging.getLogger(__name__)

NO_RESULTS_ID = "0"
NO_RESULTS_TEXT = "Your query returned no results"


def no_results_placeholder() -> InlineQueryResultArticle:
    return InlineQueryResultArticle(
        id=NO_RESULTS_ID,
        title="No results",
        description=NO_RESULTS_TEXT,
        input_message_content=InputTextMessageContent(NO_RESULTS_TEXT),
    )


def build_inline_results(cards, max_results: int = MAX_RESULTS) -> list:
    """
    Turns a card list into inline results.
    The cap applies to source cards, so double-faced cards can give up to
    2 * max_results results.
    """
    results = []
    for card in cards[:max_results]:
        results.extend(render_card(card))
    return results or [no_results_placeholder()]


async def inline_query_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    inline_query = update.inline_query
    query = inline_query.query.strip()
    if not query:
        return

    searcher = context.bot_data["card_searcher"]
    loop = asyncio.get_running_loop()
    try:
        cards = await loop.run_in_executor(None, searcher.search_cards, query)
    except SearchError as e:
        logger.warning("Card search failed for %r: %s", query, e)
        cards = []

    results = build_inline_results(cards)

    try:
        await inline_query.answer(results, cache_time=CACHE_TIME)
    except TelegramError as e:
        logger.error(f"Failed to answer inline query {query!r}: {e}")
