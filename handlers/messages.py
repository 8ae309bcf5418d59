import html
import logging
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ContextTypes
from config import DEFAULT_MESSAGE


def search_text_keyboard(text: str) -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton("Search this text", switch_inline_query_current_chat=text)]
    ]
    return InlineKeyboardMarkup(keyboard)


async def text_message_handler(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Points private-chat users to inline mode. Registered for private chats only."""
    msg = update.message
    if not msg or not msg.text:
        logging.getLogger(__name__).debug(
            "text_message_handler: empty message or no text, skipping."
        )
        return

    await msg.reply_text(
        DEFAULT_MESSAGE.format(html.escape(msg.text)),
        reply_markup=search_text_keyboard(msg.text),
    )
