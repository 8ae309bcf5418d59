from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup, LinkPreviewOptions
from telegram.ext import ContextTypes
from config import (
    START_MESSAGE,
    HELP_MESSAGE,
    START_INLINE_QUERY,
    SYNTAX_GUIDE_URL,
    INLINE_BOTS_URL,
)

NO_PREVIEW = LinkPreviewOptions(is_disabled=True)


def start_keyboard() -> InlineKeyboardMarkup:
    keyboard = [
        [
            InlineKeyboardButton(
                "Select a chat to see me in action",
                switch_inline_query=START_INLINE_QUERY,
            )
        ]
    ]
    return InlineKeyboardMarkup(keyboard)


def help_keyboard() -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton("Advanced Syntax Guide", url=SYNTAX_GUIDE_URL)],
        [InlineKeyboardButton("Learn about inline bots", url=INLINE_BOTS_URL)],
    ]
    return InlineKeyboardMarkup(keyboard)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(
        START_MESSAGE,
        reply_markup=start_keyboard(),
        link_preview_options=NO_PREVIEW,
    )


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text(
        HELP_MESSAGE,
        reply_markup=help_keyboard(),
        link_preview_options=NO_PREVIEW,
    )
