"""
Tests for the /start and /help replies.
"""
import pytest

from config import START_MESSAGE, HELP_MESSAGE
from handlers.commands import start_command, help_command


@pytest.mark.asyncio
async def test_start_command(mock_message_update, mock_context):
    await start_command(mock_message_update, mock_context)

    reply = mock_message_update.message.reply_text
    reply.assert_awaited_once()
    assert reply.call_args[0][0] == START_MESSAGE

    markup = reply.call_args.kwargs["reply_markup"]
    button = markup.inline_keyboard[0][0]
    assert button.switch_inline_query == "liliana"
    assert reply.call_args.kwargs["link_preview_options"].is_disabled


@pytest.mark.asyncio
async def test_help_command(mock_message_update, mock_context):
    mock_message_update.message.text = "/help"

    await help_command(mock_message_update, mock_context)

    reply = mock_message_update.message.reply_text
    assert reply.call_args[0][0] == HELP_MESSAGE

    rows = reply.call_args.kwargs["reply_markup"].inline_keyboard
    assert [row[0].url for row in rows] == [
        "https://scryfall.com/docs/syntax",
        "https://telegram.org/blog/inline-bots",
    ]
    assert reply.call_args.kwargs["link_preview_options"].is_disabled
