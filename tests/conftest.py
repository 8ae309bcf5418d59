"""
Shared fixtures: Scryfall card payloads and fake Telegram updates.
"""
import pytest
from unittest.mock import MagicMock, AsyncMock

from utils.scryfall import Card


def _card_json(card_id, layout="normal", faces=0):
    data = {
        "object": "card",
        "id": card_id,
        "name": f"Card {card_id}",
        "layout": layout,
        "scryfall_uri": f"https://scryfall.com/card/tst/1/{card_id}",
    }
    if faces:
        data["card_faces"] = [
            {
                "object": "card_face",
                "name": f"Face {i}",
                "image_uris": {
                    "normal": f"https://img.test/{card_id}/{i}/normal.jpg",
                    "small": f"https://img.test/{card_id}/{i}/small.jpg",
                },
            }
            for i in range(faces)
        ]
    else:
        data["image_uris"] = {
            "normal": f"https://img.test/{card_id}/normal.jpg",
            "small": f"https://img.test/{card_id}/small.jpg",
        }
    return data


@pytest.fixture
def make_card():
    def _make(card_id, layout="normal", faces=0):
        return Card.from_json(_card_json(card_id, layout, faces))
    return _make


@pytest.fixture
def mock_searcher():
    searcher = MagicMock()
    searcher.search_cards.return_value = []
    return searcher


@pytest.fixture
def mock_context(mock_searcher):
    context = MagicMock()
    context.bot_data = {"card_searcher": mock_searcher}
    return context


@pytest.fixture
def make_inline_update():
    def _make(text):
        update = MagicMock()
        update.inline_query.query = text
        update.inline_query.answer = AsyncMock()
        return update
    return _make


@pytest.fixture
def mock_message_update():
    update = MagicMock()
    update.message.text = "/start"
    update.message.reply_text = AsyncMock()
    return update


@pytest.fixture
def card_json():
    return _card_json
