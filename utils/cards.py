import logging
from typing import List, Optional
from telegram import InlineKeyboardButton, InlineKeyboardMarkup, InlineQueryResultPhoto
from utils.scryfall import Card, ImageUris

logger = logging.getLogger(__name__)

# Layouts whose faces each carry their own image
DOUBLE_FACED_LAYOUTS = frozenset({"modal_dfc", "transform", "double_faced_token", "art_series"})


def is_double_faced(layout: str) -> bool:
    return layout in DOUBLE_FACED_LAYOUTS


def details_markup(card: Card) -> InlineKeyboardMarkup:
    """Reply markup attached to every photo result."""
    keyboard = [[InlineKeyboardButton("Details", url=card.scryfall_uri)]]
    return InlineKeyboardMarkup(keyboard)


def _has_image(images: Optional[ImageUris]) -> bool:
    return bool(images and images.normal)


def _photo_result(result_id: str, images: ImageUris, card: Card) -> InlineQueryResultPhoto:
    return InlineQueryResultPhoto(
        id=result_id,
        photo_url=images.normal,
        thumbnail_url=images.small or images.normal,
        reply_markup=details_markup(card),
    )


def result_from_card(card: Card) -> Optional[InlineQueryResultPhoto]:
    """
    Photo result for the whole card. Layouts such as battle or reversible_card
    only have images on their faces, so the first face with an image is used.
    """
    images = card.image_uris
    if not _has_image(images):
        images = next((f.image_uris for f in card.card_faces if _has_image(f.image_uris)), None)
    if images is None:
        return None
    return _photo_result(card.id, images, card)


def result_from_face(card: Card, face_index: int) -> Optional[InlineQueryResultPhoto]:
    face = card.card_faces[face_index]
    if not _has_image(face.image_uris):
        return None
    return _photo_result(f"{card.id}-face-{face_index}", face.image_uris, card)


def render_card(card: Card) -> List[InlineQueryResultPhoto]:
    """One photo result per card, or one per face (front first) for double-faced cards."""
    if is_double_faced(card.layout) and len(card.card_faces) >= 2:
        results = [result_from_face(card, 0), result_from_face(card, 1)]
    else:
        results = [result_from_card(card)]

    rendered = [r for r in results if r is not None]
    if len(rendered) < len(results):
        logger.debug("Skipped %d imageless result(s) for card %s", len(results) - len(rendered), card.id)
    return rendered
