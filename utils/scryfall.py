import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

import requests

from config import SCRYFALL_API_URL, SCRYFALL_UA, SEARCH_TIMEOUT

logger = logging.getLogger(__name__)


class SearchError(Exception):
    """The Scryfall search call failed (network, bad query, rate limit...)."""

    def __init__(self, message: str, status: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.code = code


@dataclass
class ImageUris:
    normal: Optional[str] = None
    small: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[dict]) -> Optional["ImageUris"]:
        if not data:
            return None
        return cls(normal=data.get("normal"), small=data.get("small"))


@dataclass
class CardFace:
    name: str = ""
    image_uris: Optional[ImageUris] = None

    @classmethod
    def from_json(cls, data: dict) -> "CardFace":
        return cls(
            name=data.get("name", ""),
            image_uris=ImageUris.from_json(data.get("image_uris")),
        )


@dataclass
class Card:
    id: str
    name: str = ""
    layout: str = "normal"
    scryfall_uri: str = ""
    image_uris: Optional[ImageUris] = None
    card_faces: List[CardFace] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> "Card":
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            layout=data.get("layout", "normal"),
            scryfall_uri=data.get("scryfall_uri", ""),
            image_uris=ImageUris.from_json(data.get("image_uris")),
            card_faces=[CardFace.from_json(f) for f in data.get("card_faces") or []],
        )


class CardSearcher(Protocol):
    def search_cards(self, query: str) -> List[Card]: ...


class ScryfallClient:
    """Blocking client for the Scryfall full-text card search.

    Only the first page of results is fetched and the API's default
    unique/order/dir modes apply.
    """

    def __init__(self, base_url: str = SCRYFALL_API_URL, timeout: float = SEARCH_TIMEOUT,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": SCRYFALL_UA, "Accept": "application/json"})

    def search_cards(self, query: str) -> List[Card]:
        url = f"{self.base_url}/cards/search"
        try:
            resp = self.session.get(url, params={"q": query}, timeout=self.timeout)
        except requests.RequestException as e:
            raise SearchError(f"Scryfall request failed: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            raise SearchError(
                f"Invalid response from Scryfall (HTTP {resp.status_code})",
                status=resp.status_code,
            ) from e

        if not isinstance(payload, dict):
            raise SearchError("Unexpected response from Scryfall", status=resp.status_code)

        if payload.get("object") == "error":
            code = payload.get("code")
            # 404 "not_found" means the query matched nothing
            if code == "not_found":
                logger.debug("No cards matched %r", query)
                return []
            raise SearchError(
                payload.get("details", "Scryfall returned an error"),
                status=payload.get("status", resp.status_code),
                code=code,
            )

        if not resp.ok:
            raise SearchError(f"Scryfall returned HTTP {resp.status_code}", status=resp.status_code)

        logger.debug(
            "Query %r: %s cards total, has_more=%s",
            query, payload.get("total_cards"), payload.get("has_more"),
        )
        try:
            return [Card.from_json(c) for c in payload.get("data", [])]
        except (KeyError, TypeError, AttributeError) as e:
            raise SearchError(f"Malformed card data from Scryfall: {e}") from e
