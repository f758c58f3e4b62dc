"""Client for the JokeAPI "joke" endpoint.

A :class:`Request` collects the filters, renders them into a URL and
performs the GET. :func:`parse_response` turns the raw body into a list of
:class:`~jokeapi.models.Joke` or raises the matching error.
Network calls go through ``requests`` and are designed to be mockable in tests.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlencode, urlsplit

import pydantic
import requests

from . import config
from .exceptions import APIError, DecodeError, InvalidValueError, TransportError
from .models import ErrorResponse, Joke, Jokes
from .types import Categories, Category, Flags, IDRange, JokeType, Lang

logger = logging.getLogger(__name__)

KEY_AMOUNT = "amount"
KEY_BLACKLIST = "blacklistFlags"
KEY_CONTAINS = "contains"
KEY_ID_RANGE = "idRange"
KEY_LANG = "lang"
KEY_SAFE = "safe-mode"
KEY_TYPE = "type"


@dataclass
class Request:
    """A joke request.

    ``None`` and empty values mean "not set" and are left out of the query.
    Enumerated fields should be filled through the validating setters.
    """

    amount: Optional[int] = None
    blacklist: Flags = field(default_factory=Flags)
    category: Categories = field(default_factory=Categories)
    contains: str = ""
    id: Optional[IDRange] = None
    lang: Optional[Lang] = None
    safe: bool = False
    type: Optional[JokeType] = None

    @classmethod
    def new(cls) -> "Request":
        return cls()

    def add_flag(self, raw: str) -> None:
        self.blacklist.add(raw)

    def add_category(self, raw: str) -> None:
        self.category.add(raw)

    def set_lang(self, raw: str) -> None:
        """Validate and set the language. Raises InvalidValueError."""
        self.lang = Lang.parse(raw)

    def set_type(self, raw: str) -> None:
        """Validate and set the joke type. Raises InvalidValueError."""
        self.type = JokeType.parse(raw)

    def query(self) -> Dict[str, str]:
        """Render the set fields as query parameters.

        Returns:
            Mapping of parameter name to value, in a fixed key order.
        """
        params: Dict[str, str] = {}
        if self.amount is not None and self.amount > 0:
            params[KEY_AMOUNT] = str(self.amount)
        if self.blacklist:
            params[KEY_BLACKLIST] = str(self.blacklist)
        if self.contains:
            params[KEY_CONTAINS] = self.contains
        if self.id is not None:
            params[KEY_ID_RANGE] = str(self.id)
        if self.lang is not None:
            params[KEY_LANG] = self.lang.value
        if self.safe:
            params[KEY_SAFE] = ""
        if self.type is not None:
            params[KEY_TYPE] = self.type.value
        return params

    def url(self, base_url: Optional[str] = None) -> str:
        """Full API URL for this request.

        Falls back to the "Any" category when no category was added.
        """
        categories = self.category or Categories([Category.ANY])
        url = f"{base_url or config.BASE_URL}/joke/{categories}"
        params = self.query()
        if params:
            url += "?" + urlencode(sorted(params.items()))
        return url

    @classmethod
    def from_url(cls, url: str) -> "Request":
        """Rebuild a request from a URL produced by :meth:`url`.

        Raises:
            InvalidValueError: On unknown tokens or a path that is not a joke path.
        """
        parts = urlsplit(url)
        head, _, tail = parts.path.lstrip("/").partition("/")
        if head != "joke" or not tail:
            raise InvalidValueError("joke path", parts.path)

        req = cls()
        if tail != Category.ANY.value:
            for raw in tail.split(","):
                req.add_category(raw)

        params = {k: v[-1] for k, v in parse_qs(parts.query, keep_blank_values=True).items()}
        if KEY_AMOUNT in params:
            try:
                req.amount = int(params[KEY_AMOUNT])
            except ValueError:
                raise InvalidValueError("amount", params[KEY_AMOUNT]) from None
        if params.get(KEY_BLACKLIST):
            for raw in params[KEY_BLACKLIST].split(","):
                req.add_flag(raw)
        req.contains = params.get(KEY_CONTAINS, "")
        if KEY_ID_RANGE in params:
            req.id = IDRange.parse(params[KEY_ID_RANGE])
        if KEY_LANG in params:
            req.set_lang(params[KEY_LANG])
        req.safe = KEY_SAFE in params
        if KEY_TYPE in params:
            req.set_type(params[KEY_TYPE])
        return req

    def get(self) -> List[Joke]:
        """Fetch jokes with the default ``requests`` transport."""
        return self.get_using_client(None)

    def get_using_client(self, client: Any = None, timeout: Optional[float] = None) -> List[Joke]:
        """Perform the GET with ``client`` and parse the body.

        Args:
            client: Anything with a ``requests``-style ``get(url, timeout=...)``,
                e.g. a ``requests.Session``. Defaults to the ``requests`` module.
            timeout: Request timeout in seconds; defaults to ``config.TIMEOUT``.

        Returns:
            The jokes contained in the response.

        Raises:
            TransportError: When the request or body read fails.
            DecodeError: When the body is not a recognised response.
            APIError: When the service answers with an error payload.
        """
        cli = client if client is not None else requests
        url = self.url()
        logger.debug("GET %s", url)
        try:
            resp = cli.get(url, timeout=timeout if timeout is not None else config.TIMEOUT)
            body = resp.content
        except requests.RequestException as e:
            raise TransportError(f"Request failed for {url}: {e}", e) from e
        return parse_response(body)


def _decode(model: type, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise DecodeError(f"Invalid {model.__name__} payload: {e}") from e


def parse_response(raw: Union[bytes, str]) -> List[Joke]:
    """Parse a response body into a list of jokes.

    The shape is picked from the ``error`` and ``amount`` keys: an error
    payload, a multi-joke wrapper or a single joke.

    Raises:
        DecodeError: On invalid JSON or a payload without ``error``.
        APIError: When ``error`` is true.
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError("response is not a JSON object")
    if "error" not in data:
        raise DecodeError('response has no "error" property')
    is_error = data["error"]
    if is_error is None:
        is_error = False
    elif not isinstance(is_error, bool):
        raise DecodeError(f'"error" property is not a boolean: {is_error!r}')

    if is_error:
        err = _decode(ErrorResponse, data)
        logger.warning("JokeAPI error %s: %s (%s)", err.code, err.message, err.info)
        raise APIError(err)

    if "amount" in data:
        jokes = _decode(Jokes, data).jokes
        logger.debug("Parsed multi-joke response with %d jokes", len(jokes))
        return jokes

    logger.debug("Parsed single-joke response")
    return [_decode(Joke, data)]
