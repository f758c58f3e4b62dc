"""Client library for JokeAPI (https://jokeapi.dev)."""
from .api import Request, parse_response
from .exceptions import APIError, DecodeError, InvalidValueError, JokeAPIError, TransportError
from .models import ErrorResponse, Joke, Jokes
from .types import Categories, Category, Flag, Flags, IDRange, JokeType, Lang

__all__ = (
    "APIError",
    "Categories",
    "Category",
    "DecodeError",
    "ErrorResponse",
    "Flag",
    "Flags",
    "IDRange",
    "InvalidValueError",
    "Joke",
    "JokeAPIError",
    "JokeType",
    "Jokes",
    "Lang",
    "Request",
    "TransportError",
    "parse_response",
)
