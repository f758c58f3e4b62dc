"""Closed vocabularies and small value types shared by requests and responses.

See https://jokeapi.dev for the meaning of each token.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List

from .exceptions import InvalidValueError


class _Token(str, Enum):
    """A string enum that can only be built from a known token."""

    @classmethod
    def parse(cls, raw: str):
        """Return the member whose value is exactly ``raw``.

        Raises:
            InvalidValueError: If ``raw`` is not in the vocabulary.
        """
        try:
            return cls(raw)
        except ValueError:
            raise InvalidValueError(_KINDS[cls], raw) from None

    def __str__(self) -> str:
        return self.value


class Lang(_Token):
    CS = "cs"  # Czech
    DE = "de"  # German
    EN = "en"  # English
    ES = "es"  # Spanish
    FR = "fr"  # French
    PT = "pt"  # Portuguese


class Flag(_Token):
    """Blacklist flag."""

    NSFW = "nsfw"
    RELIGIOUS = "religious"
    POLITICAL = "political"
    RACIST = "racist"
    SEXIST = "sexist"
    EXPLICIT = "explicit"


class Category(_Token):
    ANY = "Any"
    MISC = "Misc"
    PROGRAMMING = "Programming"
    DARK = "Dark"
    PUN = "Pun"
    SPOOKY = "Spooky"
    CHRISTMAS = "Christmas"


class JokeType(_Token):
    SINGLE = "single"
    TWOPART = "twopart"


_KINDS = {
    Lang: "lang code",
    Flag: "flag",
    Category: "category",
    JokeType: "type",
}


class _TokenList(list):
    """Ordered list of tokens rendered as a comma separated string."""

    token: type = _Token

    def add(self, raw: str) -> None:
        """Validate ``raw`` and append it. The list is untouched on failure."""
        self.append(self.token.parse(raw))

    def __str__(self) -> str:
        return ",".join(str(t) for t in self)


class Flags(_TokenList):
    token = Flag


class Categories(_TokenList):
    token = Category


@dataclass(frozen=True)
class IDRange:
    """Inclusive joke id range; ``upper == 0`` means a single id."""

    lower: int
    upper: int = 0

    def __post_init__(self):
        if self.lower < 0 or self.upper < 0:
            raise InvalidValueError("id range", f"{self.lower}-{self.upper}")

    @classmethod
    def single(cls, id: int) -> "IDRange":
        return cls(id, 0)

    @classmethod
    def parse(cls, raw: str) -> "IDRange":
        """Parse ``"N"`` or ``"N-M"``, the inverse of ``str()``."""
        parts: List[str] = raw.split("-")
        if len(parts) > 2 or not all(p.isdigit() for p in parts):
            raise InvalidValueError("id range", raw)
        return cls(*(int(p) for p in parts))

    def __str__(self) -> str:
        if self.upper > 0:
            return f"{self.lower}-{self.upper}"
        return str(self.lower)
