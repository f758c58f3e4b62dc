"""Response payloads of the JokeAPI "joke" endpoint.

Missing fields fall back to empty values. Enumerated fields hold the enum
member for known tokens and the raw string for tokens this client does not
know yet.
"""
from typing import Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field

from .types import Category, JokeType, Lang


__all__ = ("Joke", "Jokes", "ErrorResponse")


class Joke(BaseModel):
    category: Union[Category, str] = Field(default="", union_mode="left_to_right")
    delivery: str = ""
    flags: Dict[str, bool] = Field(default_factory=dict)
    id: int = 0
    joke: str = ""
    lang: Union[Lang, str] = Field(default="", union_mode="left_to_right")
    safe: bool = False
    setup: str = ""
    type: Union[JokeType, str] = Field(default="", union_mode="left_to_right")

    def __str__(self) -> str:
        if self.type is JokeType.TWOPART:
            return f"{self.setup}\n{self.delivery}"
        return self.joke


class Jokes(BaseModel):
    """Multi-joke response, sent when more than one joke is requested."""

    amount: int = 0
    jokes: List[Joke] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cause: List[str] = Field(default_factory=list, alias="causedBy")
    code: int = 0
    info: str = Field(default="", alias="additionalInfo")
    internal: bool = Field(default=False, alias="internalError")
    message: str = ""
    time: int = Field(default=0, alias="timestamp")
