"""CLI entry point for the JokeAPI client.

Usage:
    python -m jokeapi.main [--amount N] [--category CAT ...] [--flag FLAG ...]
                           [--lang LANG] [--type TYPE] [--id N[-M]]
                           [--contains TEXT] [--safe]
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import api, config
from .exceptions import InvalidValueError, JokeAPIError
from .types import Category, Flag, IDRange, JokeType, Lang


def _choices(enum) -> str:
    return ", ".join(t.value for t in enum)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jokeapi",
        description="Fetch jokes from JokeAPI (https://jokeapi.dev).",
    )
    parser.add_argument("--amount", type=int, default=1, help="Get N number of jokes (default: 1)")
    parser.add_argument("--contains", default="", help="Get jokes containing TEXT")
    parser.add_argument("--safe", action="store_true", help="Set safe-mode on")
    parser.add_argument("--flag", action="append", default=[], help=f"Add blacklist flag ({_choices(Flag)})")
    parser.add_argument("--category", action="append", default=[], help=f"Add category ({_choices(Category)})")
    parser.add_argument("--lang", help=f"Set language ({_choices(Lang)})")
    parser.add_argument("--type", help=f"Set joke type ({_choices(JokeType)})")
    parser.add_argument("--id", help="Restrict to a joke id or an id range like 2-32")
    return parser


def _build_request(args: argparse.Namespace) -> api.Request:
    req = api.Request.new()
    req.amount = args.amount
    req.contains = args.contains
    req.safe = args.safe
    for raw in args.flag:
        req.add_flag(raw)
    for raw in args.category:
        req.add_category(raw)
    if args.lang is not None:
        req.set_lang(args.lang)
    if args.type is not None:
        req.set_type(args.type)
    if args.id is not None:
        req.id = IDRange.parse(args.id)
    return req


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        req = _build_request(args)
    except InvalidValueError as e:
        parser.error(str(e))

    try:
        jokes = req.get()
    except JokeAPIError as e:
        print(e)
        return 1

    # Separate jokes with a rule line
    for i, joke in enumerate(jokes):
        if i:
            print("---")
        print(joke)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
