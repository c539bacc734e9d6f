"""Reader for the tilde-separated game catalogue."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

from .recommender import GameRecommender

DEFAULT_LIMIT = 10
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass
class GameRecord:
    """One parsed catalogue row."""

    name: str
    genres: list[str]
    features: list[str]
    rating: float
    price: float


def _cut(text: str, sep: str) -> tuple[str, str]:
    index = text.find(sep)
    if index < 0:
        raise ValueError(f"missing {sep!r} in {text!r}")
    return text[:index], text[index + 1:]


def _field(text: str) -> tuple[str, str]:
    if text.startswith('"'):
        value, rest = _cut(text[1:], '"')
        return value, rest[1:]
    return _cut(text, "~")


def _split(text: str, trim) -> list[str]:
    parts = text.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[1:] if trim(part) else part for part in parts]


def _to_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else -1.0


def parse_line(line: str) -> GameRecord:
    """Parse a row: name~genres~features~rating~price, lists optionally quoted."""
    line = line.rstrip("\r\n")
    name, rest = _cut(line, "~")
    genres, rest = _field(rest)
    features, rest = _field(rest)
    rating, price = _cut(rest, "~")
    features_indented = features.startswith(" ")
    return GameRecord(
        name=name,
        genres=_split(genres, lambda _part: features_indented),
        features=_split(features, lambda part: part.startswith(" ")),
        rating=_to_float(rating),
        price=_to_float(price[1:]),
    )


def read_csv(path, recommender=None, limit=DEFAULT_LIMIT) -> GameRecommender:
    """Load up to `limit` rows after the header into a recommender."""
    if recommender is None:
        recommender = GameRecommender()
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for count, line in enumerate(handle):
            if count >= limit:
                break
            record = parse_line(line)
            recommender.add_game(
                record.name, record.genres, record.features, record.rating, record.price
            )
    return recommender


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Load a game catalogue.")
    parser.add_argument("path", nargs="?", default="games.csv", type=Path)
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT)
    args = parser.parse_args(argv)
    recommender = read_csv(args.path, limit=args.limit)
    print(f"{len(recommender.games)} games loaded")
    return 0