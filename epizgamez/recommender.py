"""Game catalogue and similarity graph used to recommend games."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

SIMILARITY_THRESHOLD = 0.5
FEATURE_WEIGHT = 0.7
GENRE_WEIGHT = 0.3


@dataclass
class Game:
    """A game with its genres, features, rating and price (-1 when unknown)."""

    name: str
    genres: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    rating: float = -1.0
    price: float = -1.0


def _overlap(first: list[str], second: list[str]) -> float:
    """Share of the combined tags that the second game carries."""
    union = set(first) | set(second)
    if not union:
        return math.nan
    return len(set(second)) / len(union)


class GameRecommender:
    """Holds games and an undirected graph linking the similar ones."""

    def __init__(self) -> None:
        self.games: dict[str, Game] = {}
        self.adjacency: dict[str, list[tuple[str, float]]] = {}

    def add_game(self, name, genres, features, rating, price) -> Game:
        """Add a game; a name already present keeps its first entry."""
        game = Game(name, list(genres), list(features), float(rating), float(price))
        return self.games.setdefault(name, game)

    def similarity(self, game1: Game, game2: Game) -> float:
        """Weighted feature and genre overlap; NaN when a tag set is empty on both."""
        genre_score = _overlap(game1.genres, game2.genres)
        feature_score = _overlap(game1.features, game2.features)
        return FEATURE_WEIGHT * feature_score + GENRE_WEIGHT * genre_score

    def _add_edge(self, source: Game, target: Game, score: float) -> None:
        self.adjacency.setdefault(source.name, []).append((target.name, score))

    def build_adj_list(self) -> None:
        """Link every pair of games whose similarity exceeds the threshold."""
        self.adjacency = {}
        games = list(self.games.values())
        for index, first in enumerate(games):
            for second in games[index + 1:]:
                score = self.similarity(first, second)
                log.debug("%s / %s: %s", first.name, second.name, score)
                if score > SIMILARITY_THRESHOLD:
                    self._add_edge(first, second, score)
                    self._add_edge(second, first, score)
        for name, neighbours in self.adjacency.items():
            log.debug("%s -> %s", name, neighbours)

    def _neighbours_by_score(self, name: str) -> list[tuple[str, float]]:
        return sorted(self.adjacency.get(name, []), key=lambda pair: pair[1], reverse=True)

    def similar_games(self, name: str, count: int = 5) -> list[tuple[str, float]]:
        """The most similar linked games, best first; KeyError if the game has no links."""
        if name not in self.adjacency:
            raise KeyError(name)
        return self._neighbours_by_score(name)[:count]

    def depth_first_search(self, src: str) -> list[str]:
        """Games reachable from src in depth-first visiting order."""
        order: list[str] = []
        visited = {src}
        stack = [src]
        while stack:
            current = stack.pop()
            order.append(current)
            for neighbour, _ in self.adjacency.get(current, []):
                if neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
        return order

    def breadth_first_search(self, src: str) -> list[str]:
        """Games reachable from src breadth-first, closer matches visited first."""
        order: list[str] = []
        visited = {src}
        queue = deque([src])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour, _ in self._neighbours_by_score(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order