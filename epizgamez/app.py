"""Command-line front end: find games similar to a favourite one."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field

from .csv_reader import read_csv
from .recommender import GameRecommender


@dataclass
class SearchResult:
    """Outcome of one search, with traversal orders and timings in ms."""

    name: str
    dfs_order: list[str]
    bfs_order: list[str]
    dfs_ms: int
    bfs_ms: int
    similar: list[tuple[str, float]] = field(default_factory=list)


def load_recommender(path) -> GameRecommender:
    """Read a catalogue and build its similarity graph."""
    recommender = read_csv(path)
    recommender.build_adj_list()
    return recommender


def _timed(func, arg):
    start = time.perf_counter()
    value = func(arg)
    return value, int((time.perf_counter() - start) * 1000)


def search(recommender: GameRecommender, name: str, count: int = 5) -> SearchResult:
    """Run both traversals from a game and collect its closest matches."""
    if not name:
        raise ValueError("game name must not be empty")
    dfs_order, dfs_ms = _timed(recommender.depth_first_search, name)
    bfs_order, bfs_ms = _timed(recommender.breadth_first_search, name)
    try:
        similar = recommender.similar_games(name, count)
    except KeyError:
        similar = []
    return SearchResult(name, dfs_order, bfs_order, dfs_ms, bfs_ms, similar)


def format_entry(name: str, similarity: float) -> str:
    return f"{name} ({similarity * 100:.1f}%)"


def render(result: SearchResult) -> str:
    lines = [f"DFS Time: {result.dfs_ms} ms", f"BFS Time: {result.bfs_ms} ms"]
    lines += [format_entry(name, score) for name, score in result.similar]
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Game Analysis Tool")
    parser.add_argument("games", nargs="*", help="favourite game names")
    parser.add_argument("--csv", default="games.csv")
    args = parser.parse_args(argv)
    recommender = load_recommender(args.csv)
    names = args.games or (line.strip() for line in sys.stdin)
    for name in names:
        if name:
            print(render(search(recommender, name)))
    return 0