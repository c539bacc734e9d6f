# epizgamez

Find games similar to one you already like.

epizgamez reads a catalogue of games (name, genres, features, rating and
price) and links every pair whose similarity is above 0.5. Similarity is a
weighted mix of feature overlap (70%) and genre overlap (30%). From a game
you name, it lists the closest linked games and times a depth-first and a
breadth-first walk over the graph.

## Installing

```
pip install .
```

Python 3.10 or later is needed; there are no other dependencies.

## The catalogue

The catalogue is a text file whose fields are separated by `~`:

```
Name~Genres~Features~Rating~Price
Alpha~"RPG,Open World"~"Single-player,Co-op"~4.5~$19.99
Beta~RPG~Single-player~N/A~$0.00
```

- The first line is a header and is skipped.
- Genres and features are comma-separated lists; a list may be wrapped in
  double quotes.
- The first character of the price (the currency sign) is dropped.
- A rating or price that does not start with a number, such as `N/A`, is
  stored as `-1`.
- A row missing a separator raises `ValueError`.
- When two rows share a name, the first one is kept.

By default only the first ten games after the header are read.

## Commands

Search for games similar to one or more you name:

```
epizgamez "Alpha"
epizgamez --csv other.csv "Alpha" "Beta"
```

With no names given, names are read one per line from standard input. For
each name the output gives the time taken by each walk, in milliseconds,
followed by up to five linked games with their similarity as a percentage:

```
DFS Time: 0 ms
BFS Time: 0 ms
Beta (85.0%)
```

A game with no links (or not in the catalogue) gets no similar games.

Load a catalogue and report how many games were read:

```
epizgamez-load games.csv
epizgamez-load games.csv --limit 50
```

Both commands read `games.csv` in the current directory unless told
otherwise; run either with `--help` for its options.

## Using it from Python

```python
from epizgamez.recommender import GameRecommender
from epizgamez.csv_reader import read_csv, parse_line
from epizgamez.app import load_recommender, search, render

recommender = GameRecommender()
read_csv("games.csv", recommender, 10)
recommender.build_adj_list()

print(recommender.similar_games("Alpha", 5))      # [(name, score), ...], best first
print(recommender.depth_first_search("Alpha"))     # visiting order
print(recommender.breadth_first_search("Alpha"))   # closer matches first
print(render(search(recommender, "Alpha", 5)))

record = parse_line('Alpha~RPG~Co-op~4.5~$19.99')  # a GameRecord
```

- `GameRecommender.add_game(name, genres, features, rating, price)` adds a
  `Game`; `similarity(game1, game2)` scores two games and gives NaN when
  both have no genres or both have no features.
- `similar_games` raises `KeyError` for a game that has no links.
- `load_recommender(path)` reads a catalogue and builds the graph in one
  call; `search` raises `ValueError` for an empty name and returns a
  `SearchResult`; `format_entry(name, similarity)` gives a line such as
  `Beta (85.0%)`.

Debug messages with each pair's score and the resulting graph go to the
`epizgamez.recommender` logger.

## What it does not do

There is no graphical window: searching is done from the command line or
from Python. There is no filtering of results by genre, and the catalogue
is read from a file each time; nothing is stored between runs.

## Tests

```
pip install .[test]
pytest
```