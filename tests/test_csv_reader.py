import pytest

from epizgamez.csv_reader import GameRecord, main, parse_line, read_csv
from epizgamez.recommender import GameRecommender

HEADER = "Name~Genres~Features~Rating~Price\n"


def test_parse_quoted_line():
    record = parse_line('Portal 2~"Puzzle,Action"~"Single-player, Co-op"~4.8~$9.99\n')
    assert record.name == "Portal 2"
    assert record.genres == ["Puzzle", "Action"]
    assert record.features == ["Single-player", "Co-op"]
    assert record.rating == pytest.approx(4.8)
    assert record.price == pytest.approx(9.99)


def test_parse_unquoted_with_missing_values():
    record = parse_line("Tetris~Puzzle~Single-player~N/A~Free")
    assert record == GameRecord("Tetris", ["Puzzle"], ["Single-player"], -1.0, -1.0)


def test_parse_malformed_line():
    with pytest.raises(ValueError):
        parse_line("just a name")


def _write(tmp_path, rows):
    path = tmp_path / "games.csv"
    path.write_text(HEADER + "".join(rows), encoding="utf-8")
    return path


def test_read_csv_stops_at_limit(tmp_path):
    rows = [f"Game {n}~Puzzle~Single-player~4~$1\n" for n in range(12)]
    rec = read_csv(_write(tmp_path, rows))
    assert len(rec.games) == 10
    assert "Game 10" not in rec.games


def test_read_csv_into_existing(tmp_path):
    rec = GameRecommender()
    path = _write(tmp_path, ["Tetris~Puzzle~Single-player~4.5~$2.50\n"])
    assert read_csv(path, rec, 5) is rec
    assert rec.games["Tetris"].price == pytest.approx(2.5)


def test_main_reports_count(tmp_path, capsys):
    path = _write(tmp_path, ["Tetris~Puzzle~Single-player~4.5~$2.50\n"])
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.startswith("1 games")