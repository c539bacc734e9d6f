import pytest

from epizgamez.app import SearchResult, format_entry, load_recommender, main, render, search
from epizgamez.recommender import GameRecommender

ROWS = (
    "Name~Genres~Features~Rating~Price\n"
    "Alpha~RPG~\"Single-player,Co-op\"~4.0~$10\n"
    "Beta~RPG~\"Single-player,Co-op\"~3.5~$20\n"
    "Gamma~Racing~Online~2.0~$5\n"
)


@pytest.fixture
def catalogue(tmp_path):
    path = tmp_path / "games.csv"
    path.write_text(ROWS, encoding="utf-8")
    return path


def test_format_entry():
    assert format_entry("Portal", 0.875) == "Portal (87.5%)"


def test_render_lists_entries():
    result = SearchResult("A", ["A"], ["A"], 3, 4, [("B", 1.0)])
    assert render(result).splitlines() == ["DFS Time: 3 ms", "BFS Time: 4 ms", "B (100.0%)"]


def test_search_finds_similar(catalogue):
    rec = load_recommender(catalogue)
    result = search(rec, "Alpha")
    assert result.similar == [("Beta", pytest.approx(1.0))]
    assert sorted(result.bfs_order) == ["Alpha", "Beta"]
    assert result.dfs_order[0] == "Alpha"


def test_search_unknown_game():
    result = search(GameRecommender(), "Nope")
    assert result.similar == []
    assert result.dfs_order == ["Nope"]


def test_search_empty_name():
    with pytest.raises(ValueError):
        search(GameRecommender(), "")


def test_main_prints_results(catalogue, capsys):
    assert main(["--csv", str(catalogue), "Alpha"]) == 0
    out = capsys.readouterr().out
    assert "Beta (100.0%)" in out
    assert "Gamma" not in out