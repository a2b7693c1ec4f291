import json

import pytest

from app.game_queries import GameQueryService
from scripts.seed import seed_from_file


def test_seed_inserts_valid_entries_and_skips_the_rest(tmp_path, settings, store):
    source = tmp_path / "games.json"
    source.write_text(json.dumps([
        {"title": "Hollow Knight", "image": "hk.png", "platform": "PC", "link": "https://hk.example"},
        {"title": "Celeste", "image": "c.png", "platform": "Switch"},
        "not a game",
    ]), encoding="utf-8")

    result = seed_from_file(source, settings)
    assert result == {"inserted": 1, "skipped": 2, "source": str(source)}

    with store.session() as session:
        titles = [g.title for g in GameQueryService(session).search("knight")]
    assert titles == ["Hollow Knight"]


def test_seed_requires_an_array(tmp_path, settings):
    source = tmp_path / "games.json"
    source.write_text(json.dumps({"title": "Celeste"}), encoding="utf-8")
    with pytest.raises(ValueError):
        seed_from_file(source, settings)
