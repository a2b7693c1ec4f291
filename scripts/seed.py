from __future__ import annotations
import argparse
import json
import logging
from pathlib import Path
from typing import Optional

from app.config import Settings, get_settings
from facade.game_store_facade import GameStoreFacade

logger = logging.getLogger(__name__)


def load_games(path: Path) -> list:
    """Read a JSON array of game objects ({title, image, platform, link})."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of games")
    return data


def seed_from_file(path: Path, settings: Optional[Settings] = None) -> dict:
    """Insert every valid game in ``path``; invalid entries are counted as skipped."""
    store = GameStoreFacade.from_settings(settings or get_settings())
    try:
        with store.session() as session:
            counts = store.ingest(load_games(path), session=session)
    finally:
        store.close()
    return {**counts, "source": str(path)}


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Load games from a JSON file into the catalog.")
    parser.add_argument("path", type=Path, help="JSON file holding an array of games")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    result = seed_from_file(args.path)
    logger.info("Seeded %(inserted)d games, skipped %(skipped)d from %(source)s", result)


if __name__ == "__main__":
    # Run with: python -m scripts.seed games.json
    main()
