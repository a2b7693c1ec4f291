from __future__ import annotations

import logging
from typing import List, Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.config import Settings
from app.errors import BadRequest, InternalError
from app.schemas import GameCreate
from repositories.game_repository import GameRepository
from repositories.sql_model_game_repository import SqlModelGameRepository, GameRow, build_engine

logger = logging.getLogger(__name__)

CREATE_FAILED = "Error adding game."


# ===== Facade & Contracts =====

class GameStoreFacade:
    """Facade that hides which backend we use.
    Supports SQLite/SQLModel, Postgres, etc.
    """
    def __init__(self, repo: GameRepository):
        self.repo = repo
        self.repo.init()

    @staticmethod
    def from_settings(settings: Settings) -> "GameStoreFacade":
        """
        Select a backend via settings.DB_BACKEND.
        Supported: 'sqlmodel' (default).
        """
        backend = settings.DB_BACKEND.lower()
        if backend == "sqlmodel":
            engine = build_engine(settings.DATABASE_URL, timeout=settings.DB_TIMEOUT)
            logger.info("Using sqlmodel store at %s", engine.url.render_as_string(hide_password=True))
            return GameStoreFacade(SqlModelGameRepository(engine))
        raise ValueError(f"Unsupported backend: {backend}")

    def session(self) -> Session:
        return self.repo.session()

    def close(self) -> None:
        self.repo.close()

    def add_game(self, game: GameCreate, session: Optional[Session] = None) -> GameRow:
        """Persist one new game. Duplicate submissions create duplicate rows."""
        try:
            row = self.repo.add_game(game, session=session)
        except SQLAlchemyError as e:
            if session is not None:
                session.rollback()
            logger.exception("Adding game %r failed", game.title)
            raise InternalError(CREATE_FAILED, detail=str(e)) from e
        logger.info("Added game id=%s title=%r", row.id, row.title)
        return row

    def ingest(self, games: List[Any], session: Optional[Session] = None) -> dict:
        """Validate and add raw game payloads; invalid ones are skipped."""
        inserted, skipped = 0, 0
        for raw in games:
            try:
                game = GameCreate.from_payload(raw)
            except BadRequest:
                skipped += 1
                continue
            self.add_game(game, session=session)
            inserted += 1
        return {"inserted": inserted, "skipped": skipped}
