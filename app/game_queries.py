# app/game_queries.py
from __future__ import annotations
import logging
from typing import Optional, List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select, col, Session

from app.errors import InternalError
from repositories.sql_model_game_repository import GameRow

logger = logging.getLogger(__name__)

RECENT_LIMIT = 6
SEARCH_LIMIT = 20
SEARCH_FAILED = "Error searching games."


class GameQueryService:
    """
    Read side of the catalog:
      - no query: the most recently created games, newest first
      - a query: case-insensitive literal substring match on the title
    """

    def __init__(self, session: Session):
        self.session = session

    # ----------------- internal helpers -----------------
    def _recent(self, limit: int) -> List[GameRow]:
        stmt = (
            select(GameRow)
            .order_by(col(GameRow.created_at).desc(), col(GameRow.id).desc())
            .limit(limit)
        )
        return list(self.session.exec(stmt).all())

    def _title_contains(self, term: str, limit: int) -> List[GameRow]:
        # autoescape makes % and _ in the user's text match literally
        stmt = (
            select(GameRow)
            .where(col(GameRow.title).icontains(term, autoescape=True))
            .order_by(col(GameRow.id).asc())
            .limit(limit)
        )
        return list(self.session.exec(stmt).all())

    # ----------------- public queries -----------------
    def search(self, q: Optional[str] = None) -> List[GameRow]:
        # blank queries list recent games; others are matched exactly as typed
        if not (q or "").strip():
            return self.recent()
        try:
            rows = self._title_contains(q, SEARCH_LIMIT)
        except SQLAlchemyError as e:
            logger.exception("Search for %r failed", q)
            raise InternalError(SEARCH_FAILED, detail=str(e)) from e
        logger.debug("Search for %r matched %d games", q, len(rows))
        return rows

    def recent(self, limit: int = RECENT_LIMIT) -> List[GameRow]:
        try:
            return self._recent(limit)
        except SQLAlchemyError as e:
            logger.exception("Listing recent games failed")
            raise InternalError(SEARCH_FAILED, detail=str(e)) from e
