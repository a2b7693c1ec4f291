# app/deps.py
from typing import Iterator
from fastapi import Depends, Request
from sqlmodel import Session

from app.config import Settings
from app.game_queries import GameQueryService
from facade.game_store_facade import GameStoreFacade


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> GameStoreFacade:
    return request.app.state.store


def db_session(request: Request) -> Iterator[Session]:
    # FastAPI treats generators that yield as dependencies to tear down automatically
    with get_store(request).session() as s:
        yield s


def get_query_service(session: Session = Depends(db_session)) -> GameQueryService:
    return GameQueryService(session)
