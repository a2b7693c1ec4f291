# app/main.py
from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Header, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlmodel import Session
from starlette.concurrency import run_in_threadpool

from app.config import Settings, get_settings
from app.deps import db_session, get_app_settings, get_query_service, get_store
from app.errors import BadRequest, CatalogError, InternalError
from app.game_queries import GameQueryService
from app.schemas import ALL_FIELDS_REQUIRED, ErrorOut, GameCreate, GameCreated, GameOut
from app.security import ADMIN_SECRET_HEADER, check_admin_secret
from facade.game_store_facade import GameStoreFacade


logger = logging.getLogger("uvicorn.error")
ROOT_MESSAGE = "Game Catalog API is up!"
CREATED_MESSAGE = "Game added successfully!"

router = APIRouter()


# ---------------------------
# Routes
# ---------------------------
@router.get("/", response_class=PlainTextResponse, tags=["meta"])
def root() -> str:
    return ROOT_MESSAGE


@router.post(
    "/api/games",
    status_code=201,
    response_model=GameCreated,
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    tags=["games"],
)
async def create_game(
    request: Request,
    secret: Optional[str] = Header(None, alias=ADMIN_SECRET_HEADER),
    settings: Settings = Depends(get_app_settings),
    store: GameStoreFacade = Depends(get_store),
    session: Session = Depends(db_session),
) -> GameCreated:
    # The secret is checked before the body is even decoded
    check_admin_secret(secret, settings.ADMIN_SECRET_KEY)
    try:
        raw = await request.json()
    except ValueError as e:
        raise BadRequest(ALL_FIELDS_REQUIRED) from e
    game = GameCreate.from_payload(raw)
    row = await run_in_threadpool(store.add_game, game, session)
    return GameCreated(message=CREATED_MESSAGE, game=GameOut.model_validate(row))


@router.get(
    "/api/games/search",
    response_model=List[GameOut],
    responses={500: {"model": ErrorOut}},
    tags=["games"],
)
def search_games(
    q: Optional[str] = None,
    queries: GameQueryService = Depends(get_query_service),
) -> List[GameOut]:
    return [GameOut.model_validate(row) for row in queries.search(q)]


# ---------------------------
# App init
# ---------------------------
def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    _configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One store (and engine) per app, shared by every request
        app.state.store = GameStoreFacade.from_settings(settings)
        logger.info("Store initialised")
        yield
        app.state.store.close()

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
        body = {"message": exc.message}
        if isinstance(exc, InternalError) and settings.EXPOSE_ERROR_DETAILS and exc.detail:
            body["error"] = exc.detail
        return JSONResponse(status_code=exc.status_code, content=body)

    app.include_router(router)
    return app


def run() -> None:
    """Console entry point: serve the API on HOST:PORT.

    The app is only built here (or by `uvicorn --factory app.main:create_app`),
    never at import time.
    """
    settings = get_settings()
    app = create_app(settings)
    logger.info("Server listening on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
