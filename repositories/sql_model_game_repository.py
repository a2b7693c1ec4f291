from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Any

from sqlalchemy import Engine, event
from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, Field, Session
from sqlmodel import create_engine

# ===== Default SQLite / SQLModel Backend =====
BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DB_PATH = BASE_DIR / "database" / "catalog.db"
DEFAULT_DATABASE_URL = f"sqlite:///{DEFAULT_DB_PATH}"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _unicode_lower(dbapi_conn, connection_record) -> None:
    # SQLite's builtin lower() only folds ASCII; ilike/icontains compile to lower()
    dbapi_conn.create_function("lower", 1, _lower, deterministic=True)


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if isinstance(value, str) else value


def build_engine(database_url: str = DEFAULT_DATABASE_URL, timeout: float = 10.0) -> Engine:
    """Create the engine for ``database_url`` with an explicit connect timeout."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        if url.database and url.database != ":memory:":
            Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        # sqlite3's timeout is how long a connection waits on a locked database
        connect_args = {"check_same_thread": False, "timeout": timeout}
        engine = create_engine(url, connect_args=connect_args)
        event.listen(engine, "connect", _unicode_lower)
        return engine
    return create_engine(url, pool_timeout=timeout, pool_pre_ping=True)


class GameRow(SQLModel, table=True):
    """A catalog entry. Business fields are validated before they get here."""
    __tablename__ = "games"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    image: str
    platform: str
    link: str
    created_at: datetime = Field(default_factory=_utcnow, index=True)
    updated_at: datetime = Field(default_factory=_utcnow, sa_column_kwargs={"onupdate": _utcnow})


class SqlModelGameRepository:
    """Concrete repository backed by any SQLAlchemy URL via SQLModel."""
    def __init__(self, engine: Engine):
        self._engine = engine

    def init(self) -> None:
        SQLModel.metadata.create_all(self._engine)

    def close(self) -> None:
        self._engine.dispose()

    def session(self) -> Session:
        return Session(self._engine)

    def add_game(self, game: Any, session: Optional[Session] = None) -> GameRow:
        # 'game' can be any object with title/image/platform/link attributes
        now = _utcnow()
        row = GameRow(
            title=getattr(game, "title"),
            image=getattr(game, "image"),
            platform=getattr(game, "platform"),
            link=getattr(game, "link"),
            created_at=now,
            updated_at=now,
        )
        if session is None:
            with self.session() as own:
                own.add(row)
                own.commit()
                own.refresh(row)
            return row

        session.add(row)
        session.commit()
        session.refresh(row)
        return row
