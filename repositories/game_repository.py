from typing import Protocol, Any, Optional
from sqlmodel import Session


class GameRepository(Protocol):
    """Persistence-agnostic contract for storing games."""
    def init(self) -> None:
        ...

    def session(self) -> Session:
        ...

    def add_game(self, game: Any, session: Optional[Session]) -> Any:
        ...

    def close(self) -> None:
        ...
