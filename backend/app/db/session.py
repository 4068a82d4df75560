from pathlib import Path
from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

def _ensure_sqlite_dir(url: str) -> None:
    if url.startswith("sqlite:///") and ":memory:" not in url:
        Path(url[len("sqlite:///"):]).parent.mkdir(parents=True, exist_ok=True)

engine = create_engine(settings.DATABASE_URL, echo=False)

def init_db() -> None:
    from . import models  # noqa: F401
    _ensure_sqlite_dir(settings.DATABASE_URL)
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
