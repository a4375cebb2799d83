import time
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker

from researchai.config import DATABASE_URL, PERSIST_GENERATIONS
from researchai.db.models import Base


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints on a threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

_persistence_ready = False


def init_db(retries: int = 5, delay: float = 2) -> bool:
    """Create tables, retrying while the database comes up. Never raises."""
    global _persistence_ready

    if not PERSIST_GENERATIONS:
        print("[DB] Persistence disabled by configuration")
        return False

    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            _persistence_ready = True
            print("[DB] Database connected")
            return True
        except OperationalError:
            print(f"[DB] Waiting for database... ({attempt + 1}/{retries})")
            time.sleep(delay)

    # DO NOT crash the app
    print("[DB] Database not ready, running without persistence")
    return False


def get_db() -> Iterator[Optional[Session]]:
    """FastAPI dependency. Yields None when persistence is off."""
    if not _persistence_ready:
        yield None
        return

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
