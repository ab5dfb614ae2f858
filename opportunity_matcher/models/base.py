"""SQLAlchemy engine and session setup."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


def create_session_factory(database_url: str, create_tables: bool = False) -> sessionmaker:
    """Build a session factory for the given database URL."""
    url = make_url(database_url)
    kwargs: dict = {"pool_pre_ping": True, "echo": False}

    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session gets its own empty database
            kwargs["connect_args"] = {"check_same_thread": False}
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)
    if create_tables:
        Base.metadata.create_all(engine)

    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
