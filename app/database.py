import os
import uuid
from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Load environment variables from .env file (if exists)
load_dotenv()

Base = declarative_base()


def database_url() -> str:
    url = (os.getenv("DATABASE_URL") or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return url


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def generate_id() -> str:
    return str(uuid.uuid4())


def _register_models():
    # Tables only land on Base.metadata once their module is imported
    from app.models import blog, company, inquiry, pricing, project, user  # noqa: F401


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


class Database:
    """
    Owns one engine and its session factory.

    Built by the composition root (see `create_app` in app/main.py) and
    handed to whoever needs it. There is no module-level engine.
    """

    def __init__(self, url: str | None = None):
        self.url = url or database_url()

        if self.url.startswith("sqlite"):
            connect_args = {"check_same_thread": False}
            if _is_memory_sqlite(self.url):
                # One shared connection, otherwise every session gets its own empty db
                self.engine = create_engine(self.url, connect_args=connect_args, poolclass=StaticPool)
            else:
                self.engine = create_engine(self.url, connect_args=connect_args)
        else:
            self.engine = create_engine(self.url, pool_pre_ping=True)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        _register_models()
        Base.metadata.create_all(bind=self.engine)

    def drop_all(self):
        _register_models()
        Base.metadata.drop_all(bind=self.engine)

    def session(self):
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()


def get_db(request: Request):
    """Yield one session per request, always closed afterwards."""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
