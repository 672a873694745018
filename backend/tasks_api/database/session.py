from sqlalchemy import create_engine
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tasks_api.core.config import (
    DATABASE_URL,
    DB_MAX_OVERFLOW,
    DB_POOL_RECYCLE,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
)
from tasks_api.core.errors import ConnectionUnavailableError

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL nao configurada. Defina a variavel de ambiente antes de iniciar a API.")


def is_memory_sqlite(url: str) -> bool:
    return url in {"sqlite://", "sqlite:///:memory:"} or "mode=memory" in url


def build_engine_options(url: str) -> dict:
    options = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        # Conexoes do pool circulam entre as threads do FastAPI.
        options["connect_args"] = {"check_same_thread": False}
        if is_memory_sqlite(url):
            # Um unico banco em memoria compartilhado por todas as threads.
            options["poolclass"] = StaticPool
            return options
    options.update(
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_timeout=DB_POOL_TIMEOUT,
        pool_recycle=DB_POOL_RECYCLE,
    )
    return options


engine = create_engine(DATABASE_URL, **build_engine_options(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def acquire_connection(db: Session) -> Connection:
    try:
        return db.connection()
    except SQLAlchemyError as exc:
        raise ConnectionUnavailableError(f"Conexao indisponivel: {exc}") from exc


def pool_status() -> dict:
    pool = engine.pool
    status = {"class": type(pool).__name__}
    for name in ("size", "checkedout", "overflow"):
        method = getattr(pool, name, None)
        if callable(method):
            status[name] = method()
    return status
