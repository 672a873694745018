import logging
import threading

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from tasks_api.core.config import CORS_ORIGINS, CORS_ORIGIN_REGEX, DB_BOOTSTRAP_MODE, parse_cors_origins
from tasks_api.core.errors import EntityNotFoundError, RepositoryError
from tasks_api.database.base import Base
from tasks_api.database.session import engine, pool_status
from tasks_api.models import TaskStatus, UserTask  # noqa: F401
from tasks_api.routes import assignments, statuses

logger = logging.getLogger("uvicorn.error")
app = FastAPI(title="Tasks API")

NO_CONTENT_FOUND = "Nenhum conteudo encontrado"

cors_origins = parse_cors_origins(CORS_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_origin_regex=CORS_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)


@app.middleware("http")
async def ensure_utf8_json_charset(request: Request, call_next):
    response = await call_next(request)
    content_type = str(response.headers.get("content-type", ""))
    if content_type.startswith("application/json") and "charset=" not in content_type.lower():
        response.headers["content-type"] = "application/json; charset=utf-8"
    return response


@app.exception_handler(RepositoryError)
async def repository_error_as_not_found(request: Request, exc: RepositoryError):
    # Ausencia, banco fora do ar e restricao violada viram a mesma resposta.
    level = logging.INFO if isinstance(exc, EntityNotFoundError) else logging.WARNING
    logger.log(
        level,
        "%s %s -> 404 (%s: %s)",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc.message,
    )
    return JSONResponse(status_code=404, content={"detail": NO_CONTENT_FOUND})


def run_db_bootstrap() -> None:
    steps = [
        ("create_all", lambda: Base.metadata.create_all(bind=engine)),
    ]
    for step_name, step_fn in steps:
        try:
            step_fn()
            logger.info("DB bootstrap concluido (etapa: %s)", step_name)
        except Exception:  # pragma: no cover - startup hardening
            logger.exception("Falha ao executar bootstrap do banco (etapa: %s)", step_name)


_bootstrap_lock = threading.Lock()
_bootstrap_started = False


def trigger_db_bootstrap() -> None:
    global _bootstrap_started
    with _bootstrap_lock:
        if _bootstrap_started:
            return
        _bootstrap_started = True

    mode = str(DB_BOOTSTRAP_MODE or "background").strip().lower()
    if mode == "off":
        logger.info("DB bootstrap desativado (DB_BOOTSTRAP_MODE=off).")
        return
    if mode == "sync":
        logger.info("Executando DB bootstrap em modo sincronizado.")
        run_db_bootstrap()
        return

    logger.info("Executando DB bootstrap em background.")
    threading.Thread(target=run_db_bootstrap, daemon=True, name="db-bootstrap").start()


app.include_router(assignments.router)
app.include_router(statuses.router)

@app.get("/")
def root():
    return {"message": "API rodando corretamente!"}


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


@app.get("/health/db")
def healthcheck_db():
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    return {"status": "ok", "pool": pool_status()}


@app.on_event("startup")
def startup_event():
    trigger_db_bootstrap()
