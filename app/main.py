# -*- coding: utf-8 -*-
"""
backend/app/main.py

Punto de entrada principal del backend FreelanceHub.

- Configuración vía app.core.settings (pydantic-settings, según PYTHON_ENV)
- Logging con dictConfig (plain o json)
- Recursos de proceso en app.state, creados en el lifespan:
    rate_limiter   LoginRateLimiter (Redis si hay REDIS_URL, memoria si no)
    blob_storage   LocalBlobStorage en UPLOAD_DIR
    scheduler      SchedulerService con el barrido del limitador y la
                   reconciliación de borrados de archivos
- Excepciones de acceso (app.shared.errors) traducidas a JSON
  {"detail", "error_code"}
- Observabilidad Prometheus (/metrics) y health (/health)

Autor: Equipo FreelanceHub
Fecha: 2026-03-07
"""

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path

# ---------------------------------------------------------------------------
# Cargar .env ANTES de leer settings
# En producción se respetan las variables del entorno (override=False)
# ---------------------------------------------------------------------------
from dotenv import load_dotenv

_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_PYTHON_ENV = os.getenv("PYTHON_ENV", "development").strip().lower()
load_dotenv(dotenv_path=_ENV_PATH, override=_PYTHON_ENV == "development")

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.db import init_models
from app.core.logging import setup_logging
from app.core.settings import get_settings
from app.modules.files.jobs import register_reconcile_pending_deletes_job
from app.modules.files.services.storage import LocalBlobStorage
from app.observability.prom import setup_observability
from app.shared.errors import AccessError, RateLimited, ValidationRejected
from app.shared.scheduler import SchedulerService
from app.shared.scheduler.jobs import register_rate_limit_sweep_job
from app.shared.security import build_login_rate_limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ────────── STARTUP ──────────
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("startup: env=%s app=%s", settings.python_env, settings.app_name)

    if settings.db_auto_create:
        await init_models()

    limiter = build_login_rate_limiter(
        settings.redis_url,
        max_attempts=settings.login_attempts_limit,
        window_minutes=settings.login_attempts_time_window_minutes,
        enabled=settings.rate_limit_enabled,
    )
    blobs = LocalBlobStorage(settings.upload_dir)
    app.state.rate_limiter = limiter
    app.state.blob_storage = blobs

    scheduler = SchedulerService()
    app.state.scheduler = scheduler
    if settings.scheduler_enabled:
        register_rate_limit_sweep_job(
            scheduler, limiter, minutes=settings.rate_limit_sweep_interval_minutes
        )
        register_reconcile_pending_deletes_job(
            scheduler, blobs, minutes=settings.files_reconcile_interval_minutes
        )
        scheduler.start()
    else:
        logger.info("scheduler disabled (SCHEDULER_ENABLED=false)")

    logger.info("FreelanceHub backend started")
    try:
        yield
    finally:
        # ────────── SHUTDOWN ──────────
        scheduler.shutdown(wait=True)
        limiter.close()
        logger.info("FreelanceHub backend stopped")


openapi_tags = [
    {"name": "auth", "description": "Login, registro y perfil"},
    {"name": "projects", "description": "Proyectos publicados por clientes"},
    {"name": "proposals", "description": "Propuestas de freelancers"},
    {"name": "files", "description": "Archivos adjuntos a entidades"},
    {"name": "health", "description": "Estado del servicio"},
]

app = FastAPI(
    title="FreelanceHub API",
    description="Marketplace de proyectos, propuestas y archivos",
    version="0.1.0",
    lifespan=lifespan,
    openapi_tags=openapi_tags,
)


# ═══════════════════════════════════════════════════════════════════════════════
# CORS
# ═══════════════════════════════════════════════════════════════════════════════
def _configure_cors(app_instance: FastAPI) -> dict:
    """
    Configura CORS con CORS_ORIGINS.

    "*" con allow_credentials=True es inválido en navegadores, así que el
    modo comodín desactiva credenciales.
    """
    origins = get_settings().get_cors_origins()
    wildcard = origins == ["*"]

    cors_config = {
        "allow_origins": origins,
        "allow_credentials": not wildcard,
        "allow_methods": ["*"] if wildcard else ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        "allow_headers": ["*"],
        "expose_headers": ["Retry-After"],
        "max_age": 600,
    }
    app_instance.add_middleware(CORSMiddleware, **cors_config)
    logger.info("CORS configured: origins=%s credentials=%s", origins, not wildcard)
    return cors_config


# Starlette ejecuta los middlewares en orden inverso al registro: CORS al
# final para que sea el más externo.
setup_observability(app)
_cors_config = _configure_cors(app)


# ═══════════════════════════════════════════════════════════════════════════════
# EXCEPTION HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════
def _error_body(exc: AccessError) -> dict:
    body = {"detail": exc.message, "error_code": exc.error_code}
    if isinstance(exc, ValidationRejected):
        body["reason"] = exc.reason
    return body


@app.exception_handler(RateLimited)
async def rate_limited_handler(request: Request, exc: RateLimited):
    return JSONResponse(
        status_code=exc.status_code,
        content={**_error_body(exc), "retry_after_minutes": exc.retry_after_minutes},
        headers={"Retry-After": str(exc.retry_after_minutes * 60)},
    )


@app.exception_handler(AccessError)
async def access_error_handler(request: Request, exc: AccessError):
    """NotFound, Forbidden, ValidationRejected, InvalidStatusTransition, BlobRemovalFailed."""
    if exc.status_code >= 500:
        logger.error("access_error: path=%s code=%s detail=%s", request.url.path, exc.error_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc))


# Router maestro (health + capas /api y pública)
from app.routes import router as main_router  # noqa: E402

app.include_router(main_router)


@app.get("/")
async def root():
    return {"service": "FreelanceHub Backend", "status": "active"}


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.is_dev,
    )

# Fin del archivo backend/app/main.py
