# -*- coding: utf-8 -*-
"""
backend/app/shared/database/database.py

SQLAlchemy async para FreelanceHub: asyncpg en producción, aiosqlite
en desarrollo local y tests.

Provee:
- engine (create_async_engine)
- SessionLocal (async_sessionmaker)
- Base (DeclarativeBase con naming convention)
- Dependencia FastAPI: get_db
- context manager: session_scope()
- init_models() para crear el esquema en dev
- check_database_health()
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.shared.config import settings
from app.shared.database.base import Base  # reutilizamos la Base única

logger = logging.getLogger(__name__)


def _build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """
    Crea el engine async según el driver de la URL.

    SQLite en memoria necesita StaticPool: cada conexión nueva abriría
    una base vacía distinta.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        return create_async_engine(url, echo=echo, **kwargs)

    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=5,
    )


DATABASE_URL = settings.database_url
DB_ECHO_SQL = bool(settings.db_echo_sql)

engine = _build_engine(DATABASE_URL, echo=DB_ECHO_SQL)
logger.debug("[DB] engine configurado (driver=%s, echo=%s)", engine.url.drivername, DB_ECHO_SQL)

# ── Session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
    autoflush=False,
)


# ── Dependencias FastAPI
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
        except SQLAlchemyError:
            # Importante: rollback para liberar cualquier transacción/lock
            await session.rollback()
            raise
        finally:
            if session.in_transaction():
                await session.rollback()


# Alias usado por los routers de módulos
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_async_session():
        yield session


# ── Context manager reutilizable en jobs/scripts
@asynccontextmanager
async def session_scope() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        try:
            yield session
            # Dejo el commit/rollback a quien use el scope; esto es solo un helper
        finally:
            if session.in_transaction():
                await session.rollback()


async def init_models(bind: AsyncEngine | None = None) -> None:
    """
    Crea todas las tablas registradas en Base.metadata.

    Solo para desarrollo/tests; en producción el esquema lo gestionan
    los scripts SQL de despliegue.
    """
    # Registrar modelos en la metadata antes de create_all
    import app.modules.models_registry  # noqa: F401

    target = bind or engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] esquema creado/verificado (%d tablas)", len(Base.metadata.tables))


# ── Health check
async def check_database_health(timeout_s: float = 3.0, sql: str = "SELECT 1") -> bool:
    """
    Verifica conectividad a la base de datos.

    Returns:
        True si la conexión es exitosa, False en caso contrario
    """
    try:
        async with asyncio.timeout(timeout_s):
            async with engine.connect() as conn:
                await conn.execute(text(sql))
        return True
    except (SQLAlchemyError, OSError, TimeoutError) as e:
        logger.warning("[DB] health check falló: %s", e)
        return False


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "session_scope",
    "init_models",
    "check_database_health",
]
# Fin del archivo backend/app/shared/database/database.py
