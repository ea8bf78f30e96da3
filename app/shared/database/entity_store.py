# -*- coding: utf-8 -*-
"""
backend/app/shared/database/entity_store.py

Envoltura delgada sobre AsyncSession para SQL textual parametrizado.

Las políticas de acceso (projects/proposals/files) trabajan contra esta
interfaz y nunca abren conexiones ni crean esquema:

- query(sql, params)      -> list[dict]
- query_one(sql, params)  -> dict | None
- execute(sql, params)    -> ExecuteResult(last_insert_id, rowcount)
- run_in_transaction(work) -> commit si work() tiene éxito, rollback y
  re-lanza si falla.

Los parámetros son siempre nombrados (`:name`), nunca interpolados.

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")

Row = dict[str, Any]


@dataclass(frozen=True)
class ExecuteResult:
    """Resultado de una sentencia de escritura."""
    last_insert_id: Optional[int]
    rowcount: int


class EntityStore:
    """Capacidad query/execute sobre la sesión del request."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def query(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> list[Row]:
        result = await self._session.execute(text(sql), dict(params or {}))
        return [dict(row) for row in result.mappings().all()]

    async def query_one(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> Optional[Row]:
        result = await self._session.execute(text(sql), dict(params or {}))
        row = result.mappings().first()
        return dict(row) if row is not None else None

    async def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> ExecuteResult:
        """
        Ejecuta INSERT/UPDATE/DELETE.

        Para INSERT portable entre asyncpg y aiosqlite usar `RETURNING id`;
        si la sentencia no devuelve filas se usa lastrowid del driver.
        """
        result = await self._session.execute(text(sql), dict(params or {}))
        last_id: Optional[int] = None
        if result.returns_rows:
            first = result.first()
            last_id = int(first[0]) if first is not None else None
        else:
            last_id = getattr(result, "lastrowid", None) or None
        return ExecuteResult(last_insert_id=last_id, rowcount=result.rowcount)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def run_in_transaction(self, work: Callable[[], Awaitable[T]]) -> T:
        """
        Ejecuta work() dentro de un contexto transaccional.

        Aplica commit si work() tiene éxito.
        Aplica rollback y re-lanza si work() falla, de modo que una
        secuencia de varias sentencias nunca queda aplicada a medias.
        """
        try:
            result = await work()
            await self._session.commit()
            return result
        except Exception:
            await self._session.rollback()
            raise


__all__ = ["EntityStore", "ExecuteResult", "Row"]

# Fin del archivo backend/app/shared/database/entity_store.py
