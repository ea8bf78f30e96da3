# -*- coding: utf-8 -*-
"""
backend/app/modules/files/jobs/reconcile_pending_deletes_job.py

Job automático que completa borrados de archivos a medias.

Un borrado marca delete_requested_at antes de tocar el blob. Si el blob
no pudo eliminarse, la fila queda marcada; este job reintenta blob y
fila para cada marca pendiente.

Configuración:
- FILES_RECONCILE_INTERVAL_MINUTES (default: 30)

Autor: Equipo FreelanceHub
Fecha: 2026-03-07
"""

from __future__ import annotations

import logging
from typing import AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.files.facades import FileAccessPolicy
from app.modules.files.services.storage import BlobStorage
from app.shared.database.entity_store import EntityStore

_logger = logging.getLogger("files.jobs.reconcile_pending_deletes")

JOB_ID = "files_reconcile_pending"


async def reconcile_pending_deletes_job(
    blobs: BlobStorage,
    session_factory: Optional[Callable[[], AsyncContextManager[AsyncSession]]] = None,
) -> int:
    """
    Ejecuta una pasada de reconciliación.

    Sin session_factory abre la sesión con session_scope() de la app.

    Returns:
        Cantidad de archivos completados.
    """
    if session_factory is None:
        from app.shared.database.database import session_scope
        session_factory = session_scope

    async with session_factory() as session:
        policy = FileAccessPolicy(EntityStore(session), blobs)
        finished = await policy.reconcile_pending_deletes()

    _logger.debug("[reconcile_pending_deletes] finished=%d", finished)
    return finished


def register_reconcile_pending_deletes_job(scheduler, blobs: BlobStorage, minutes: int) -> str:
    job_id = scheduler.add_interval_job(
        reconcile_pending_deletes_job,
        job_id=JOB_ID,
        minutes=minutes,
        blobs=blobs,
    )
    _logger.info("[reconcile_pending_deletes] registered every %d minutes", minutes)
    return job_id


__all__ = ["JOB_ID", "reconcile_pending_deletes_job", "register_reconcile_pending_deletes_job"]

# Fin del archivo backend/app/modules/files/jobs/reconcile_pending_deletes_job.py
