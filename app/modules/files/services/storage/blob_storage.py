# -*- coding: utf-8 -*-
"""
backend/app/modules/files/services/storage/blob_storage.py

Storage de blobs para archivos subidos.

Contrato (BlobStorage):
- store(data, filename) -> ruta del blob
- remove(path)          -> None; OSError si no se pudo borrar
- exists(path)          -> bool

La política de archivos solo conoce este contrato; LocalBlobStorage
escribe en UPLOAD_DIR con E/S de disco delegada a un hilo.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from app.modules.files.services.storage.safe_filename import resolve_inside

logger = logging.getLogger(__name__)


def _write_new(target: Path, data: bytes) -> None:
    with open(target, "xb") as fh:
        fh.write(data)


class BlobStorage(Protocol):
    async def store(self, data: bytes, filename: str) -> str: ...

    async def remove(self, path: str) -> None: ...

    async def exists(self, path: str) -> bool: ...


class LocalBlobStorage:
    """Blobs en disco local bajo `root`."""

    def __init__(self, root: Path):
        self.root = Path(root).resolve()
        self.root.mkdir(parents=True, exist_ok=True)

    async def store(self, data: bytes, filename: str) -> str:
        """
        Escribe el blob y devuelve su ruta absoluta.

        El archivo se crea en modo exclusivo: nunca se sobrescribe un blob
        existente.

        Raises:
            ValidationRejected("invalid_filename"): si filename escapa de root
            FileExistsError: ya existe un blob con ese nombre
        """
        target = resolve_inside(self.root, filename)
        await asyncio.to_thread(_write_new, target, data)
        logger.debug("blob_stored: path=%s size=%d", target, len(data))
        return str(target)

    async def remove(self, path: str) -> None:
        # missing_ok: un reintento tras un borrado parcial no debe fallar
        await asyncio.to_thread(Path(path).unlink, missing_ok=True)
        logger.debug("blob_removed: path=%s", path)

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(Path(path).is_file)


__all__ = ["BlobStorage", "LocalBlobStorage"]

# Fin del archivo backend/app/modules/files/services/storage/blob_storage.py
