# -*- coding: utf-8 -*-
"""
backend/app/modules/files/routes/deps.py

Dependencias inyectables para las rutas de Files.

El storage de blobs se construye una sola vez en el lifespan
(app.state.blob_storage); aquí solo se combina con la sesión del request.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.config import settings
from app.shared.database import EntityStore, get_db
from app.modules.files.facades import FileAccessPolicy
from app.modules.files.services.storage import BlobStorage


def get_blob_storage(request: Request) -> BlobStorage:
    blobs = getattr(request.app.state, "blob_storage", None)
    if blobs is None:
        raise RuntimeError("Blob storage not initialized (app.state.blob_storage)")
    return blobs


async def get_file_policy(
    db: AsyncSession = Depends(get_db),
    blobs: BlobStorage = Depends(get_blob_storage),
) -> FileAccessPolicy:
    return FileAccessPolicy(EntityStore(db), blobs, max_upload_bytes=settings.upload_max_bytes)
