# -*- coding: utf-8 -*-
"""
backend/app/modules/files/routes/files_routes.py

Rutas de archivos adjuntos.

- POST   /files/upload                  multipart (file, entity_type, entity_id)
- GET    /files/entity/{type}/{id}      archivos de una entidad
- GET    /files/{id}                    metadatos (NotFound si no hay acceso)
- DELETE /files/{id}                    solo uploader o admin
- POST   /files/_internal/reconcile     admin; completa borrados pendientes

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from app.modules.auth.dependencies import get_current_user, require_role
from app.modules.files.enums import FileEntityType
from app.modules.files.facades import FileAccessPolicy
from app.modules.files.routes.deps import get_file_policy
from app.modules.files.schemas import FileDeletedResponse, FileRead, ReconcileResponse
from app.shared.auth_context import Principal, Role
from app.shared.errors import NotFound

router = APIRouter(prefix="/files", tags=["files"])


@router.post(
    "/upload",
    response_model=FileRead,
    status_code=status.HTTP_201_CREATED,
    summary="Subir archivo adjunto a una entidad",
)
async def upload_file(
    file: UploadFile = File(...),
    entity_type: str = Form(...),
    entity_id: int = Form(...),
    principal: Principal = Depends(get_current_user),
    policy: FileAccessPolicy = Depends(get_file_policy),
):
    # Se lee un byte de más para detectar el exceso sin cargar todo el cuerpo
    data = await file.read(policy.max_upload_bytes + 1)
    return await policy.upload(
        principal,
        entity_type,
        entity_id,
        file.filename or "",
        file.content_type,
        data,
    )


@router.get(
    "/entity/{entity_type}/{entity_id}",
    response_model=List[FileRead],
    summary="Listar archivos de una entidad",
)
async def list_entity_files(
    entity_type: str,
    entity_id: int,
    principal: Principal = Depends(get_current_user),
    policy: FileAccessPolicy = Depends(get_file_policy),
):
    etype = FileEntityType.parse(entity_type)
    if etype is None:
        raise NotFound("Entity", entity_id)
    if not principal.is_admin and not await policy.can_access_entity(etype.value, entity_id, principal.id):
        raise NotFound(etype.value.capitalize(), entity_id)
    return await policy.list_by_entity(etype.value, entity_id)


@router.get("/{file_id}", response_model=FileRead, summary="Obtener metadatos de archivo")
async def get_file(
    file_id: int,
    principal: Principal = Depends(get_current_user),
    policy: FileAccessPolicy = Depends(get_file_policy),
):
    return await policy.view(file_id, principal)


@router.delete("/{file_id}", response_model=FileDeletedResponse, summary="Borrar archivo")
async def delete_file(
    file_id: int,
    principal: Principal = Depends(get_current_user),
    policy: FileAccessPolicy = Depends(get_file_policy),
):
    await policy.delete(file_id, principal)
    return FileDeletedResponse(file_id=file_id)


@router.post(
    "/_internal/reconcile",
    response_model=ReconcileResponse,
    summary="Completar borrados pendientes (admin)",
)
async def reconcile_pending_deletes(
    _admin: Principal = Depends(require_role(Role.admin)),
    policy: FileAccessPolicy = Depends(get_file_policy),
):
    return ReconcileResponse(finished=await policy.reconcile_pending_deletes())


# Fin del archivo backend/app/modules/files/routes/files_routes.py
