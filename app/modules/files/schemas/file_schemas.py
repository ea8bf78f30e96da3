# -*- coding: utf-8 -*-
"""
backend/app/modules/files/schemas/file_schemas.py

Schemas Pydantic de archivos adjuntos.

La ruta física del blob (file_path) no se expone al cliente.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from datetime import datetime

from app.shared.utils.base_models import ApiModel
from app.modules.files.enums import FileEntityType


class FileRead(ApiModel):
    id: int
    uploader_id: int
    filename: str
    original_name: str
    file_size: int
    mime_type: str
    entity_type: FileEntityType
    entity_id: int
    created_at: datetime


class FileDeletedResponse(ApiModel):
    message: str = "File deleted successfully"
    file_id: int


class ReconcileResponse(ApiModel):
    finished: int


__all__ = ["FileRead", "FileDeletedResponse", "ReconcileResponse"]

# Fin del archivo backend/app/modules/files/schemas/file_schemas.py
