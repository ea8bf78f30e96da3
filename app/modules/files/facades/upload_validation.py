# -*- coding: utf-8 -*-
"""
backend/app/modules/files/facades/upload_validation.py

Validaciones de archivos subidos.
Código puro sin dependencias de DB/FastAPI para facilitar testing.

Orden determinista, el primer fallo gana:
    1) tamaño        -> file_too_large
    2) extensión     -> extension_not_allowed
    3) content-type  -> mime_type_not_allowed

Extensión y content-type son listas independientes: un `.exe` declarado
como image/png se rechaza por extensión.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

import logging
from pathlib import PurePath
from typing import FrozenSet, Optional

from app.observability.metrics import upload_rejected_total
from app.shared.errors import ValidationRejected

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024

ALLOWED_EXTENSIONS: FrozenSet[str] = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".webp",
    ".pdf", ".txt", ".doc", ".docx", ".xls", ".xlsx",
})

ALLOWED_MIME_TYPES: FrozenSet[str] = frozenset({
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/webp",
    "application/pdf",
    "text/plain",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
})

# Códigos estables devueltos al cliente en ValidationRejected.reason
REASON_TOO_LARGE = "file_too_large"
REASON_EXTENSION = "extension_not_allowed"
REASON_MIME = "mime_type_not_allowed"


def _reject(reason: str, message: str) -> ValidationRejected:
    upload_rejected_total.labels(reason=reason).inc()
    logger.info("upload_rejected: reason=%s detail=%s", reason, message)
    return ValidationRejected(reason, message)


def file_extension(filename: str) -> str:
    """Extensión en minúsculas con el punto ('' si no tiene)."""
    return PurePath(filename or "").suffix.lower()


def normalize_content_type(content_type: Optional[str]) -> str:
    """'Image/PNG; charset=x' -> 'image/png'"""
    return (content_type or "").split(";", 1)[0].strip().lower()


def validate_upload(
    filename: str,
    content_type: Optional[str],
    size_bytes: int,
    max_bytes: int = DEFAULT_MAX_FILE_SIZE_BYTES,
) -> str:
    """
    Valida tamaño, extensión y content-type, en ese orden.

    Returns:
        La extensión aceptada.

    Raises:
        ValidationRejected: con reason file_too_large, extension_not_allowed
            o mime_type_not_allowed
    """
    if size_bytes > max_bytes:
        raise _reject(
            REASON_TOO_LARGE,
            f"File exceeds maximum size: {size_bytes} bytes > {max_bytes} bytes",
        )

    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise _reject(
            REASON_EXTENSION,
            f"File type not allowed. Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}",
        )

    mime = normalize_content_type(content_type)
    if mime not in ALLOWED_MIME_TYPES:
        raise _reject(
            REASON_MIME,
            f"MIME type not allowed. Allowed types: {', '.join(sorted(ALLOWED_MIME_TYPES))}",
        )

    return ext


__all__ = [
    "ALLOWED_EXTENSIONS",
    "ALLOWED_MIME_TYPES",
    "DEFAULT_MAX_FILE_SIZE_BYTES",
    "REASON_TOO_LARGE",
    "REASON_EXTENSION",
    "REASON_MIME",
    "file_extension",
    "normalize_content_type",
    "validate_upload",
]

# Fin del archivo backend/app/modules/files/facades/upload_validation.py
