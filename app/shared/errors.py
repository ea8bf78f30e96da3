# -*- coding: utf-8 -*-
"""
backend/app/shared/errors.py

Excepciones de dominio compartidas por las políticas de acceso.

Las políticas lanzan estas excepciones sin acoplarse a FastAPI; los
handlers registrados en app.main las traducen a respuestas HTTP:

- NotFound                 -> 404 (también oculta existencia a no autorizados)
- Forbidden                -> 403 (el recurso existe y se quiere que se sepa)
- ValidationRejected       -> 400 (upload/filename/payload rechazado)
- RateLimited              -> 429 (+ Retry-After)
- InvalidStatusTransition  -> 409
- BlobRemovalFailed        -> 502 (delete de archivo a medias, reintentable)

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from __future__ import annotations

from typing import Optional


class AccessError(Exception):
    """Error base de la capa de acceso."""

    status_code: int = 500
    error_code: str = "access_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFound(AccessError):
    """El recurso no existe, o no debe revelarse su existencia al solicitante."""

    status_code = 404
    error_code = "not_found"

    def __init__(self, resource: str, identifier: object = None) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class Forbidden(AccessError):
    """El principal está identificado y el recurso existe, pero la acción se niega."""

    status_code = 403
    error_code = "forbidden"


class ValidationRejected(AccessError):
    """Entrada rechazada; `reason` es un código estable para el cliente."""

    status_code = 400
    error_code = "validation_rejected"

    def __init__(self, reason: str, message: Optional[str] = None) -> None:
        self.reason = reason
        super().__init__(message or reason)


class RateLimited(AccessError):
    """Intentos agotados en la ventana actual."""

    status_code = 429
    error_code = "rate_limit_exceeded"

    def __init__(self, retry_after_minutes: int) -> None:
        self.retry_after_minutes = retry_after_minutes
        super().__init__(
            f"Too many login attempts. Please try again in {retry_after_minutes} minutes."
        )


class InvalidStatusTransition(AccessError):
    """Se intentó mover un estado hacia atrás o salir de un estado terminal."""

    status_code = 409
    error_code = "invalid_status_transition"

    def __init__(self, from_status: str, to_status: str) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Invalid status transition: {from_status} -> {to_status}")


class BlobRemovalFailed(AccessError):
    """
    No se pudo borrar el blob de un archivo.

    El registro de metadatos queda marcado como pendiente de borrado; un
    reintento del delete o el job de reconciliación lo completan.
    """

    status_code = 502
    error_code = "blob_removal_failed"

    def __init__(self, file_id: int, path: str) -> None:
        self.file_id = file_id
        self.path = path
        super().__init__(f"Stored blob for file {file_id} could not be removed; deletion is pending")


__all__ = [
    "AccessError",
    "NotFound",
    "Forbidden",
    "ValidationRejected",
    "RateLimited",
    "InvalidStatusTransition",
    "BlobRemovalFailed",
]

# Fin del archivo backend/app/shared/errors.py
