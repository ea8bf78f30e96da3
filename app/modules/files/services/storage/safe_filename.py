# -*- coding: utf-8 -*-
"""
backend/app/modules/files/services/storage/safe_filename.py

Nombres de almacenamiento seguros para archivos subidos.

- Cada carácter fuera de [A-Za-z0-9._-] se reemplaza por "_"
- Se antepone el instante de subida en milisegundos y un sufijo aleatorio:
  "{epoch_ms}-{8 hex}-{nombre}", único aunque dos subidas coincidan en el
  mismo milisegundo
- La ruta final debe quedar dentro del directorio de uploads

El nombre original se conserva aparte (original_name) para mostrarlo.

Examples:
    >>> sanitize_filename("Propuesta final (v2).pdf")
    'Propuesta_final__v2_.pdf'
    >>> sanitize_filename("../../etc/passwd")
    '.._.._etc_passwd'
"""

import re
import time
import uuid
from pathlib import Path
from typing import Optional

from app.shared.errors import ValidationRejected

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")

# Límite típico de nombre de archivo en ext4/APFS
MAX_FILENAME_LENGTH = 255

REASON_INVALID_FILENAME = "invalid_filename"


def sanitize_filename(original_name: str) -> str:
    """Reemplaza por "_" todo carácter fuera de [A-Za-z0-9._-]."""
    return _UNSAFE_CHARS.sub("_", original_name or "")


def build_stored_filename(
    original_name: str,
    now_ms: Optional[int] = None,
    token: Optional[str] = None,
) -> str:
    """
    Nombre con el que se guarda el blob: "{epoch_ms}-{token}-{sanitizado}".

    `token` son 8 caracteres hex de uuid4 salvo que se indique otro.

    Si el resultado excede MAX_FILENAME_LENGTH se recorta la base y se
    conserva la extensión.
    """
    stamp = int(time.time() * 1000) if now_ms is None else now_ms
    safe = sanitize_filename(original_name) or "file"
    token = uuid.uuid4().hex[:8] if token is None else token
    name = f"{stamp}-{token}-{safe}"

    if len(name) > MAX_FILENAME_LENGTH:
        suffix = Path(safe).suffix[:16]
        keep = MAX_FILENAME_LENGTH - len(suffix)
        name = f"{name[:keep]}{suffix}"
    return name


def resolve_inside(root: Path, filename: str) -> Path:
    """
    Resuelve root/filename y garantiza que quede directamente dentro de root.

    Raises:
        ValidationRejected("invalid_filename"): si escapa del directorio,
            es vacío o apunta al propio directorio
    """
    base = Path(root).resolve()
    if not filename or filename in (".", ".."):
        raise ValidationRejected(REASON_INVALID_FILENAME, "Invalid stored filename")

    candidate = (base / filename).resolve()
    if candidate.parent != base:
        raise ValidationRejected(REASON_INVALID_FILENAME, "Filename escapes the upload directory")
    return candidate


__all__ = [
    "MAX_FILENAME_LENGTH",
    "REASON_INVALID_FILENAME",
    "sanitize_filename",
    "build_stored_filename",
    "resolve_inside",
]

# Fin del archivo backend/app/modules/files/services/storage/safe_filename.py
