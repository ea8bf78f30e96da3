# -*- coding: utf-8 -*-
"""
backend/app/modules/files/facades/__init__.py

Punto de agregación de fachadas del módulo Files.
"""

from __future__ import annotations

from .file_access import FileAccessPolicy
from .upload_validation import (
    ALLOWED_EXTENSIONS,
    ALLOWED_MIME_TYPES,
    DEFAULT_MAX_FILE_SIZE_BYTES,
    validate_upload,
)

__all__ = [
    "FileAccessPolicy",
    "ALLOWED_EXTENSIONS",
    "ALLOWED_MIME_TYPES",
    "DEFAULT_MAX_FILE_SIZE_BYTES",
    "validate_upload",
]

# Fin del archivo backend/app/modules/files/facades/__init__.py
