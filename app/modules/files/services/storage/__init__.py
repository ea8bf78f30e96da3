# -*- coding: utf-8 -*-
"""
backend/app/modules/files/services/storage/__init__.py

Storage de blobs y utilidades de nombres seguros.
"""

from .blob_storage import BlobStorage, LocalBlobStorage
from .safe_filename import build_stored_filename, resolve_inside, sanitize_filename

__all__ = [
    "BlobStorage",
    "LocalBlobStorage",
    "build_stored_filename",
    "resolve_inside",
    "sanitize_filename",
]
