# -*- coding: utf-8 -*-
"""
backend/app/modules/files/services/__init__.py
"""

from .storage import BlobStorage, LocalBlobStorage

__all__ = ["BlobStorage", "LocalBlobStorage"]
