# -*- coding: utf-8 -*-
"""
backend/app/modules/files/schemas/__init__.py
"""

from .file_schemas import FileDeletedResponse, FileRead, ReconcileResponse

__all__ = ["FileRead", "FileDeletedResponse", "ReconcileResponse"]
