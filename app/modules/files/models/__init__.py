# -*- coding: utf-8 -*-
"""
backend/app/modules/files/models/__init__.py
"""

from .file_models import FileRecord

__all__ = ["FileRecord"]
