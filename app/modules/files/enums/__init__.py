# -*- coding: utf-8 -*-
"""
backend/app/modules/files/enums/__init__.py

Export central de enums del módulo Files.
"""

from .file_entity_type_enum import FileEntityType

__all__ = ["FileEntityType"]
