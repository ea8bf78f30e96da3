# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Exportación de utilidades comunes.
"""

from .base_models import ApiModel
from .security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

__all__ = [
    "ApiModel",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
