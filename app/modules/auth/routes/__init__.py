# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/__init__.py

Router del módulo Auth.
"""

from .auth_routes import router

__all__ = ["router"]

# Fin del archivo backend/app/modules/auth/routes/__init__.py
