# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/__init__.py

Schemas Pydantic del módulo de autenticación.
"""

from .auth_schemas import LoginRequest, RegisterRequest, UserOut, LoginResponse

__all__ = ["LoginRequest", "RegisterRequest", "UserOut", "LoginResponse"]
