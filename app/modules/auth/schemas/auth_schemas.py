# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/schemas/auth_schemas.py

Schemas de request/response para login, registro y perfil propio.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from app.shared.utils.base_models import ApiModel


# ========== REQUESTS ==========

class LoginRequest(ApiModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=1024)


class RegisterRequest(ApiModel):
    """Alta pública: solo roles client y freelancer (admin no se auto-registra)."""

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=1024)
    full_name: str = Field(..., min_length=1, max_length=255)
    role: Literal["client", "freelancer"] = "client"
    avatar_url: Optional[str] = Field(None, max_length=1024)


# ========== RESPONSES ==========

class UserOut(ApiModel):
    id: int
    email: str
    full_name: str
    avatar_url: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None


class LoginResponse(ApiModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


__all__ = ["LoginRequest", "RegisterRequest", "UserOut", "LoginResponse"]
