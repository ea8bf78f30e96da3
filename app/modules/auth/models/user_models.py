# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/models/user_models.py

Modelo principal de usuarios (User).

Cada usuario tiene exactamente un rol (client, freelancer, admin); el
Principal del request se construye a partir de esta fila.

Autor: Equipo FreelanceHub
Fecha: 2026-03-04
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.auth_context import Role
from app.shared.database.base import Base, enum_check


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    avatar_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, server_default=Role.client.value)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (enum_check("role", Role),)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', role={self.role})>"


__all__ = ["User"]
# Fin del archivo backend/app/modules/auth/models/user_models.py
