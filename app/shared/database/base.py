# -*- coding: utf-8 -*-
"""
backend/app/shared/database/base.py

Base declarativa y convención de nombres para modelos ORM.

Este módulo proporciona:
- Base: clase base declarativa de SQLAlchemy
- NAMING_CONVENTION: convención de nombres para constraints
- enum_check: CHECK constraint con los valores de un Enum de Python

Autor: Equipo FreelanceHub
Fecha: 2026-03-02
"""

from __future__ import annotations

from enum import Enum
from typing import Type

from sqlalchemy import CheckConstraint, MetaData
from sqlalchemy.orm import DeclarativeBase

# ===== NAMING CONVENTION =====
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


# ===== BASE DECLARATIVA =====
class Base(DeclarativeBase):
    """
    Base declarativa para todos los modelos ORM de FreelanceHub.
    Incluye convención de nombres para constraints.
    """
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


# ===== HELPER PARA ENUMS COMO TEXTO =====
def enum_check(column: str, enum_cls: Type[Enum], name: str | None = None) -> CheckConstraint:
    """
    Devuelve un CheckConstraint que restringe `column` a los valores del Enum.

    Los estados se guardan como texto (portables entre Postgres y SQLite);
    el CHECK conserva la garantía de dominio cerrado en la BD.

        __table_args__ = (enum_check("status", ProjectStatus),)
    """
    values = ", ".join(f"'{e.value}'" for e in enum_cls)
    return CheckConstraint(f"{column} IN ({values})", name=name or f"{column}_valid")


__all__ = ["Base", "NAMING_CONVENTION", "enum_check"]

# Fin del archivo backend/app/shared/database/base.py
