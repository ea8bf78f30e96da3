# -*- coding: utf-8 -*-
"""
backend/app/modules/files/models/file_models.py

Modelo SQLAlchemy para archivos adjuntos a entidades de la plataforma.

Asociación polimórfica: (entity_type, entity_id) resuelve a exactamente
un Project, Proposal, Gig u Order. No hay FK física porque la tabla
destino depende de entity_type.

delete_requested_at:
    Se marca al iniciar un borrado. Mientras esté presente el archivo se
    considera inexistente para lecturas; el registro solo desaparece
    cuando el blob ya fue eliminado del storage.

Autor: Equipo FreelanceHub
Fecha: 2026-03-05
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.shared.database.base import Base, enum_check
from app.modules.files.enums import FileEntityType


class FileRecord(Base):
    __tablename__ = "files"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    uploader_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    filename: Mapped[str] = mapped_column(String(255), nullable=False)
    original_name: Mapped[str] = mapped_column(String(255), nullable=False)
    file_path: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mime_type: Mapped[str] = mapped_column(String(255), nullable=False)

    entity_type: Mapped[str] = mapped_column(String(20), nullable=False)
    entity_id: Mapped[int] = mapped_column(Integer, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    delete_requested_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        enum_check("entity_type", FileEntityType),
        Index("idx_files_entity", "entity_type", "entity_id"),
    )

    def __repr__(self):
        return (
            f"<FileRecord(id={self.id}, entity={self.entity_type}:{self.entity_id}, "
            f"uploader_id={self.uploader_id})>"
        )


__all__ = ["FileRecord"]
# Fin del archivo backend/app/modules/files/models/file_models.py
