# -*- coding: utf-8 -*-
"""
backend/app/modules/files/enums/file_entity_type_enum.py

Tipo de entidad dueña de un archivo adjunto (asociación polimórfica
entity_type + entity_id).

Conjunto cerrado: cualquier valor fuera de este enum se trata como
acceso denegado por la política de archivos.

Autor: Equipo FreelanceHub
Fecha: 2026-03-05
"""

from enum import StrEnum
from typing import Optional


class FileEntityType(StrEnum):
    project = "project"
    proposal = "proposal"
    gig = "gig"
    order = "order"

    @classmethod
    def parse(cls, value: object) -> Optional["FileEntityType"]:
        """Devuelve el miembro correspondiente o None si el valor no pertenece al conjunto."""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


__all__ = ["FileEntityType"]
# Fin del archivo backend/app/modules/files/enums/file_entity_type_enum.py
