# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base Pydantic v2 para los schemas de la API de FreelanceHub.

- from_attributes: permite validar filas/objetos además de dicts
- str_strip_whitespace: recorta espacios en todos los campos de texto
"""

from pydantic import BaseModel, ConfigDict


class ApiModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["ApiModel"]
