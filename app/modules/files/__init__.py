# -*- coding: utf-8 -*-
"""
backend/app/modules/files/__init__.py

Módulo de archivos adjuntos de FreelanceHub.

Responsabilidades:
- Política de acceso por entidad dueña (project, proposal, gig, order).
- Validación de subidas y nombres de almacenamiento seguros.
- Borrado compensable de blob + metadatos.

Este paquete debe permanecer liviano: no importes models/services aquí
para evitar ciclos de importación.

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from . import enums as enums  # noqa: F401

__all__ = ["enums"]

# Fin del archivo backend/app/modules/files/__init__.py
