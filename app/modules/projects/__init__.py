# -*- coding: utf-8 -*-
"""
backend/app/modules/projects/__init__.py

Módulo de proyectos de FreelanceHub.

- Publicación de proyectos por clientes
- Búsqueda y listado
- Política de acceso (ver/editar/cancelar) y skills

Paquete liviano: no importa modelos ni rutas al cargarse.
"""

__all__ = []
