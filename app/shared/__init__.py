# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida: config, base de datos, errores de acceso,
identidad del principal, seguridad y scheduler.

No importa submódulos en import-time para evitar ciclos.
"""
