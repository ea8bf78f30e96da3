# -*- coding: utf-8 -*-
"""
backend/app/modules/orders/__init__.py

Módulo Orders: solo modelo ORM, referenciado por la delegación de
acceso de archivos.
"""
