# -*- coding: utf-8 -*-
"""
backend/app/modules/gigs/__init__.py

Módulo Gigs: solo modelo ORM, referenciado por la delegación de
acceso de archivos.
"""
