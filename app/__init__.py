# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Paquete principal 'app' del backend FreelanceHub.

Los módulos internos se importan como 'app.*' con la carpeta del backend
en PYTHONPATH (o instalada con `pip install -e .`).
"""

# Fin del archivo backend/app/__init__.py
