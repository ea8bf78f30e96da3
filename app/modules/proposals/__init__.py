# -*- coding: utf-8 -*-
"""
backend/app/modules/proposals/__init__.py

Módulo de propuestas: freelancers ofertan sobre proyectos abiertos.
"""

__all__ = []
