# -*- coding: utf-8 -*-
"""
backend/app/core/__init__.py

Puntos de entrada estables de FreelanceHub sobre `app.shared.*`:
`app.core.settings`, `app.core.logging` y `app.core.db`.
"""
