# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/__init__.py

Módulo Auth: usuarios, login con rate limit y resolución del Principal
del request (app.modules.auth.dependencies).
"""
