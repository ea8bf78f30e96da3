# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import settings

`settings` es un proxy perezoso: cada acceso a atributo resuelve
`get_settings()`, de modo que los tests pueden limpiar la caché
(`get_settings.cache_clear()`) y cambiar variables de entorno sin
reimportar módulos.
"""

from __future__ import annotations

from typing import Any

from .config_loader import get_settings
from .settings_base import BaseAppSettings


class _SettingsProxy:
    """Delegación de atributos hacia la instancia cacheada de settings."""

    def __getattr__(self, name: str) -> Any:
        return getattr(get_settings(), name)

    def __repr__(self) -> str:
        return f"<SettingsProxy env={get_settings().python_env}>"


settings = _SettingsProxy()

__all__ = ["settings", "get_settings", "BaseAppSettings"]

# Fin del archivo backend/app/shared/config/__init__.py
