# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Fachada de configuración para FreelanceHub.
Reexpone la carga de settings basada en Pydantic v2 definida en
`app.shared.config`.

Autor: Equipo FreelanceHub
Fecha: 2026-03-02
"""

from typing import cast

from app.shared.config.config_loader import get_settings as _get_settings
from app.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global de la aplicación.

    Returns:
        BaseAppSettings: instancia de configuración (según PYTHON_ENV).
    """
    settings = _get_settings()
    return cast(BaseAppSettings, settings)

# Fin del archivo backend/app/core/settings.py
