# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/__init__.py

Sistema de jobs programados usando APScheduler.

La instancia se crea en el lifespan de la app (app.state.scheduler).
"""

from .scheduler_service import SchedulerService

__all__ = ["SchedulerService"]
