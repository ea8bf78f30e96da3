# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/scheduler_service.py

Servicio de programación de tareas periódicas usando APScheduler.

Jobs registrados en el lifespan de la app:
- auth_login_attempts_sweep     (purga de intentos de login expirados)
- files_reconcile_pending       (completa borrados de archivos a medias)

Autor: Equipo FreelanceHub
Fecha: 2026-03-07
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from apscheduler.executors.asyncio import AsyncIOExecutor
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class SchedulerService:
    """
    Envoltura de AsyncIOScheduler con jobs por intervalo.

    Cada job corre con una sola instancia a la vez y las ejecuciones
    perdidas se combinan en una.
    """

    def __init__(self, timezone: str = "UTC"):
        self._scheduler = AsyncIOScheduler(
            jobstores={"default": MemoryJobStore()},
            executors={"default": AsyncIOExecutor()},
            job_defaults={
                "coalesce": True,
                "max_instances": 1,
                "misfire_grace_time": 30,
            },
            timezone=timezone,
        )
        self._started = False

    def start(self) -> None:
        if not self._started:
            self._scheduler.start()
            self._started = True
            logger.info("scheduler_started: jobs=%s", [j["id"] for j in self.get_jobs()])

    def shutdown(self, wait: bool = True) -> None:
        """
        Detiene el scheduler.

        Args:
            wait: si True, espera a que terminen los jobs en ejecución
        """
        if self._started:
            self._scheduler.shutdown(wait=wait)
            self._started = False
            logger.info("scheduler_stopped")

    def add_interval_job(
        self,
        func: Callable[..., Any],
        job_id: str,
        *,
        minutes: int = 0,
        seconds: int = 0,
        **kwargs: Any,
    ) -> str:
        """
        Agrega (o reemplaza) un job que corre cada `minutes`/`seconds`.

        Los kwargs extra se pasan a `func` en cada ejecución.
        """
        if minutes <= 0 and seconds <= 0:
            raise ValueError(f"Interval for job '{job_id}' must be positive")

        self._scheduler.add_job(
            func=func,
            trigger=IntervalTrigger(minutes=minutes, seconds=seconds),
            id=job_id,
            name=job_id,
            replace_existing=True,
            kwargs=kwargs,
        )
        logger.info("scheduler_job_added: id=%s every=%dm%ds", job_id, minutes, seconds)
        return job_id

    def remove_job(self, job_id: str) -> bool:
        job = self._scheduler.get_job(job_id)
        if job is None:
            return False
        job.remove()
        logger.info("scheduler_job_removed: id=%s", job_id)
        return True

    def get_jobs(self) -> List[Dict[str, Any]]:
        return [
            {"id": job.id, "next_run": getattr(job, "next_run_time", None), "trigger": str(job.trigger)}
            for job in self._scheduler.get_jobs()
        ]

    def get_job_status(self, job_id: str) -> Optional[Dict[str, Any]]:
        job = self._scheduler.get_job(job_id)
        if job is None:
            return None
        return {
            "id": job.id,
            "next_run": getattr(job, "next_run_time", None),
            "trigger": str(job.trigger),
            "pending": job.pending,
        }

    @property
    def is_running(self) -> bool:
        return self._started and self._scheduler.running


__all__ = ["SchedulerService"]

# Fin del archivo backend/app/shared/scheduler/scheduler_service.py
