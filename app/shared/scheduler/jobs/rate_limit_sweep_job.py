# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/rate_limit_sweep_job.py

Job programado para purgar intentos de login expirados.

Sin el barrido, la tabla en memoria del limitador crecería con cada
combinación ip:email vista. Con RedisAttemptStore el TTL de cada clave
ya hace el trabajo y el barrido devuelve 0.

Autor: Equipo FreelanceHub
Fecha: 2026-03-07
"""

import logging

from app.shared.security.rate_limit_service import LoginRateLimiter

logger = logging.getLogger(__name__)

JOB_ID = "auth_login_attempts_sweep"


async def sweep_login_attempts(limiter: LoginRateLimiter) -> int:
    """Elimina los registros con reset_at vencido. Devuelve cuántos."""
    removed = limiter.sweep()
    if removed:
        logger.info("login_attempts_swept: removed=%d", removed)
    return removed


def register_rate_limit_sweep_job(scheduler, limiter: LoginRateLimiter, minutes: int) -> str:
    return scheduler.add_interval_job(
        sweep_login_attempts,
        job_id=JOB_ID,
        minutes=minutes,
        limiter=limiter,
    )


__all__ = ["JOB_ID", "sweep_login_attempts", "register_rate_limit_sweep_job"]
