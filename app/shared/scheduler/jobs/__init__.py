# -*- coding: utf-8 -*-
"""
backend/app/shared/scheduler/jobs/__init__.py

Jobs programados compartidos.
"""

from .rate_limit_sweep_job import (
    JOB_ID as RATE_LIMIT_SWEEP_JOB_ID,
    register_rate_limit_sweep_job,
    sweep_login_attempts,
)

__all__ = [
    "RATE_LIMIT_SWEEP_JOB_ID",
    "register_rate_limit_sweep_job",
    "sweep_login_attempts",
]
