# -*- coding: utf-8 -*-
"""
backend/app/modules/files/jobs/__init__.py

Jobs programados del módulo Files.
"""

from .reconcile_pending_deletes_job import (
    JOB_ID as RECONCILE_PENDING_DELETES_JOB_ID,
    reconcile_pending_deletes_job,
    register_reconcile_pending_deletes_job,
)

__all__ = [
    "RECONCILE_PENDING_DELETES_JOB_ID",
    "reconcile_pending_deletes_job",
    "register_reconcile_pending_deletes_job",
]
