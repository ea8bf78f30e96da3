# -*- coding: utf-8 -*-
"""
backend/app/shared/security/__init__.py

Limitador de intentos de login y sus dependencias FastAPI.
"""

from .rate_limit_service import (
    AttemptOutcome,
    AttemptRecord,
    AttemptStore,
    InMemoryAttemptStore,
    LoginRateLimiter,
    RedisAttemptStore,
    build_login_rate_limiter,
)
from .rate_limit_dep import enforce_login_rate_limit, get_login_rate_limiter

__all__ = [
    "AttemptOutcome",
    "AttemptRecord",
    "AttemptStore",
    "InMemoryAttemptStore",
    "LoginRateLimiter",
    "RedisAttemptStore",
    "build_login_rate_limiter",
    "enforce_login_rate_limit",
    "get_login_rate_limiter",
]
