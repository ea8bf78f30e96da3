# -*- coding: utf-8 -*-
"""
backend/app/shared/security/rate_limit_service.py

Limitador de intentos de login por clave compuesta "{ip}:{email}".

Máquina de estados por clave (ventana fija, sin recarga dentro de la ventana):

- sin registro           -> count=1, reset=now+ventana, permitido
- activo, count < límite -> count+1, permitido
- activo, count >= límite-> RateLimited(ceil((reset-now)/60) min), sin cambios
- expirado (now > reset) -> count=1, ventana nueva, permitido

Un login exitoso no limpia la clave: el techo es de intentos, no de fallos.

El estado vive detrás de AttemptStore:
- InMemoryAttemptStore: tabla local protegida con threading.Lock (una sola instancia)
- RedisAttemptStore: compartido entre instancias cuando REDIS_URL está configurado

El limitador es un objeto con ciclo de vida explícito: se construye en el
lifespan de la app (app.state.rate_limiter), el scheduler ejecuta sweep()
y se cierra al apagar.

Autor: Equipo FreelanceHub
Actualizado: 2026-03-06
"""
from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

import redis

from app.shared.errors import RateLimited

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass
class AttemptRecord:
    """Intentos registrados para una clave; reset_at en segundos epoch."""
    count: int
    reset_at: float

    def is_expired(self, now: float) -> bool:
        return now > self.reset_at


@dataclass(frozen=True)
class AttemptOutcome:
    """Resultado de registrar un intento."""
    allowed: bool
    count: int
    reset_at: float


class AttemptStore(Protocol):
    def hit(self, key: str, now: float, limit: int, window_sec: int) -> AttemptOutcome: ...

    def sweep(self, now: float) -> int: ...

    def close(self) -> None: ...


class InMemoryAttemptStore:
    """Tabla de intentos local al proceso."""

    def __init__(self) -> None:
        self._records: Dict[str, AttemptRecord] = {}
        self._lock = threading.Lock()

    def hit(self, key: str, now: float, limit: int, window_sec: int) -> AttemptOutcome:
        with self._lock:
            record = self._records.get(key)

            if record is None or record.is_expired(now):
                record = AttemptRecord(count=1, reset_at=now + window_sec)
                self._records[key] = record
                return AttemptOutcome(allowed=True, count=1, reset_at=record.reset_at)

            if record.count >= limit:
                return AttemptOutcome(allowed=False, count=record.count, reset_at=record.reset_at)

            record.count += 1
            return AttemptOutcome(allowed=True, count=record.count, reset_at=record.reset_at)

    def get(self, key: str) -> Optional[AttemptRecord]:
        with self._lock:
            return self._records.get(key)

    def sweep(self, now: float) -> int:
        with self._lock:
            expired = [k for k, r in self._records.items() if r.is_expired(now)]
            for k in expired:
                del self._records[k]
        return len(expired)

    def close(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class RedisAttemptStore:
    """
    Estado compartido en Redis.

    Cada clave es un contador con TTL igual a la ventana; Redis expira las
    claves por sí mismo, así que sweep() no tiene nada que reclamar.
    Un intento denegado no incrementa el contador.
    """

    def __init__(self, client: "redis.Redis", prefix: str = "rl:auth:login:") -> None:
        self._client = client
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str) -> "RedisAttemptStore":
        client = redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        return cls(client)

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def hit(self, key: str, now: float, limit: int, window_sec: int) -> AttemptOutcome:
        rkey = self._key(key)

        pipe = self._client.pipeline()
        pipe.get(rkey)
        pipe.pttl(rkey)
        current, pttl = pipe.execute()

        if current is not None and int(pttl) > 0 and int(current) >= limit:
            return AttemptOutcome(allowed=False, count=int(current), reset_at=now + int(pttl) / 1000)

        count = int(self._client.incr(rkey))
        if count == 1 or int(self._client.pttl(rkey)) < 0:
            self._client.pexpire(rkey, window_sec * 1000)
            pttl = window_sec * 1000
        else:
            pttl = int(self._client.pttl(rkey))
        return AttemptOutcome(allowed=True, count=count, reset_at=now + pttl / 1000)

    def sweep(self, now: float) -> int:
        return 0

    def close(self) -> None:
        self._client.close()


class LoginRateLimiter:
    """
    Guarda de intentos de autenticación.

    Usage:
        limiter = LoginRateLimiter(InMemoryAttemptStore())
        limiter.check(ip, email)   # RateLimited si se agotaron los intentos
    """

    def __init__(
        self,
        store: AttemptStore,
        *,
        max_attempts: int = 5,
        window_minutes: int = 15,
        enabled: bool = True,
        clock: Clock = time.time,
    ) -> None:
        self._store = store
        self.max_attempts = max_attempts
        self.window_sec = window_minutes * 60
        self.enabled = enabled
        self._clock = clock

    @property
    def store(self) -> AttemptStore:
        return self._store

    @staticmethod
    def build_key(ip: str, email: str) -> str:
        return f"{ip or 'unknown'}:{(email or '').strip().lower()}"

    def check(self, ip: str, email: str) -> AttemptOutcome:
        """
        Registra un intento para ip:email.

        Raises:
            RateLimited: si la clave ya agotó sus intentos en la ventana activa
        """
        now = self._clock()
        if not self.enabled:
            return AttemptOutcome(allowed=True, count=0, reset_at=now)

        key = self.build_key(ip, email)
        outcome = self._store.hit(key, now, self.max_attempts, self.window_sec)

        if not outcome.allowed:
            retry_after = max(1, math.ceil((outcome.reset_at - now) / 60))
            logger.warning(
                "Login rate limit exceeded: key=%s count=%s retry_after_min=%s",
                _mask_key(key), outcome.count, retry_after,
            )
            raise RateLimited(retry_after_minutes=retry_after)

        return outcome

    def sweep(self) -> int:
        """Elimina las claves con ventana expirada; devuelve cuántas se borraron."""
        removed = self._store.sweep(self._clock())
        if removed:
            logger.debug("Rate limiter sweep: %d expired keys removed", removed)
        return removed

    def close(self) -> None:
        self._store.close()
        logger.info("LoginRateLimiter cerrado")


def build_login_rate_limiter(
    redis_url: Optional[str],
    *,
    max_attempts: int,
    window_minutes: int,
    enabled: bool = True,
) -> LoginRateLimiter:
    """Construye el limitador con Redis si hay URL, o en memoria si no."""
    if redis_url:
        store: AttemptStore = RedisAttemptStore.from_url(redis_url)
        logger.info("LoginRateLimiter: usando Redis")
    else:
        store = InMemoryAttemptStore()
        logger.info("LoginRateLimiter: REDIS_URL no configurado, usando memoria local")

    return LoginRateLimiter(
        store,
        max_attempts=max_attempts,
        window_minutes=window_minutes,
        enabled=enabled,
    )


def _mask_key(key: str) -> str:
    """Enmascara el email de la clave para logging: 1.2.3.4:jo***@example.com"""
    ip, _, email = key.rpartition(":")
    if "@" in email:
        local, domain = email.split("@", 1)
        email = f"{local[:2]}***@{domain}" if len(local) > 2 else f"***@{domain}"
    return f"{ip}:{email}"


__all__ = [
    "AttemptRecord",
    "AttemptOutcome",
    "AttemptStore",
    "InMemoryAttemptStore",
    "RedisAttemptStore",
    "LoginRateLimiter",
    "build_login_rate_limiter",
]
