# -*- coding: utf-8 -*-
"""
tests/shared/security/test_rate_limit_service.py

Máquina de estados del limitador de login con un reloj controlado.
"""

import pytest

from app.shared.errors import RateLimited
from app.shared.security import (
    InMemoryAttemptStore,
    LoginRateLimiter,
    RedisAttemptStore,
    build_login_rate_limiter,
)

IP = "10.0.0.7"
EMAIL = "user@example.com"
WINDOW_SEC = 15 * 60


class FakeClock:
    def __init__(self, start: float = 1_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    return InMemoryAttemptStore()


@pytest.fixture
def limiter(store, clock):
    return LoginRateLimiter(store, max_attempts=5, window_minutes=15, clock=clock)


def test_five_attempts_allowed_then_limited(limiter, store, clock):
    for expected in range(1, 6):
        assert limiter.check(IP, EMAIL).count == expected

    before = store.get(limiter.build_key(IP, EMAIL))
    with pytest.raises(RateLimited) as exc:
        limiter.check(IP, EMAIL)

    assert exc.value.retry_after_minutes == 15
    after = store.get(limiter.build_key(IP, EMAIL))
    assert (after.count, after.reset_at) == (before.count, before.reset_at)


def test_retry_after_rounds_up_and_never_below_one(limiter, clock):
    for _ in range(5):
        limiter.check(IP, EMAIL)

    clock.advance(WINDOW_SEC - 61)
    with pytest.raises(RateLimited) as exc:
        limiter.check(IP, EMAIL)
    assert exc.value.retry_after_minutes == 2

    clock.advance(60.5)
    with pytest.raises(RateLimited) as exc:
        limiter.check(IP, EMAIL)
    assert exc.value.retry_after_minutes == 1


def test_window_does_not_slide(limiter, clock):
    limiter.check(IP, EMAIL)
    clock.advance(WINDOW_SEC - 1)
    for _ in range(4):
        limiter.check(IP, EMAIL)

    clock.advance(2)
    outcome = limiter.check(IP, EMAIL)
    assert outcome.count == 1
    assert outcome.reset_at == clock.now + WINDOW_SEC


def test_allowed_after_window_expires(limiter, clock):
    for _ in range(5):
        limiter.check(IP, EMAIL)

    clock.advance(WINDOW_SEC + 1)
    assert limiter.check(IP, EMAIL).allowed is True


def test_keys_are_independent_and_email_is_normalized(limiter):
    for _ in range(5):
        limiter.check(IP, EMAIL)

    assert limiter.check("10.0.0.8", EMAIL).count == 1
    assert limiter.check(IP, "other@example.com").count == 1
    with pytest.raises(RateLimited):
        limiter.check(IP, "  USER@Example.com ")


def test_ceiling_holds_until_window_expires(limiter, clock):
    for _ in range(5):
        limiter.check(IP, EMAIL)

    clock.advance(WINDOW_SEC)
    with pytest.raises(RateLimited) as exc:
        limiter.check(IP, EMAIL)
    assert exc.value.retry_after_minutes == 1

    clock.advance(1)
    assert limiter.check(IP, EMAIL).count == 1


def test_sweep_removes_only_expired(limiter, store, clock):
    limiter.check(IP, EMAIL)
    clock.advance(WINDOW_SEC + 1)
    limiter.check("10.0.0.9", EMAIL)

    assert limiter.sweep() == 1
    assert len(store) == 1
    assert store.get(limiter.build_key("10.0.0.9", EMAIL)) is not None


def test_disabled_limiter_never_records(store, clock):
    limiter = LoginRateLimiter(store, enabled=False, clock=clock)
    for _ in range(20):
        assert limiter.check(IP, EMAIL).allowed is True
    assert len(store) == 0


def test_build_key():
    assert LoginRateLimiter.build_key("1.2.3.4", " Ana@X.io ") == "1.2.3.4:ana@x.io"
    assert LoginRateLimiter.build_key("", "a@b.c") == "unknown:a@b.c"


def test_factory_picks_memory_without_redis_url():
    limiter = build_login_rate_limiter(None, max_attempts=3, window_minutes=1)
    assert isinstance(limiter.store, InMemoryAttemptStore)
    assert limiter.max_attempts == 3
    assert limiter.window_sec == 60


# ---------------------------------------------------------------------------
# RedisAttemptStore con cliente simulado
# ---------------------------------------------------------------------------

@pytest.fixture
def redis_client(mocker):
    return mocker.MagicMock()


def test_redis_first_hit_sets_ttl(redis_client):
    redis_client.pipeline.return_value.execute.return_value = [None, -2]
    redis_client.incr.return_value = 1

    outcome = RedisAttemptStore(redis_client).hit("k", 100.0, 5, WINDOW_SEC)

    assert outcome.allowed is True
    assert outcome.count == 1
    assert outcome.reset_at == 100.0 + WINDOW_SEC
    redis_client.pexpire.assert_called_once_with("rl:auth:login:k", WINDOW_SEC * 1000)


def test_redis_denied_hit_does_not_increment(redis_client):
    redis_client.pipeline.return_value.execute.return_value = ["5", 120_000]

    outcome = RedisAttemptStore(redis_client).hit("k", 100.0, 5, WINDOW_SEC)

    assert outcome.allowed is False
    assert outcome.reset_at == 220.0
    redis_client.incr.assert_not_called()


def test_redis_limiter_reports_retry_after(redis_client):
    redis_client.pipeline.return_value.execute.return_value = ["5", 90_000]
    limiter = LoginRateLimiter(RedisAttemptStore(redis_client), clock=lambda: 0.0)

    with pytest.raises(RateLimited) as exc:
        limiter.check(IP, EMAIL)
    assert exc.value.retry_after_minutes == 2


def test_redis_sweep_and_close(redis_client):
    store = RedisAttemptStore(redis_client)
    assert store.sweep(0.0) == 0
    store.close()

    redis_client.close.assert_called_once()
