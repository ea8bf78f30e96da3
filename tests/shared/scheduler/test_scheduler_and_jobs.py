# -*- coding: utf-8 -*-
"""
tests/shared/scheduler/test_scheduler_and_jobs.py

SchedulerService y los dos jobs periódicos (barrido del limitador y
reconciliación de borrados de archivos).
"""

from contextlib import asynccontextmanager

import pytest

from app.modules.files.facades import FileAccessPolicy
from app.modules.files.jobs import (
    RECONCILE_PENDING_DELETES_JOB_ID,
    reconcile_pending_deletes_job,
    register_reconcile_pending_deletes_job,
)
from app.modules.files.services.storage import LocalBlobStorage
from app.shared.errors import BlobRemovalFailed
from app.shared.scheduler import SchedulerService
from app.shared.scheduler.jobs import (
    RATE_LIMIT_SWEEP_JOB_ID,
    register_rate_limit_sweep_job,
    sweep_login_attempts,
)
from app.shared.security import InMemoryAttemptStore, LoginRateLimiter


async def _noop():
    return None


async def test_add_interval_job_registers_and_replaces():
    scheduler = SchedulerService()
    scheduler.start()
    try:
        scheduler.add_interval_job(_noop, "tick", minutes=5)
        scheduler.add_interval_job(_noop, "tick", seconds=30)

        jobs = scheduler.get_jobs()
        assert [j["id"] for j in jobs] == ["tick"]
        assert "0:00:30" in jobs[0]["trigger"]
        assert jobs[0]["next_run"] is not None
        assert scheduler.get_job_status("tick")["pending"] is False
        assert scheduler.get_job_status("missing") is None
    finally:
        scheduler.shutdown(wait=False)


@pytest.mark.parametrize("minutes,seconds", [(0, 0), (-1, 0), (0, -5)])
def test_non_positive_interval_rejected(minutes, seconds):
    with pytest.raises(ValueError):
        SchedulerService().add_interval_job(_noop, "bad", minutes=minutes, seconds=seconds)


def test_remove_job():
    scheduler = SchedulerService()
    scheduler.add_interval_job(_noop, "tick", minutes=1)

    assert scheduler.remove_job("tick") is True
    assert scheduler.remove_job("tick") is False
    assert scheduler.get_jobs() == []


async def test_start_and_shutdown():
    scheduler = SchedulerService()
    assert scheduler.is_running is False

    scheduler.start()
    assert scheduler.is_running is True

    scheduler.shutdown(wait=False)
    assert scheduler.is_running is False


def test_register_both_jobs(tmp_path):
    scheduler = SchedulerService()
    limiter = LoginRateLimiter(InMemoryAttemptStore())

    register_rate_limit_sweep_job(scheduler, limiter, minutes=5)
    register_reconcile_pending_deletes_job(scheduler, LocalBlobStorage(tmp_path), minutes=30)

    ids = sorted(j["id"] for j in scheduler.get_jobs())
    assert ids == sorted([RATE_LIMIT_SWEEP_JOB_ID, RECONCILE_PENDING_DELETES_JOB_ID])


async def test_sweep_job_purges_expired_records():
    clock = iter([0.0, 0.0, 10_000.0])
    limiter = LoginRateLimiter(InMemoryAttemptStore(), clock=lambda: next(clock))
    limiter.check("1.1.1.1", "a@b.io")
    limiter.check("2.2.2.2", "a@b.io")

    assert await sweep_login_attempts(limiter) == 2
    assert len(limiter.store) == 0


async def test_reconcile_job_completes_pending_delete(
    session_factory, store, users, make_gig, tmp_path, mocker
):
    blobs = LocalBlobStorage(tmp_path / "blobs")
    policy = FileAccessPolicy(store, blobs)
    gig_id = await make_gig(users.freelancer.id)
    row = await policy.upload(users.freelancer, "gig", gig_id, "a.txt", "text/plain", b"hello")

    failing = mocker.patch.object(blobs, "remove", side_effect=OSError("locked"))
    with pytest.raises(BlobRemovalFailed):
        await policy.delete(row["id"], users.freelancer)
    mocker.stop(failing)

    assert await reconcile_pending_deletes_job(blobs, session_factory=session_factory) == 1
    assert not await blobs.exists(row["file_path"])
    assert await store.query_one("SELECT id FROM files WHERE id = :id", {"id": row["id"]}) is None


async def test_reconcile_job_opens_session_scope_by_default(session, tmp_path, mocker):
    @asynccontextmanager
    async def scope():
        yield session

    opened = mocker.patch("app.shared.database.database.session_scope", side_effect=scope)

    assert await reconcile_pending_deletes_job(LocalBlobStorage(tmp_path)) == 0
    opened.assert_called_once_with()
