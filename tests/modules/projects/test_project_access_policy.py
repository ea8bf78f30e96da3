# -*- coding: utf-8 -*-
"""
tests/modules/projects/test_project_access_policy.py

Reglas de acceso de ProjectAccessPolicy contra SQLite en memoria.
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.modules.projects.facades import ProjectAccessPolicy
from app.shared.auth_context import Principal, Role
from app.shared.errors import Forbidden, InvalidStatusTransition, NotFound


@pytest.fixture
def policy(store):
    return ProjectAccessPolicy(store)


@pytest.fixture
async def project_id(users, make_project):
    return await make_project(users.client.id)


# ---------------------------------------------------------------------------
# view
# ---------------------------------------------------------------------------

async def test_owner_and_admin_can_view(policy, users, project_id):
    owner_view = await policy.view(project_id, users.client)
    admin_view = await policy.view(project_id, users.admin)

    assert owner_view["id"] == project_id
    assert admin_view["id"] == project_id
    assert owner_view["client_name"] == "Carla Cliente"
    assert owner_view["has_submitted_proposal"] is False


async def test_unrelated_client_gets_not_found(policy, users, project_id):
    with pytest.raises(NotFound):
        await policy.view(project_id, users.other_client)


async def test_client_with_proposal_can_view(policy, users, project_id, make_proposal):
    # El store no restringe el rol del autor de la propuesta
    await make_proposal(project_id, users.other_client.id)

    view = await policy.view(project_id, users.other_client)
    assert view["id"] == project_id


@pytest.mark.parametrize("status", ["open", "in_progress", "completed", "cancelled"])
async def test_freelancer_always_views(policy, users, make_project, status):
    pid = await make_project(users.other_client.id, status=status)

    view = await policy.view(pid, users.freelancer)
    assert view["id"] == pid


async def test_missing_project_is_not_found(policy, users):
    with pytest.raises(NotFound):
        await policy.view(9999, users.admin)


async def test_has_submitted_proposal_flips_after_submit(policy, users, project_id, make_proposal):
    before = await policy.view(project_id, users.freelancer)
    assert before["has_submitted_proposal"] is False
    assert before["proposals_count"] == 0

    await make_proposal(project_id, users.freelancer.id)

    after = await policy.view(project_id, users.freelancer)
    assert after["has_submitted_proposal"] is True
    assert after["proposals_count"] == 1

    other = await policy.view(project_id, users.other_freelancer)
    assert other["has_submitted_proposal"] is False


async def test_has_submitted_proposal_only_for_freelancers(policy, users, project_id, make_proposal):
    await make_proposal(project_id, users.freelancer.id)

    view = await policy.view(project_id, users.client)
    assert view["has_submitted_proposal"] is False


# ---------------------------------------------------------------------------
# create / update
# ---------------------------------------------------------------------------

async def test_create_budget_prefers_max(policy, users):
    created = await policy.create(
        users.client,
        {"title": "API", "description": "REST API", "budget_min": 100, "budget_max": 500},
    )

    assert created["budget"] == 500
    assert created["status"] == "open"
    assert created["category"] == "general"


async def test_budget_recomputed_from_supplied_min(policy, users):
    created = await policy.create(
        users.client,
        {"title": "API", "description": "REST API", "budget_min": 100, "budget_max": 500},
    )

    updated = await policy.update(created["id"], users.client, {"budget_min": 200})

    assert updated["budget"] == 200
    assert updated["budget_min"] == 200
    assert updated["budget_max"] == 500


async def test_create_requires_client(policy, users):
    with pytest.raises(Forbidden):
        await policy.create(users.freelancer, {"title": "x", "description": "y"})


@pytest.mark.parametrize("who", ["other_client", "freelancer", "admin"])
async def test_update_by_non_owner_is_forbidden(policy, users, project_id, who):
    with pytest.raises(Forbidden):
        await policy.update(project_id, getattr(users, who), {"title": "Hijacked"})


async def test_update_writes_only_present_fields(policy, users, project_id):
    updated = await policy.update(project_id, users.client, {"title": "Renamed"})

    assert updated["title"] == "Renamed"
    assert updated["description"] == "Build a landing page"
    assert updated["budget"] == 500


async def test_update_missing_project_is_not_found(policy, users):
    with pytest.raises(NotFound):
        await policy.update(4242, users.client, {"title": "x"})


async def test_skills_are_replaced_wholesale(policy, users):
    created = await policy.create(
        users.client,
        {"title": "App", "description": "Mobile app", "skills": ["python", "react"]},
    )
    assert created["skills"] == ["python", "react"]

    updated = await policy.update(created["id"], users.client, {"skills": ["go", "python"]})
    assert updated["skills"] == ["go", "python"]

    cleared = await policy.update(created["id"], users.client, {"skills": []})
    assert cleared["skills"] == []


async def test_skill_upsert_reuses_existing_names(policy, users, store):
    await policy.create(users.client, {"title": "A", "description": "a", "skills": ["python"]})
    await policy.create(users.client, {"title": "B", "description": "b", "skills": ["python", " python "]})

    rows = await store.query("SELECT name FROM skills")
    assert [r["name"] for r in rows] == ["python"]


async def test_status_cannot_move_backwards(policy, users, make_project):
    pid = await make_project(users.client.id, status="completed")

    with pytest.raises(InvalidStatusTransition):
        await policy.update(pid, users.client, {"status": "open"})


async def test_status_moves_forward(policy, users, project_id):
    updated = await policy.update(project_id, users.client, {"status": "in_progress"})
    assert updated["status"] == "in_progress"


async def test_failed_transition_leaves_skills_untouched(policy, users):
    created = await policy.create(
        users.client, {"title": "A", "description": "a", "skills": ["python"]}
    )
    await policy.update(created["id"], users.client, {"status": "cancelled"})

    with pytest.raises(InvalidStatusTransition):
        await policy.update(created["id"], users.client, {"status": "open", "skills": ["rust"]})

    current = await policy.get(created["id"])
    assert current["skills"] == ["python"]
    assert current["status"] == "cancelled"


async def test_relink_failure_rolls_back_whole_update(policy, users, store, mocker):
    created = await policy.create(
        users.client, {"title": "A", "description": "a", "skills": ["python"]}
    )
    real_execute = store.execute

    async def failing_execute(sql, params=None):
        if "INSERT INTO project_skills" in sql:
            raise OperationalError(sql, params, Exception("constraint failed"))
        return await real_execute(sql, params)

    mocker.patch.object(store, "execute", new=failing_execute)

    with pytest.raises(OperationalError):
        await policy.update(created["id"], users.client, {"title": "B", "skills": ["rust"]})

    current = await policy.get(created["id"])
    assert current["title"] == "A"
    assert current["skills"] == ["python"]
    rows = await store.query("SELECT name FROM skills")
    assert [r["name"] for r in rows] == ["python"]


# ---------------------------------------------------------------------------
# delete (soft)
# ---------------------------------------------------------------------------

async def test_delete_is_soft(policy, users, project_id, store):
    await policy.delete(project_id, users.client)

    row = await store.query_one("SELECT status FROM projects WHERE id = :id", {"id": project_id})
    assert row is not None
    assert row["status"] == "cancelled"


async def test_delete_twice_is_noop(policy, users, project_id):
    await policy.delete(project_id, users.client)
    await policy.delete(project_id, users.client)

    assert (await policy.get(project_id))["status"] == "cancelled"


@pytest.mark.parametrize("who", ["other_client", "freelancer", "admin"])
async def test_delete_by_non_owner_is_forbidden(policy, users, project_id, who):
    with pytest.raises(Forbidden):
        await policy.delete(project_id, getattr(users, who))


# ---------------------------------------------------------------------------
# is_participant
# ---------------------------------------------------------------------------

async def test_is_participant(policy, users, project_id, make_proposal):
    await make_proposal(project_id, users.freelancer.id)

    assert await policy.is_participant(project_id, users.client.id) is True
    assert await policy.is_participant(project_id, users.freelancer.id) is True
    assert await policy.is_participant(project_id, users.other_freelancer.id) is False
    assert await policy.is_participant(31337, users.client.id) is False


async def test_principal_is_immutable():
    principal = Principal(id=1, role=Role.client)
    with pytest.raises(AttributeError):
        principal.id = 2  # type: ignore[misc]


@pytest.mark.parametrize("raw,flag", [("admin", "is_admin"), ("client", "is_client"), ("freelancer", "is_freelancer")])
async def test_principal_normalizes_plain_string_role(raw, flag):
    principal = Principal(id=1, role=raw)

    assert principal.role is Role(raw)
    assert getattr(principal, flag) is True


async def test_principal_rejects_unknown_role():
    with pytest.raises(ValueError):
        Principal(id=1, role="superuser")
