# -*- coding: utf-8 -*-
"""
tests/modules/proposals/test_proposal_access_policy.py

Reglas de ProposalAccessPolicy: autoría, vínculo con el proyecto y listados.
"""

import pytest

from app.modules.proposals.facades import ProposalAccessPolicy
from app.shared.errors import Forbidden, NotFound, ValidationRejected


@pytest.fixture
def policy(store):
    return ProposalAccessPolicy(store)


@pytest.fixture
async def project_id(users, make_project):
    return await make_project(users.client.id)


@pytest.fixture
async def proposal_id(users, project_id, make_proposal):
    return await make_proposal(project_id, users.freelancer.id)


async def test_author_and_project_client_can_view(policy, users, proposal_id):
    by_author = await policy.view(proposal_id, users.freelancer)
    by_client = await policy.view(proposal_id, users.client)

    assert by_author["id"] == by_client["id"] == proposal_id
    assert by_author["project_title"] == "Landing page"
    assert by_author["freelancer_name"] == "Fede Freelancer"


@pytest.mark.parametrize("who", ["other_client", "other_freelancer", "admin"])
async def test_others_are_forbidden(policy, users, proposal_id, who):
    with pytest.raises(Forbidden):
        await policy.view(proposal_id, getattr(users, who))


async def test_missing_proposal_is_not_found(policy, users):
    with pytest.raises(NotFound):
        await policy.view(777, users.freelancer)


async def test_create_requires_open_project(policy, users, make_project):
    closed = await make_project(users.client.id, status="completed")

    with pytest.raises(ValidationRejected) as exc:
        await policy.create(
            users.freelancer, {"project_id": closed, "cover_letter": "hi", "bid_amount": 10}
        )
    assert exc.value.reason == "project_not_open"


async def test_create_on_missing_project_is_not_found(policy, users):
    with pytest.raises(NotFound):
        await policy.create(
            users.freelancer, {"project_id": 404, "cover_letter": "hi", "bid_amount": 10}
        )


async def test_create_requires_freelancer(policy, users, project_id):
    with pytest.raises(Forbidden):
        await policy.create(
            users.client, {"project_id": project_id, "cover_letter": "hi", "bid_amount": 10}
        )


async def test_duplicate_proposals_are_allowed(policy, users, project_id):
    data = {"project_id": project_id, "cover_letter": "hi", "bid_amount": 150}
    first = await policy.create(users.freelancer, data)
    second = await policy.create(users.freelancer, data)

    assert first["id"] != second["id"]
    assert second["status"] == "pending"
    assert len(await policy.list_by_project(project_id)) == 2


async def test_update_by_author_writes_present_fields(policy, users, proposal_id):
    updated = await policy.update(proposal_id, users.freelancer, {"bid_amount": 275})

    assert updated["bid_amount"] == 275
    assert updated["cover_letter"] == "I can do it"


async def test_update_by_other_freelancer_is_forbidden(policy, users, proposal_id):
    with pytest.raises(Forbidden):
        await policy.update(proposal_id, users.other_freelancer, {"bid_amount": 1})


async def test_delete_by_author_removes_row(policy, users, proposal_id, store):
    await policy.delete(proposal_id, users.freelancer)

    assert await store.query_one("SELECT id FROM proposals WHERE id = :id", {"id": proposal_id}) is None


async def test_delete_by_project_client_is_forbidden(policy, users, proposal_id):
    with pytest.raises(Forbidden):
        await policy.delete(proposal_id, users.client)


async def test_listings_are_ordered_newest_first(policy, users, project_id, make_proposal):
    first = await make_proposal(project_id, users.freelancer.id)
    second = await make_proposal(project_id, users.other_freelancer.id)
    third = await make_proposal(project_id, users.freelancer.id)

    by_project = await policy.list_by_project(project_id)
    by_freelancer = await policy.list_by_freelancer(users.freelancer.id)

    assert [r["id"] for r in by_project] == [third, second, first]
    assert [r["id"] for r in by_freelancer] == [third, first]


async def test_is_party(policy, users, proposal_id):
    assert await policy.is_party(proposal_id, users.freelancer.id) is True
    assert await policy.is_party(proposal_id, users.client.id) is True
    assert await policy.is_party(proposal_id, users.other_client.id) is False
    assert await policy.is_party(9000, users.freelancer.id) is False
