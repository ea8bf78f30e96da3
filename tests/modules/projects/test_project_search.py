# -*- coding: utf-8 -*-
"""
tests/modules/projects/test_project_search.py

Búsqueda de proyectos: filtros conjuntivos, orden y degradación a [].
"""

import pytest
from sqlalchemy.exc import OperationalError

from app.modules.projects.facades import ProjectAccessPolicy
from app.modules.projects.schemas import ProjectSearchIn


@pytest.fixture
def policy(store):
    return ProjectAccessPolicy(store)


@pytest.fixture
async def catalog(users, make_project):
    ids = {
        "cheap_web": await make_project(users.client.id, title="Web shop", budget=100),
        "mid_mobile": await make_project(users.client.id, title="Mobile app", budget=800,
                                         description="Flutter app"),
        "big_web": await make_project(users.other_client.id, title="Web portal", budget=2000,
                                      status="in_progress"),
    }
    return ids


async def test_default_order_is_newest_first(policy, catalog):
    rows = await policy.search(ProjectSearchIn())
    assert [r["id"] for r in rows] == [catalog["big_web"], catalog["mid_mobile"], catalog["cheap_web"]]


async def test_sort_by_budget_desc(policy, catalog):
    rows = await policy.search(ProjectSearchIn(sort_by="budget"))
    assert [r["id"] for r in rows] == [catalog["big_web"], catalog["mid_mobile"], catalog["cheap_web"]]


async def test_filters_compose(policy, catalog):
    rows = await policy.search(ProjectSearchIn(query="web", status="open"))
    assert [r["id"] for r in rows] == [catalog["cheap_web"]]


async def test_text_matches_description_case_insensitive(policy, catalog):
    rows = await policy.search(ProjectSearchIn(query="FLUTTER"))
    assert [r["id"] for r in rows] == [catalog["mid_mobile"]]


async def test_budget_range(policy, catalog):
    rows = await policy.search(ProjectSearchIn(min_budget="500", max_budget="1000"))
    assert [r["id"] for r in rows] == [catalog["mid_mobile"]]


@pytest.mark.parametrize("bad", ["abc", "", "nan", "inf"])
async def test_invalid_numeric_filters_are_skipped(policy, catalog, bad):
    rows = await policy.search(ProjectSearchIn(min_budget=bad, max_budget=bad))
    assert len(rows) == 3


async def test_like_wildcards_are_literal(policy, catalog):
    rows = await policy.search(ProjectSearchIn(query="%"))
    assert rows == []


async def test_rows_carry_client_name(policy, catalog):
    rows = await policy.search(ProjectSearchIn(query="shop"))
    assert rows[0]["client_name"] == "Carla Cliente"


async def test_query_failure_degrades_to_empty(policy, catalog, mocker):
    mocker.patch.object(
        policy.store, "query", side_effect=OperationalError("SELECT", {}, Exception("db down"))
    )
    rollback = mocker.patch.object(policy.store, "rollback", new_callable=mocker.AsyncMock)

    assert await policy.search(ProjectSearchIn(query="web")) == []
    rollback.assert_awaited_once()
