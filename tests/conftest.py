# backend/tests/conftest.py
# -*- coding: utf-8 -*-
"""
Config global de tests para FreelanceHub.

- PYTHON_ENV=test ANTES de importar app.* (settings en SQLite en memoria,
  scheduler apagado)
- Engine aiosqlite en memoria por test con el esquema de Base.metadata
- EntityStore sobre una sesión del mismo engine para tests de políticas
- Cliente httpx contra la app con LifespanManager y get_db redirigido al
  engine del test
- Fábricas de filas (usuarios, proyectos, propuestas, gigs, órdenes)
"""

import os
import tempfile
from collections.abc import AsyncIterator
from types import SimpleNamespace

# -----------------------------------------------------------------------------
# 0) Entorno mínimo antes de cargar la app
# -----------------------------------------------------------------------------
os.environ["PYTHON_ENV"] = "test"
os.environ.pop("REDIS_URL", None)
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="freelancehub-uploads-"))

import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.modules.files.services.storage import LocalBlobStorage
from app.shared.auth_context import Principal, Role
from app.shared.database import EntityStore, get_db, init_models
from app.shared.utils.security import create_access_token


# -----------------------------------------------------------------------------
# 1) Base de datos
# -----------------------------------------------------------------------------
@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_models(bind=eng)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession, autoflush=False)


@pytest.fixture
async def session(session_factory) -> AsyncIterator[AsyncSession]:
    async with session_factory() as s:
        yield s


@pytest.fixture
def store(session) -> EntityStore:
    return EntityStore(session)


# -----------------------------------------------------------------------------
# 2) Fábricas de filas
# -----------------------------------------------------------------------------
async def _insert(store: EntityStore, sql: str, params: dict) -> int:
    result = await store.execute(sql, params)
    await store.commit()
    return result.last_insert_id


@pytest.fixture
def make_user(store):
    counter = {"n": 0}

    async def _make(role: Role, *, email: str | None = None, full_name: str | None = None) -> Principal:
        counter["n"] += 1
        user_id = await _insert(
            store,
            """
            INSERT INTO users (email, password_hash, full_name, role)
            VALUES (:email, :password_hash, :full_name, :role)
            RETURNING id
            """,
            {
                "email": email or f"{role.value}{counter['n']}@freelancehub.io",
                "password_hash": "not-a-real-hash",
                "full_name": full_name or f"{role.value.title()} {counter['n']}",
                "role": role.value,
            },
        )
        return Principal(id=user_id, role=role)

    return _make


@pytest.fixture
async def users(make_user) -> SimpleNamespace:
    """Elenco estándar: dos clientes, dos freelancers y un admin."""
    return SimpleNamespace(
        client=await make_user(Role.client, full_name="Carla Cliente"),
        other_client=await make_user(Role.client),
        freelancer=await make_user(Role.freelancer, full_name="Fede Freelancer"),
        other_freelancer=await make_user(Role.freelancer),
        admin=await make_user(Role.admin),
    )


@pytest.fixture
def make_project(store):
    async def _make(client_id: int, *, title: str = "Landing page", description: str = "Build a landing page",
                    budget: float = 500, status: str = "open") -> int:
        return await _insert(
            store,
            """
            INSERT INTO projects (client_id, title, description, category, budget, status)
            VALUES (:client_id, :title, :description, 'web', :budget, :status)
            RETURNING id
            """,
            {"client_id": client_id, "title": title, "description": description,
             "budget": budget, "status": status},
        )

    return _make


@pytest.fixture
def make_proposal(store):
    async def _make(project_id: int, freelancer_id: int, *, bid_amount: float = 300) -> int:
        return await _insert(
            store,
            """
            INSERT INTO proposals (project_id, freelancer_id, cover_letter, bid_amount, status)
            VALUES (:project_id, :freelancer_id, 'I can do it', :bid_amount, 'pending')
            RETURNING id
            """,
            {"project_id": project_id, "freelancer_id": freelancer_id, "bid_amount": bid_amount},
        )

    return _make


@pytest.fixture
def make_gig(store):
    async def _make(freelancer_id: int) -> int:
        return await _insert(
            store,
            "INSERT INTO gigs (freelancer_id, title) VALUES (:fid, 'Logo design') RETURNING id",
            {"fid": freelancer_id},
        )

    return _make


@pytest.fixture
def make_order(store):
    async def _make(client_id: int, freelancer_id: int) -> int:
        return await _insert(
            store,
            "INSERT INTO orders (client_id, freelancer_id) VALUES (:cid, :fid) RETURNING id",
            {"cid": client_id, "fid": freelancer_id},
        )

    return _make


# -----------------------------------------------------------------------------
# 3) App FastAPI y cliente httpx (con ciclo de vida)
# -----------------------------------------------------------------------------
@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
async def app_client(session_factory, upload_dir) -> AsyncIterator[AsyncClient]:
    """
    Cliente HTTP asíncrono contra la app con ASGITransport y gestión de
    startup/shutdown mediante asgi-lifespan.
    """
    from app.main import app

    async def _override_get_db():
        async with session_factory() as s:
            yield s

    app.dependency_overrides[get_db] = _override_get_db
    try:
        async with LifespanManager(app):
            app.state.blob_storage = LocalBlobStorage(upload_dir)
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://testserver") as client:
                yield client
    finally:
        app.dependency_overrides.clear()


def auth_headers(principal: Principal) -> dict:
    token = create_access_token(principal.id, principal.role.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for():
    return auth_headers

# Fin del archivo backend/tests/conftest.py
