# -*- coding: utf-8 -*-
"""
backend/app/modules/auth/routes/auth_routes.py

Rutas de autenticación:
- POST /auth/login     (limitado por ip:email, 5 intentos / 15 min)
- POST /auth/register  (alta de client/freelancer)
- GET  /auth/me

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.auth.dependencies import get_current_user
from app.modules.auth.schemas import LoginRequest, LoginResponse, RegisterRequest, UserOut
from app.modules.auth.services.user_service import UserService
from app.shared.auth_context import Principal
from app.shared.database import EntityStore, get_db
from app.shared.security.rate_limit_dep import enforce_login_rate_limit
from app.shared.utils.security import create_access_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(EntityStore(db))


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Inicio de sesión",
    dependencies=[Depends(enforce_login_rate_limit)],
)
async def login(
    payload: LoginRequest,
    users: UserService = Depends(get_user_service),
):
    """
    Verifica credenciales y emite un JWT de acceso.

    Cada intento (exitoso o no) consume uno de la ventana; un login
    exitoso no devuelve intentos.
    """
    user = await users.authenticate(payload.email, payload.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    token = create_access_token(user["id"], user["role"])
    return LoginResponse(access_token=token, user=UserOut.model_validate(user))


@router.post(
    "/register",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Registro de usuario",
)
async def register(
    payload: RegisterRequest,
    users: UserService = Depends(get_user_service),
):
    user = await users.register(
        email=payload.email,
        password=payload.password,
        full_name=payload.full_name,
        role=payload.role,
        avatar_url=payload.avatar_url,
    )
    return UserOut.model_validate(user)


@router.get("/me", response_model=UserOut, summary="Perfil del usuario autenticado")
async def me(
    principal: Principal = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    user = await users.get_by_id(principal.id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return UserOut.model_validate(user)


# Fin del archivo backend/app/modules/auth/routes/auth_routes.py
