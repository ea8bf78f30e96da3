# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/security.py

Utilidades de seguridad de FreelanceHub.

Incluye:
- Hasheo y verificación de contraseñas (Argon2id via passlib)
- Emisión y decodificación de JWT de acceso (python-jose)

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
import logging
import uuid

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from app.shared.config import settings

logger = logging.getLogger(__name__)

# ===== PASSWORD HASHING (Argon2id) =====
# Tope de longitud contra payloads gigantes
MAX_PASSWORD_LENGTH = 1024

pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
    argon2__type="ID",
    argon2__memory_cost=65536,  # 64 MB
    argon2__time_cost=3,
    argon2__parallelism=2,
)


class PasswordTooLongError(ValueError):
    """Contraseña excede el límite máximo permitido."""


def hash_password(password: str) -> str:
    if len(password) > MAX_PASSWORD_LENGTH:
        raise PasswordTooLongError(
            f"Password cannot exceed {MAX_PASSWORD_LENGTH} characters"
        )
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """False para contraseñas demasiado largas o hashes ilegibles."""
    if len(plain_password) > MAX_PASSWORD_LENGTH:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("verify_password: unrecognized hash format")
        return False


# ===== JWT TOKENS =====
ACCESS_TOKEN_TYPE = "access"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(
    user_id: int,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Crea un JWT de acceso firmado.

    Payload: sub (user id como texto), role, exp, iat, jti, token_type.
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    iat = _now_utc()
    payload = {
        "sub": str(user_id),
        "role": role,
        "exp": iat + expires_delta,
        "iat": iat,
        "jti": str(uuid.uuid4()),
        "token_type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Decodifica y valida un JWT de acceso.

    Returns:
        Payload si firma, expiración y tipo son válidos; None en otro caso.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        logger.debug("decode_access_token: token expirado")
        return None
    except JWTError as e:
        logger.debug("decode_access_token: token inválido (%s)", e)
        return None

    if payload.get("token_type") != ACCESS_TOKEN_TYPE:
        return None
    return payload


__all__ = [
    "MAX_PASSWORD_LENGTH",
    "PasswordTooLongError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_access_token",
]
