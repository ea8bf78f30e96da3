# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para FreelanceHub.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Equipo FreelanceHub
Fecha: 2026-03-02
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, SecretStr, computed_field
from pydantic_settings import BaseSettings


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="FreelanceHub", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["plain", "pretty", "json"] = Field(default="plain", validation_alias="LOG_FORMAT")

    # =========================
    # Base de datos (PostgreSQL)
    # =========================
    db_user: str = Field(default="postgres", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("postgres"), validation_alias="DB_PASSWORD")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="freelancehub", validation_alias="DB_NAME")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_sslmode: str = Field(default="prefer", validation_alias="DB_SSLMODE")  # prefer|require|disable
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")
    # Crea las tablas al arrancar (solo dev; en prod el esquema viene de migraciones SQL)
    db_auto_create: bool = Field(default=False, validation_alias="DB_AUTO_CREATE")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        Genera la URL de conexión completa para SQLAlchemy async.
        Prioriza DB_URL si existe, sino construye desde componentes individuales.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            url = (
                self.db_url.replace("postgres://", "postgresql+asyncpg://")
                .replace("postgresql://", "postgresql+asyncpg://")
            )
            # sslmode solo aplica a Postgres; SQLite (tests/dev local) no lo acepta
            if url.startswith("postgresql") and "sslmode=" not in url and self.db_sslmode:
                sep = "&" if "?" in url else "?"
                url = f"{url}{sep}sslmode={self.db_sslmode}"
            return url

        pw = quote_plus(self.db_password.get_secret_value())
        return (
            f"postgresql+asyncpg://{self.db_user}:{pw}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_sslmode}"
        )

    # =========================
    # Redis (opcional, rate limit compartido entre instancias)
    # =========================
    redis_url: Optional[str] = Field(default=None, validation_alias="REDIS_URL")
    # Confiar en X-Forwarded-For / X-Real-IP (solo detrás de un proxy propio)
    trust_proxy_headers: bool = Field(default=False, validation_alias="TRUST_PROXY_HEADERS")

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")
    frontend_url: str = Field(default="http://localhost:5173", validation_alias="FRONTEND_URL")

    # =========================
    # Auth / JWT
    # =========================
    jwt_secret_key: SecretStr = Field(default=SecretStr("please-change-me"), validation_alias="JWT_SECRET_KEY")
    jwt_algorithm: Literal["HS256", "RS256"] = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=60, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    # Rate limiting para login (clave ip:email)
    rate_limit_enabled: bool = Field(default=True, validation_alias="RATE_LIMIT_ENABLED")
    login_attempts_limit: int = Field(default=5, validation_alias="LOGIN_ATTEMPTS_LIMIT")
    login_attempts_time_window_minutes: int = Field(default=15, validation_alias="LOGIN_ATTEMPTS_TIME_WINDOW_MINUTES")
    rate_limit_sweep_interval_minutes: int = Field(default=5, validation_alias="RATE_LIMIT_SWEEP_INTERVAL_MINUTES")

    # =========================
    # Archivos
    # =========================
    upload_dir: Path = Field(default=Path("./public/uploads"), validation_alias="UPLOAD_DIR")
    upload_max_bytes: int = Field(default=10 * 1024 * 1024, validation_alias="UPLOAD_MAX_BYTES")
    files_reconcile_interval_minutes: int = Field(default=30, validation_alias="FILES_RECONCILE_INTERVAL_MINUTES")

    # =========================
    # Scheduler
    # =========================
    scheduler_enabled: bool = Field(default=True, validation_alias="SCHEDULER_ENABLED")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @computed_field  # type: ignore[misc]
    @property
    def jwt_secret(self) -> str:
        """Alias de compatibilidad: jwt_secret_key -> jwt_secret"""
        return self.jwt_secret_key.get_secret_value()

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        jwt_key = self.jwt_secret_key.get_secret_value()
        weak_key = not jwt_key or jwt_key == "please-change-me" or len(jwt_key) < 32

        if self.is_prod:
            if weak_key:
                raise ValueError("JWT_SECRET_KEY debe tener ≥32 caracteres en producción")
            if self.db_sslmode != "require":
                raise ValueError("DB_SSLMODE debe ser 'require' en producción")
            if not self.redis_url:
                # El limitador en memoria no se comparte entre instancias
                logger.warning("REDIS_URL no configurado: rate limit de login local a esta instancia")

        if self.is_dev and weak_key:
            logger.info("JWT_SECRET_KEY es débil o usa valor por defecto - considera usar una clave más segura")

        if self.login_attempts_limit < 1 or self.login_attempts_time_window_minutes < 1:
            raise ValueError("LOGIN_ATTEMPTS_LIMIT y LOGIN_ATTEMPTS_TIME_WINDOW_MINUTES deben ser ≥1")


__all__ = ["BaseAppSettings", "EnvName"]

# Fin del archivo backend/app/shared/config/settings_base.py
