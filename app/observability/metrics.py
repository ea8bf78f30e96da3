# -*- coding: utf-8 -*-
"""
backend/app/observability/metrics.py

Collectors Prometheus del dominio de acceso.

Se crean con get_or_create_* para que reimportar el módulo (tests,
recarga en dev) no dispare "Duplicated timeseries in CollectorRegistry".

Autor: Equipo FreelanceHub
Fecha: 2026-03-06
"""
from __future__ import annotations

from prometheus_client import REGISTRY, Counter, Histogram


def _get_existing_metric(name: str):
    names_to_collectors = getattr(REGISTRY, "_names_to_collectors", {})
    return names_to_collectors.get(name)


def get_or_create_counter(name: str, description: str, labelnames: tuple = ()) -> Counter:
    """Obtiene el contador registrado con ese nombre o lo crea."""
    existing = _get_existing_metric(name)
    if existing is not None:
        return existing
    try:
        return Counter(name, description, labelnames=labelnames)
    except ValueError:
        return _get_existing_metric(name)


def get_or_create_histogram(name: str, description: str, labelnames: tuple = ()) -> Histogram:
    existing = _get_existing_metric(name)
    if existing is not None:
        return existing
    try:
        return Histogram(name, description, labelnames=labelnames)
    except ValueError:
        return _get_existing_metric(name)


# resource: project|proposal|file  action: view|update|delete|create|upload
access_denied_total = get_or_create_counter(
    "freelancehub_access_denied_total",
    "Access policy denials by resource and action",
    ("resource", "action"),
)

login_rate_limited_total = get_or_create_counter(
    "freelancehub_login_rate_limited_total",
    "Login attempts rejected by the rate limiter",
)

# outcome: deleted|pending|reconciled
files_delete_total = get_or_create_counter(
    "freelancehub_files_delete_total",
    "File deletions by outcome",
    ("outcome",),
)

upload_rejected_total = get_or_create_counter(
    "freelancehub_upload_rejected_total",
    "Uploads rejected by validation reason",
    ("reason",),
)

search_degraded_total = get_or_create_counter(
    "freelancehub_project_search_degraded_total",
    "Project searches that degraded to an empty result after a query failure",
)


def record_denial(resource: str, action: str) -> None:
    access_denied_total.labels(resource=resource, action=action).inc()


__all__ = [
    "get_or_create_counter",
    "get_or_create_histogram",
    "access_denied_total",
    "login_rate_limited_total",
    "files_delete_total",
    "upload_rejected_total",
    "search_degraded_total",
    "record_denial",
]
