"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza headers y redirects para cualquier petición de la herramienta.
- Facilita testeo: se puede inyectar un `transport` (p.ej. `httpx.MockTransport`).

Timeouts, retries y pooling se dejan en los defaults de httpx.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los headers de la aplicación."""

    settings = settings or AppSettings.load()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/plain,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.Client(
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )
