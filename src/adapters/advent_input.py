"""Fetcher del input personalizado de un puzzle.

Hace exactamente una petición GET autenticada con la cookie `session`.
Sin reintentos ni caché: cualquier fallo se convierte en `FetchError`.
"""

from __future__ import annotations

import logging

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.errors import FetchError
from core.interfaces.fetcher import InputFetcher

logger = logging.getLogger(__name__)


def build_input_url(base_url: str, year: int, day: int) -> str:
    """`https://<host>/<year>/day/<day>/input`."""

    return f"{base_url.rstrip('/')}/{year}/day/{day}/input"


def _read_error_body(response: httpx.Response) -> str:
    # Best effort: the status code is the important part of the error.
    try:
        response.read()
    except httpx.HTTPError:
        return ""
    return response.text


class AdventInputFetcher(InputFetcher):
    """Descarga el input crudo usando la cookie de sesión del usuario.

    Si no se pasa `client`, se crea uno por llamada y se cierra al terminar.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings.load()
        self._client = client

    def fetch(self, endpoint: str, credential: str) -> bytes:
        if self._client is not None:
            return self._fetch(self._client, endpoint, credential)
        with build_client(self._settings) as client:
            return self._fetch(client, endpoint, credential)

    def _fetch(self, client: httpx.Client, endpoint: str, credential: str) -> bytes:
        logger.debug("GET %s", endpoint)
        try:
            with client.stream(
                "GET", endpoint, headers={"Cookie": f"session={credential}"}
            ) as response:
                logger.debug("HTTP %s from %s", response.status_code, endpoint)
                if response.status_code != httpx.codes.OK:
                    body = _read_error_body(response)
                    raise FetchError(
                        f"HTTP request failed with status code {response.status_code}, "
                        f"response: {body.strip()}",
                        url=endpoint,
                        status=response.status_code,
                        body=body,
                    )
                return response.read()
        except httpx.HTTPError as exc:
            raise FetchError(
                f"request to {endpoint} failed: {exc}",
                url=endpoint,
            ) from exc
