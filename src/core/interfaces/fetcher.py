"""Contrato del fetcher de input.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el cliente HTTP real por un fake en tests y en el pipeline.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InputFetcher(Protocol):
    """Contrato mínimo para obtener el input crudo de un puzzle.

    Reglas de diseño:
    - `fetch` es síncrono: el programa hace una única petición y espera.
    - Falla con `FetchError`; nunca reintenta.
    """

    def fetch(self, endpoint: str, credential: str) -> bytes:
        """Descarga `endpoint` autenticándose con `credential`."""

        ...
