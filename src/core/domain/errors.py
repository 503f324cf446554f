"""Taxonomía de errores compartida por todas las etapas del pipeline.

Por qué una jerarquía propia:
- Cada etapa lanza su error y nunca se recupera localmente.
- La CLI es el único sitio que los captura, los reporta y sale con status 1.
"""

from __future__ import annotations


class SimilarityError(Exception):
    """Base de los errores que la CLI sabe reportar."""


class ConfigError(SimilarityError):
    """Falta configuración obligatoria (la cookie de sesión) o es inválida."""


class FetchError(SimilarityError):
    """No se pudo obtener el input del puzzle.

    `status` es `None` cuando el fallo ocurrió en la capa de transporte y no
    llegó ninguna respuesta HTTP.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body


class ParseError(SimilarityError):
    """El input crudo no sigue el formato de dos columnas de enteros."""

    def __init__(
        self,
        message: str,
        *,
        line: str | None = None,
        line_number: int | None = None,
        value: str | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.line_number = line_number
        self.value = value
