"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- El invariante de longitudes iguales se valida en un único sitio.
- Los modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class NumberPair(BaseModel):
    """Las dos columnas de enteros extraídas del input del puzzle.

    `left[i]` y `right[i]` provienen de la misma línea, en el orden del input.
    """

    model_config = ConfigDict(frozen=True)

    left: list[int] = Field(
        default_factory=list,
        description="Valores de la columna izquierda, en orden de línea.",
    )
    right: list[int] = Field(
        default_factory=list,
        description="Valores de la columna derecha, en orden de línea.",
    )

    @model_validator(mode="after")
    def _check_lengths(self) -> "NumberPair":
        if len(self.left) != len(self.right):
            raise ValueError(
                f"left and right must have the same length "
                f"({len(self.left)} != {len(self.right)})"
            )
        return self
