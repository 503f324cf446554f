"""Similarity score entre las dos columnas.

score = sum(v * apariciones_en_right(v) for v in left)

Solo importa el multiconjunto de cada columna: ni el orden ni el
emparejamiento entre columnas cambian el resultado.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def frequency_table(values: Iterable[int]) -> Counter[int]:
    """Valor -> número de apariciones. Los valores ausentes cuentan 0."""

    return Counter(values)


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    counts = frequency_table(right)
    return sum(value * counts[value] for value in left)
