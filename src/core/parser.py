"""Parser del input de dos columnas.

Formato esperado: una pareja de enteros en base 10 por línea, separados por
espacios en blanco. Cualquier línea mal formada aborta el parseo completo.
"""

from __future__ import annotations

import logging
import re

from core.domain.errors import ParseError
from core.domain.models import NumberPair

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int(token: str) -> int:
    # int() alone would also accept "1_000" and non-ASCII digits.
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"invalid literal for base-10 integer: {token!r}")
    return int(token)


def parse_input(raw: bytes | str) -> NumberPair:
    """Convierte el input crudo en dos columnas paralelas de enteros.

    Un input vacío (o solo espacios) produce dos listas vacías. Una línea en
    blanco en medio del input sí es un error: no tiene exactamente dos tokens.
    """

    if isinstance(raw, bytes):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ParseError(f"input is not valid UTF-8: {exc}") from exc
    else:
        text = raw

    text = text.strip()
    if not text:
        logger.debug("empty input, no pairs parsed")
        return NumberPair(left=[], right=[])

    left: list[int] = []
    right: list[int] = []
    for line_number, line in enumerate(text.split("\n"), start=1):
        tokens = line.split()
        if len(tokens) != 2:
            raise ParseError(
                f"invalid input line {line_number}: {line!r}",
                line=line,
                line_number=line_number,
            )
        try:
            lhs, rhs = _to_int(tokens[0]), _to_int(tokens[1])
        except ValueError as exc:
            raise ParseError(
                f"invalid number on line {line_number}: {exc}",
                line=line,
                line_number=line_number,
                value=next(t for t in tokens if not _INTEGER.fullmatch(t)),
            ) from exc
        left.append(lhs)
        right.append(rhs)

    logger.debug("parsed %d pairs", len(left))
    return NumberPair(left=left, right=right)
