"""Orquestación fetch -> parse -> score.

La CLI delega aquí todo el flujo para que la presentación (rich, exit codes)
quede fuera de la lógica y el pipeline pueda probarse con un fetcher falso.
Cada etapa lanza su propio error; ninguna etapa posterior se ejecuta tras un fallo.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from adapters.advent_input import AdventInputFetcher, build_input_url
from core.config import AppSettings
from core.domain.models import NumberPair
from core.interfaces.fetcher import InputFetcher
from core.parser import parse_input
from core.scoring import similarity_score

logger = logging.getLogger(__name__)

PUZZLE_YEAR = 2024
PUZZLE_DAY = 1


@dataclass
class PipelineResult:
    """Output of a pipeline invocation."""

    endpoint: str
    pair: NumberPair
    score: int


def run_similarity(
    settings: AppSettings,
    fetcher: InputFetcher | None = None,
) -> PipelineResult:
    """Ejecuta el pipeline completo una vez.

    La credencial se valida antes de construir el fetcher, así que un
    `ConfigError` nunca va precedido de tráfico de red.
    """

    credential = settings.require_session()
    endpoint = build_input_url(settings.base_url, PUZZLE_YEAR, PUZZLE_DAY)

    if fetcher is None:
        fetcher = AdventInputFetcher(settings)
    raw = fetcher.fetch(endpoint, credential)
    logger.info("fetched %d bytes from %s", len(raw), endpoint)

    pair = parse_input(raw)
    score = similarity_score(pair.left, pair.right)
    return PipelineResult(endpoint=endpoint, pair=pair, score=score)
