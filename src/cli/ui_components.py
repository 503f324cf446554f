"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas entre `main` y `doctor`.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from core.scoring import frequency_table
from core.services.similarity_pipeline import PipelineResult


def print_error(console: Console, message: str) -> None:
    """Imprime un error de una línea; el mensaje puede contener corchetes."""

    console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)


def build_summary_table(result: PipelineResult) -> Table:
    """Tabla de detalle para `--details`."""

    table = Table(title="Similarity")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Endpoint", result.endpoint)
    table.add_row("Pairs", str(len(result.pair.left)))
    table.add_row("Distinct right values", str(len(frequency_table(result.pair.right))))
    table.add_row("Score", str(result.score))
    return table
