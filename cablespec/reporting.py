"""Tabular display of cable specifications using rich."""

from typing import Iterable, Optional

from rich.console import Console
from rich.table import Table

from .engine import sort_cables
from .models import CableSpec, format_section


def _role(count: int, section: float) -> str:
    """Format one conductor role as '3×120', or '-' if absent."""
    if count <= 0:
        return "-"
    return f"{count}×{format_section(section)}"


def build_cable_table(
    specs: Optional[Iterable[Optional[CableSpec]]],
    title: str = "Cable Specifications",
) -> Table:
    """
    Build a rich table with one row per cable, in the order given.

    Args:
        specs: Cable specifications; None input or None entries are skipped
        title: Table title

    Returns:
        rich Table ready to print
    """
    table = Table(title=title)
    table.add_column("Model", style="cyan")
    table.add_column("Category")
    table.add_column("Spec", style="bold")
    table.add_column("Bundles", justify="right")
    table.add_column("Phase", justify="right")
    table.add_column("Neutral", justify="right")
    table.add_column("PE", justify="right")
    table.add_column("Control", justify="right")

    for spec in specs or ():
        if spec is None:
            continue
        if spec.is_twisted_pair:
            control = f"{spec.twisted_pair_count}P×{format_section(spec.pair_core_section)}"
        else:
            control = _role(spec.control_core_count, spec.control_core_section)
        table.add_row(
            spec.model or "",
            spec.cable_type,
            spec.describe(),
            str(spec.bundle_count),
            _role(spec.phase_core_count, spec.phase_core_section),
            _role(spec.neutral_core_count, spec.neutral_core_section),
            _role(spec.protect_core_count, spec.protect_core_section),
            control,
        )

    return table


def print_cable_report(
    specs: Optional[Iterable[Optional[CableSpec]]],
    console: Optional[Console] = None,
    sort: bool = True,
    title: str = "Cable Specifications",
) -> Table:
    """Print cables as a table, sorted power-first unless sort is False."""
    console = console or Console()
    rows = sort_cables(specs) if sort else list(specs or ())
    table = build_cable_table(rows, title=title)
    console.print(table)
    return table
