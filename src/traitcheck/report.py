"""Report rendering for analysis results.

Provides the fixed-layout plain-text report (for download/export) and Rich
terminal displays of the final verdict and of intermediate stages (chunks,
traits). Rendering is layered on the AnalysisResult shape and adds no
analytical logic.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from traitcheck.analysis.schemas import AnalysisResult, Chunk, Trait, TraitLevel

logger = logging.getLogger(__name__)

_LEVEL_STYLES = {
    TraitLevel.LOW: "green",
    TraitLevel.MEDIUM: "yellow",
    TraitLevel.HIGH: "red",
}


def decision_label(result: AnalysisResult) -> str:
    """``"CONSISTENT (1)"`` or ``"CONTRADICTORY (0)"``."""
    return "CONSISTENT (1)" if result.is_consistent else "CONTRADICTORY (0)"


def format_text_report(result: AnalysisResult) -> str:
    """Render the plain-text analysis report.

    Layout: title, character, decision, contradiction count, explanation,
    per-claim detail, then one line per extracted trait.

    Args:
        result: Completed analysis.

    Returns:
        Report text ending with a newline.
    """
    lines: list[str] = [
        "CHARACTER ANALYSIS REPORT",
        "========================",
        "",
        f"Character: {result.character_name}",
        f"Final Decision: {decision_label(result)}",
        f"Contradictions Found: {result.contradiction_count}",
        "",
        "EXPLANATION:",
        result.explanation,
        "",
        "DETAILED ANALYSIS:",
    ]

    for comp in result.comparisons:
        lines.append("")
        lines.append(f'Claim: "{comp.claim_text}"')
        lines.append(f"Status: {'SUPPORTED' if comp.supported else 'CONTRADICTED'}")
        if comp.contradiction_notes:
            lines.append(f"Details: {', '.join(comp.contradiction_notes)}")

    lines.append("")
    lines.append("EXTRACTED TRAITS:")
    for trait in result.traits:
        lines.append(f"{trait.type.value}: {trait.level.value.upper()}")

    return "\n".join(lines) + "\n"


def report_filename(result: AnalysisResult) -> str:
    """Default report filename: ``<character>-analysis-report.txt``."""
    safe_name = re.sub(r"[^\w.-]+", "_", result.character_name.strip()) or "character"
    return f"{safe_name}-analysis-report.txt"


def write_text_report(
    result: AnalysisResult, output_path: Path | str | None = None
) -> Path:
    """Write the plain-text report to disk.

    Args:
        result: Completed analysis.
        output_path: Optional output file path. Defaults to
                     report_filename(result) in the current directory.

    Returns:
        Path to the written report.
    """
    if output_path is None:
        output_path = Path(report_filename(result))
    else:
        output_path = Path(output_path)

    output_path.write_text(format_text_report(result), encoding="utf-8")
    logger.info("Wrote analysis report to %s", output_path)
    return output_path


def _level_markup(level: TraitLevel) -> str:
    style = _LEVEL_STYLES[level]
    return f"[{style}]{level.value.upper()}[/{style}]"


def display_traits(traits: Sequence[Trait], console: Console | None = None) -> None:
    """Display aggregated traits with their levels and evidence."""
    con = console or Console()

    table = Table(title="Extracted Traits", show_header=True)
    table.add_column("Trait", style="cyan bold")
    table.add_column("Level", justify="center")
    table.add_column("Evidence")

    for trait in traits:
        evidence = "\n".join(f"- {e}" for e in trait.evidence) or "[dim]none[/dim]"
        table.add_row(trait.type.value, _level_markup(trait.level), evidence)

    con.print(table)


def display_chunks(
    chunks: Sequence[Chunk],
    console: Console | None = None,
    preview_chars: int = 80,
) -> None:
    """Display a chunk listing with word counts and a short text preview."""
    con = console or Console()

    if not chunks:
        con.print("[yellow]No chunks produced (empty story text).[/yellow]")
        return

    table = Table(title=f"Story Chunks ({len(chunks)})", show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Chapter", justify="right")
    table.add_column("Order", justify="right")
    table.add_column("Words", justify="right")
    table.add_column("Preview")

    for chunk in chunks:
        preview = chunk.text[:preview_chars]
        if len(chunk.text) > preview_chars:
            preview += "..."
        table.add_row(
            chunk.id, str(chunk.chapter), str(chunk.order),
            str(chunk.word_count), preview,
        )

    con.print(table)


def display_result(result: AnalysisResult, console: Console | None = None) -> None:
    """Display the verdict, explanation, per-claim comparison and traits.

    Args:
        result: Completed analysis.
        console: Optional Console for testing (defaults to a new Console).
    """
    con = console or Console()

    style = "green" if result.is_consistent else "red"
    con.print(
        Panel(
            f"[bold {style}]{decision_label(result)}[/bold {style}]\n"
            f"Contradictions found: {result.contradiction_count}",
            title=f"Final Decision: {result.character_name}",
            border_style=style,
        )
    )
    con.print(Panel(result.explanation, title="Explanation", border_style="cyan"))

    if result.comparisons:
        table = Table(title="Claim Comparison", show_header=True)
        table.add_column("Claim", style="bold")
        table.add_column("Trait")
        table.add_column("Expected", justify="center")
        table.add_column("Status", justify="center")
        table.add_column("Details")

        for claim, comp in zip(result.claims, result.comparisons):
            status = (
                "[green]SUPPORTED[/green]" if comp.supported
                else "[red]CONTRADICTED[/red]"
            )
            table.add_row(
                comp.claim_text,
                claim.trait,
                claim.expected_level.value,
                status,
                ", ".join(comp.contradiction_notes),
            )
        con.print(table)
    else:
        con.print("[dim]No claims were provided.[/dim]")

    display_traits(result.traits, con)
