"""CLI entry point for traitcheck.

Provides commands:
  - analyze: Check a character's backstory claims against a story
  - chunks: Preview how a story is split into chunks
  - traits: Show the trait levels observed in a story
  - sample: Run the bundled demo scenario
  - wizard: Walk through the analysis one step at a time
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from traitcheck.analysis.chunker import split_into_chunks
from traitcheck.analysis.extractor import extract_all_actions
from traitcheck.analysis.schemas import AnalysisResult, Claim, TraitLevel, TraitType
from traitcheck.analysis.traits import build_traits
from traitcheck.claims import ClaimsFileError, load_claims
from traitcheck.config import AnalysisConfig, load_analysis_config
from traitcheck.report import display_chunks, display_result, display_traits, write_text_report
from traitcheck.services import AnalysisService

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="traitcheck - Detect contradictions between a character's backstory and their behavior",
    rich_markup_mode="rich",
)
console = Console()


@app.callback()
def app_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging from the pipeline"),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    if verbose:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setLevel(logging.DEBUG)
        pkg_logger = logging.getLogger("traitcheck")
        pkg_logger.addHandler(handler)
        pkg_logger.setLevel(logging.DEBUG)


def _read_story(path: Path) -> str:
    """Read story text with UTF-8, falling back to latin-1."""
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning("UTF-8 decode failed for %s, falling back to latin-1", path)
        return path.read_text(encoding="latin-1")


def _build_config(
    config_path: Path | None,
    seed: int | None,
    min_words: int | None,
    max_words: int | None,
) -> AnalysisConfig:
    """Load file config, then apply command-line overrides."""
    try:
        base = load_analysis_config(config_path)
        return AnalysisConfig(
            min_words=min_words if min_words is not None else base.min_words,
            max_words=max_words if max_words is not None else base.max_words,
            seed=seed if seed is not None else base.seed,
        )
    except (ValueError, OSError) as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(code=1)


def _finish(result: AnalysisResult, report: Path | None, as_json: bool) -> None:
    """Print the result and optionally write the text report."""
    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        display_result(result, console)

    if report is not None:
        path = write_text_report(result, report)
        if not as_json:
            console.print(f"\n[dim]Report written to[/dim] [bold]{path}[/bold]")


StoryArg = Annotated[
    Path,
    typer.Argument(help="Path to the story text file", exists=True, dir_okay=False, readable=True),
]
SeedOpt = Annotated[
    int | None,
    typer.Option("--seed", help="Seed for reproducible chunk boundaries"),
]
MinWordsOpt = Annotated[
    int | None,
    typer.Option("--min-words", help="Minimum words before a chunk may end early"),
]
MaxWordsOpt = Annotated[
    int | None,
    typer.Option("--max-words", help="Maximum words per chunk"),
]
ConfigOpt = Annotated[
    Path | None,
    typer.Option("--config", help="Path to analysis_config.json"),
]


@app.command()
def analyze(
    story: StoryArg,
    character: Annotated[
        str,
        typer.Option("--character", "-c", help="Name of the character to analyze"),
    ],
    claims_path: Annotated[
        Path,
        typer.Option("--claims", "-C", help="JSON file with backstory claims"),
    ],
    seed: SeedOpt = None,
    min_words: MinWordsOpt = None,
    max_words: MaxWordsOpt = None,
    config_path: ConfigOpt = None,
    report: Annotated[
        Path | None,
        typer.Option("--report", "-r", help="Write the plain-text report to this path"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the full result as JSON"),
    ] = False,
) -> None:
    """Check backstory claims for a character against the story's evidence."""
    config = _build_config(config_path, seed, min_words, max_words)

    try:
        claims = load_claims(claims_path)
    except ClaimsFileError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    novel_text = _read_story(story)
    service = AnalysisService(config)

    try:
        result = asyncio.run(service.analyze(novel_text, character, claims))
    except Exception as e:
        logger.exception("Analysis failed for %s", character)
        console.print(f"[red]Analysis failed:[/red] {e}. Please try again.")
        raise typer.Exit(code=1)

    _finish(result, report, as_json)


@app.command()
def chunks(
    story: StoryArg,
    seed: SeedOpt = None,
    min_words: MinWordsOpt = None,
    max_words: MaxWordsOpt = None,
    config_path: ConfigOpt = None,
) -> None:
    """Preview how the story is split into chunks."""
    config = _build_config(config_path, seed, min_words, max_words)
    story_chunks = split_into_chunks(
        _read_story(story),
        min_words=config.min_words,
        max_words=config.max_words,
        rng=config.make_rng(),
    )
    display_chunks(story_chunks, console)


@app.command()
def traits(
    story: StoryArg,
    seed: SeedOpt = None,
    min_words: MinWordsOpt = None,
    max_words: MaxWordsOpt = None,
    config_path: ConfigOpt = None,
) -> None:
    """Show the trait levels observed in the story, without claims."""
    config = _build_config(config_path, seed, min_words, max_words)
    story_chunks = split_into_chunks(
        _read_story(story),
        min_words=config.min_words,
        max_words=config.max_words,
        rng=config.make_rng(),
    )
    actions = extract_all_actions(story_chunks)
    console.print(
        f"[dim]{len(story_chunks)} chunks, {len(actions)} action records[/dim]"
    )
    display_traits(build_traits(actions), console)


@app.command()
def sample(
    seed: SeedOpt = None,
    report: Annotated[
        Path | None,
        typer.Option("--report", "-r", help="Write the plain-text report to this path"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the full result as JSON"),
    ] = False,
) -> None:
    """Run the bundled "Marcus" demo story and claims."""
    from traitcheck.samples import SAMPLE_CHARACTER, SAMPLE_CLAIMS, SAMPLE_NOVEL

    service = AnalysisService(AnalysisConfig(seed=seed))
    result = asyncio.run(service.analyze(SAMPLE_NOVEL, SAMPLE_CHARACTER, SAMPLE_CLAIMS))
    _finish(result, report, as_json)


def _prompt_claims() -> list[Claim]:
    """Interactively collect claims until the user enters a blank claim."""
    trait_names = ", ".join(t.value for t in TraitType)
    level_names = ", ".join(lvl.value for lvl in TraitLevel)
    claims: list[Claim] = []

    while True:
        text = typer.prompt("Claim (blank to finish)", default="", show_default=False)
        if not text.strip():
            return claims
        trait = typer.prompt(f"  Trait ({trait_names})")
        level = typer.prompt(f"  Expected level ({level_names})")
        try:
            claims.append(Claim(text=text.strip(), trait=trait.strip(), expected_level=level.strip().lower()))
        except ValidationError:
            console.print(f"[red]Expected level must be one of: {level_names}[/red]")


@app.command()
def wizard(
    story: Annotated[
        Path | None,
        typer.Argument(help="Story text file (prompted for when omitted)"),
    ] = None,
    claims_path: Annotated[
        Path | None,
        typer.Option("--claims", "-C", help="JSON file with backstory claims"),
    ] = None,
    seed: SeedOpt = None,
) -> None:
    """Walk through the analysis one step at a time."""
    from traitcheck.wizard import WizardInputError, WizardSession

    session = WizardSession(AnalysisConfig(seed=seed))

    while not session.is_complete:
        console.rule(f"Step {session.step} of 8: {session.step_label}")
        try:
            if session.state == "store_story":
                path = story or Path(typer.prompt("Path to story text file"))
                session.novel_text = _read_story(path)
            elif session.state == "find_character":
                console.print(f"[dim]{len(session.chunks)} chunks stored[/dim]")
                session.character_name = typer.prompt("Main character name")
            elif session.state == "extract_actions":
                display_chunks(session.chunks, console)
            elif session.state == "build_traits":
                console.print(f"[dim]{len(session.actions)} action records extracted[/dim]")
            elif session.state == "get_claims":
                display_traits(session.traits, console)
                if claims_path is not None:
                    session.set_claims(load_claims(claims_path))
                else:
                    session.set_claims(_prompt_claims())
            elif session.state == "compare":
                for claim in session.claims:
                    console.print(f"  - {claim.text} [dim]({claim.trait}, {claim.expected_level.value})[/dim]")
            elif session.state == "final_decision":
                unsupported = sum(1 for c in session.comparisons if not c.supported)
                console.print(f"[dim]{unsupported} of {len(session.comparisons)} claims unsupported[/dim]")

            if session.step > 1 and not typer.confirm("Continue?", default=True):
                session.back()
                # Prompt again for the input of the step we returned to
                if session.state == "store_story":
                    story = None
                elif session.state == "get_claims":
                    claims_path = None
                continue
            session.advance()
        except (WizardInputError, ClaimsFileError, OSError) as e:
            console.print(f"[red]{e}[/red]")
            # Fall back to prompting on retry
            story = None
            claims_path = None
            if not typer.confirm("Try again?", default=True):
                raise typer.Exit(code=1)

    display_result(session.result, console)
    console.print(Panel("Analysis complete.", border_style="green"))
